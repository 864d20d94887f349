"""
calnep.engines.calendar
-----------------------
The conversion engine. Binds a CalendarTable to the Gregorian timeline through
the table epoch, and translates between AD dates and BS dates.

Every conversion is a whole-day offset from the epoch (1 Baishakh of the
table's first year), measured on the Julian Day Number axis.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from ..core.errors import DateRangeError, TableError
from ..core.time import from_jdn, to_jdn
from ..core.types import BSDate, DayInfo
from .table import BS_TABLE, CalendarTable

logger = logging.getLogger(__name__)


class BSCalendar:
    """
    Translates AD dates to BS dates and back using a single CalendarTable.

    BSDate validates against the packaged BS_TABLE, so a custom table must be
    a prefix of it; otherwise valid dates would convert differently.
    """
    def __init__(self, table: CalendarTable = BS_TABLE):
        if not table.is_prefix_of(BS_TABLE):
            raise TableError(
                f"table {table.version or '<unversioned>'} is not a prefix of {BS_TABLE.version}"
            )
        self.table = table
        self.epoch_jdn = to_jdn(table.epoch)

    # ---------------------------------------------------------
    # Forward: JDN to BS
    # ---------------------------------------------------------

    def from_jdn(self, jdn: int) -> Optional[BSDate]:
        offset = jdn - self.epoch_jdn
        ymd = self.table.locate(offset)
        if ymd is None:
            logger.debug("JDN %d (offset %d) is outside the BS table", jdn, offset)
            return None
        return BSDate(*ymd)

    def to_bs(self, d: date) -> Optional[BSDate]:
        """AD date to BS date, or None before the epoch or past the table."""
        return self.from_jdn(to_jdn(d))

    # ---------------------------------------------------------
    # Inverse: BS to JDN
    # ---------------------------------------------------------

    def to_jdn(self, b: BSDate) -> int:
        if self.table.last_day(b.year, b.month) is None:
            raise DateRangeError(
                f"{b} is outside the calendar table "
                f"(BS {self.table.first_year}..{self.table.last_year})"
            )
        return self.epoch_jdn + self.table.offset_of(b.year, b.month, b.day)

    def to_ad(self, b: BSDate) -> date:
        return from_jdn(self.to_jdn(b))

    # ---------------------------------------------------------
    # Month / year boundaries
    # ---------------------------------------------------------

    def month_bounds(self, year: int, month: int) -> Dict[str, Any]:
        last = self.table.last_day(year, month)
        if last is None:
            raise KeyError(f"BS {year}-{month:02d} is not in the calendar table")
        first_jdn = self.to_jdn(BSDate(year, month, 1))
        last_jdn = first_jdn + last - 1
        return {
            "year": year,
            "month": month,
            "days": last,
            "first_jdn": first_jdn,
            "last_jdn": last_jdn,
            "first_date": from_jdn(first_jdn),
            "last_date": from_jdn(last_jdn),
        }

    def new_year_day(self, year: int) -> date:
        """AD date of 1 Baishakh of the given BS year."""
        return self.month_bounds(year, 1)["first_date"]

    def civil_month(self, year: int, month: int) -> List[Dict[str, Any]]:
        """One record per day of a BS month."""
        b = self.month_bounds(year, month)
        out = []
        for day, jdn in enumerate(range(b["first_jdn"], b["last_jdn"] + 1), start=1):
            out.append({"bs": BSDate(year, month, day), "date": from_jdn(jdn), "jdn": jdn})
        return out

    # ---------------------------------------------------------
    # High-level API methods (used by api.py / CLI)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        t = self.table
        return {
            "version": t.version,
            "first_year": t.first_year,
            "last_year": t.last_year,
            "epoch": t.epoch,
            "total_days": t.total_days,
        }

    def day_info(self, d: date, *, debug: bool = False) -> Optional[DayInfo]:
        jdn = to_jdn(d)
        b = self.from_jdn(jdn)
        if b is None:
            return None
        dbg = None
        if debug:
            dbg = {
                "jdn": jdn,
                "offset": jdn - self.epoch_jdn,
                "month_index": self.table.month_index(b.year, b.month),
            }
        return DayInfo(civil_date=d, bs=b, debug=dbg)

    def explain(self, d: date) -> Optional[Dict[str, Any]]:
        info = self.day_info(d, debug=True)
        return None if info is None else info.__dict__


_DEFAULT = BSCalendar(BS_TABLE)

def default_calendar() -> BSCalendar:
    """The calendar bound to the packaged table (built once at import)."""
    return _DEFAULT
