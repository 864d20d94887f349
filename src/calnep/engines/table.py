"""
calnep.engines.table
--------------------
The Calendar Table. An immutable, year-indexed view over the BS month-length
dataset, plus the flattened month sequence that the conversion engine walks.

Flattened index convention:
    i = (year - first_year) * 12 + (month - 1)
    cumulative[i] = sum(flattened[0..i])   (inclusive prefix sums)
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from datetime import date
from functools import cached_property
from itertools import accumulate
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.errors import TableError
from . import bs_table

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12
VALID_MONTH_LENGTHS = frozenset({29, 30, 31, 32})

# Plausible lunisolar year lengths, used only by audit().
MIN_YEAR_LENGTH = 354
MAX_YEAR_LENGTH = 385


@dataclass(frozen=True)
class CalendarTable:
    first_year: int
    rows: Tuple[Tuple[int, ...], ...]
    epoch: date
    version: str = ""

    @classmethod
    def from_rows(
        cls,
        first_year: int,
        rows: Iterable[Sequence[int]],
        epoch: date,
        version: str = "",
    ) -> "CalendarTable":
        """Build a table, rejecting rows that are not 12 valid month lengths."""
        frozen = tuple(tuple(int(n) for n in row) for row in rows)
        if not frozen:
            raise TableError("calendar table has no rows")
        for k, row in enumerate(frozen):
            year = first_year + k
            if len(row) != MONTHS_PER_YEAR:
                raise TableError(f"year {year}: expected 12 month lengths, got {len(row)}")
            bad = [n for n in row if n not in VALID_MONTH_LENGTHS]
            if bad:
                raise TableError(f"year {year}: invalid month lengths {bad}")
        table = cls(first_year=first_year, rows=frozen, epoch=epoch, version=version)
        logger.debug(
            "built calendar table %s: BS %d..%d, %d days from %s",
            version or "<unversioned>", table.first_year, table.last_year,
            table.total_days, epoch,
        )
        return table

    # ---------------------------------------------------------
    # Year / month lookups
    # ---------------------------------------------------------

    @property
    def last_year(self) -> int:
        return self.first_year + len(self.rows) - 1

    @property
    def years(self) -> range:
        return range(self.first_year, self.last_year + 1)

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, year: object) -> bool:
        return isinstance(year, int) and self.first_year <= year <= self.last_year

    def month_lengths(self, year: int) -> Optional[Tuple[int, ...]]:
        if year not in self:
            return None
        return self.rows[year - self.first_year]

    def last_day(self, year: int, month: int) -> Optional[int]:
        """Number of days in BS (year, month), or None outside the table."""
        months = self.month_lengths(year)
        if months is None or not 1 <= month <= MONTHS_PER_YEAR:
            return None
        return months[month - 1]

    def year_length(self, year: int) -> Optional[int]:
        months = self.month_lengths(year)
        return None if months is None else sum(months)

    def is_prefix_of(self, other: "CalendarTable") -> bool:
        """True if this table is `other` cut short: same start, epoch and leading rows."""
        return (
            self.first_year == other.first_year
            and self.epoch == other.epoch
            and self.rows == other.rows[: len(self.rows)]
        )

    # ---------------------------------------------------------
    # Flattened sequence
    # ---------------------------------------------------------

    @cached_property
    def flattened(self) -> Tuple[int, ...]:
        return tuple(n for row in self.rows for n in row)

    @cached_property
    def cumulative(self) -> Tuple[int, ...]:
        return tuple(accumulate(self.flattened))

    @property
    def total_days(self) -> int:
        return self.cumulative[-1]

    def month_index(self, year: int, month: int) -> int:
        return (year - self.first_year) * MONTHS_PER_YEAR + (month - 1)

    def offset_of(self, year: int, month: int, day: int) -> int:
        """
        Whole days from the epoch (1 Baishakh of first_year) to the given date.
        The caller guarantees the date is valid for this table.
        """
        i = self.month_index(year, month)
        before = self.cumulative[i - 1] if i > 0 else 0
        return before + day - 1

    def locate(self, offset: int) -> Optional[Tuple[int, int, int]]:
        """
        Inverse of offset_of. Finds the smallest flattened index i with
        cumulative[i] > offset and returns (year, month, day), or None if the
        offset lies before the epoch or past the last tabulated day.
        """
        if offset < 0 or offset >= self.total_days:
            return None
        i = bisect_right(self.cumulative, offset)
        before = self.cumulative[i - 1] if i > 0 else 0
        year = self.first_year + i // MONTHS_PER_YEAR
        month = i % MONTHS_PER_YEAR + 1
        return year, month, offset - before + 1

    # ---------------------------------------------------------
    # Data audit
    # ---------------------------------------------------------

    def audit(self) -> List[str]:
        """One message per year whose length is implausible for a lunisolar year."""
        problems = []
        for year in self.years:
            n = self.year_length(year)
            if not MIN_YEAR_LENGTH <= n <= MAX_YEAR_LENGTH:
                problems.append(
                    f"year {year}: {n} days (expected {MIN_YEAR_LENGTH}..{MAX_YEAR_LENGTH})"
                )
        return problems


BS_TABLE = CalendarTable.from_rows(
    bs_table.FIRST_YEAR,
    bs_table.MONTH_LENGTHS,
    bs_table.EPOCH_AD,
    version=bs_table.TABLE_VERSION,
)
