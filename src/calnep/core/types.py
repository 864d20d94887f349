from __future__ import annotations
import logging
import re
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Dict, Optional

from .errors import DateRangeError, InvalidDateError
from ..engines.table import BS_TABLE

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "Baishakh", "Jestha", "Asar", "Shrawan", "Bhadra", "Ashoj",
    "Kartik", "Mangsir", "Poush", "Magh", "Falgun", "Chaitra",
)

# ASCII digits only; str.isdigit() would also accept e.g. Devanagari numerals.
_CANONICAL_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


@dataclass(frozen=True, order=True)
class BSDate:
    """
    A Bikram Sambat calendar date, valid against the calendar table.

    Field order (year, month, day) makes the generated ordering chronological,
    which is also the order of the canonical YYYY-MM-DD strings.
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        if not BSDate.is_valid(self.year, self.month, self.day):
            raise InvalidDateError(
                f"Invalid BS date: year={self.year!r} month={self.month!r} day={self.day!r}"
            )

    # ---------------------------------------------------------
    # Validation / alternate constructors
    # ---------------------------------------------------------

    @staticmethod
    def is_valid(year: int, month: int, day: int) -> bool:
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (year, month, day)):
            return False
        last = BS_TABLE.last_day(year, month)
        return last is not None and 1 <= day <= last

    @classmethod
    def validated(cls, year: int, month: int, day: int) -> Optional["BSDate"]:
        """Like BSDate(year, month, day) but returns None instead of raising."""
        if not cls.is_valid(year, month, day):
            return None
        return cls(year, month, day)

    @classmethod
    def parse(cls, text: str) -> Optional["BSDate"]:
        """Parse the canonical YYYY-MM-DD form; None if malformed or out of range."""
        m = _CANONICAL_RE.fullmatch(text) if isinstance(text, str) else None
        if m is None:
            logger.debug("rejecting malformed BS date text %r", text)
            return None
        return cls.validated(*(int(g) for g in m.groups()))

    @classmethod
    def fromisoformat(cls, text: str) -> "BSDate":
        b = cls.parse(text)
        if b is None:
            raise InvalidDateError(f"Invalid BS date string: {text!r}")
        return b

    @classmethod
    def from_ad(cls, d: date) -> Optional["BSDate"]:
        from ..engines.calendar import default_calendar
        return default_calendar().to_bs(d)

    # ---------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    @property
    def days_in_month(self) -> int:
        return BS_TABLE.last_day(self.year, self.month)

    @property
    def ad(self) -> date:
        return self.to_ad()

    def to_ad(self) -> date:
        from ..engines.calendar import default_calendar
        return default_calendar().to_ad(self)

    def replace(self, **changes: int) -> "BSDate":
        """Return a copy with fields replaced; the result is re-validated."""
        return replace(self, **changes)

    # ---------------------------------------------------------
    # Day arithmetic (via the AD timeline)
    # ---------------------------------------------------------

    def __add__(self, other: Any) -> "BSDate":
        if not isinstance(other, timedelta):
            return NotImplemented
        if other.seconds or other.microseconds:
            raise ValueError(f"BS dates move in whole days, got {other!r}")
        target = self.to_ad() + timedelta(days=other.days)
        b = BSDate.from_ad(target)
        if b is None:
            raise DateRangeError(f"{self} + {other.days} days is outside the BS table")
        return b

    __radd__ = __add__

    def __sub__(self, other: Any):
        if isinstance(other, timedelta):
            return self + -other
        if isinstance(other, BSDate):
            return self.to_ad() - other.to_ad()
        return NotImplemented


@dataclass(frozen=True)
class Duration:
    """Calendar-aware (years, months, days) difference between two BS dates."""
    years: int
    months: int
    days: int

    @staticmethod
    def zero() -> "Duration":
        return Duration(0, 0, 0)

    def __str__(self) -> str:
        return f"{self.years}y {self.months}m {self.days}d"


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    bs: BSDate
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None
