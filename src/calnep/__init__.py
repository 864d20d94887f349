"""calnep public API.

Bikram Sambat (BS) <-> Gregorian (AD) conversion driven by the published
BS month-length table. Keep this surface small: users should mostly interact
with functions re-exported here.
"""

# Initialize calendar on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_bs,
    to_ad,
    parse,
    day_info,
    explain,
    calendar_info,
    month_lengths,
    last_day,
    month_bounds,
    new_year_day,
    civil_month,
    duration,
    days_between,
)
from .attributes.registry import list_attributes, register_attribute
from .core.errors import (
    CalnepError,
    DateOrderError,
    DateRangeError,
    InvalidDateError,
    TableError,
)
from .core.types import BSDate, DayInfo, Duration, MONTH_NAMES
from .engines.calendar import BSCalendar
from .engines.table import BS_TABLE, CalendarTable

__all__ = [
    "to_bs",
    "to_ad",
    "parse",
    "day_info",
    "explain",
    "calendar_info",
    "month_lengths",
    "last_day",
    "month_bounds",
    "new_year_day",
    "civil_month",
    "duration",
    "days_between",
    "list_attributes",
    "register_attribute",
    "BSDate",
    "DayInfo",
    "Duration",
    "MONTH_NAMES",
    "BSCalendar",
    "BS_TABLE",
    "CalendarTable",
    "CalnepError",
    "DateOrderError",
    "DateRangeError",
    "InvalidDateError",
    "TableError",
]
