"""
calnep.engines.duration
-----------------------
Calendar-aware differences between BS dates.

duration() answers "how many years, months and days have elapsed" the way a
person counts on a wall calendar, borrowing from the irregular BS month
lengths. It is not a day count: use days_between() for that.
"""

from __future__ import annotations

from ..core.errors import DateOrderError, DateRangeError, TableError
from ..core.types import BSDate, Duration
from .table import BS_TABLE, CalendarTable


def duration(start: BSDate, end: BSDate, *, table: CalendarTable = BS_TABLE) -> Duration:
    if start > end:
        raise DateOrderError(f"start date {start} is after end date {end}")
    if not table.is_prefix_of(BS_TABLE):
        raise TableError(f"table {table.version or '<unversioned>'} is not a prefix of {BS_TABLE.version}")
    for b in (start, end):
        if b.year not in table:
            raise DateRangeError(f"{b} is outside the calendar table")

    years = end.year - start.year

    months = end.month - start.month
    if months < 0:
        years -= 1
        months += 12

    days = end.day - start.day
    if days < 0:
        months -= 1

        # month immediately before end's month
        if end.month == 1:
            borrowed_year, borrowed_month = end.year - 1, 12
        else:
            borrowed_year, borrowed_month = end.year, end.month - 1

        borrowed = table.last_day(borrowed_year, borrowed_month)
        if borrowed is None:
            raise DateRangeError(
                f"BS {borrowed_year}-{borrowed_month:02d} is outside the calendar table"
            )

        total = end.day + borrowed
        # e.g. 2078-06-31 -> 2078-09-01 borrows a 29-day month against day 31
        if start.day > total:
            total += start.day - borrowed

        days = total - start.day

        # same month-of-year, later day: the borrowed month comes out of a year
        if months < 0:
            years -= 1
            months += 12

    return Duration(years=years, months=months, days=days)


def days_between(start: BSDate, end: BSDate) -> int:
    """Signed whole-day count end - start."""
    return (end - start).days
