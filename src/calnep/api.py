from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .core.types import BSDate, DayInfo, Duration
from .attributes.registry import compute_attributes
from .engines.calendar import BSCalendar
from .engines import duration as _duration

_calendar: Optional[BSCalendar] = None

def set_calendar(cal: BSCalendar) -> None:
    global _calendar
    _calendar = cal

def _cal() -> BSCalendar:
    if _calendar is None:
        raise RuntimeError("Calendar not initialized")
    return _calendar

def calendar_info() -> Dict[str, Any]:
    return _cal().info()

# ============================================================
# Conversion
# ============================================================

def to_bs(d: date) -> Optional[BSDate]:
    return _cal().to_bs(d)

def to_ad(b: BSDate) -> date:
    return _cal().to_ad(b)

def parse(text: str) -> Optional[BSDate]:
    return BSDate.parse(text)

def day_info(
    d: date,
    *,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> Optional[DayInfo]:
    info = _cal().day_info(d, debug=debug)
    if info is not None and attributes:
        attrs = compute_attributes(info, attributes)
        info = replace(info, attributes=attrs)
    return info

def explain(d: date) -> Optional[Dict[str, Any]]:
    return _cal().explain(d)

# ============================================================
# Table lookups
# ============================================================

def month_lengths(year: int) -> Optional[Tuple[int, ...]]:
    return _cal().table.month_lengths(year)

def last_day(year: int, month: int) -> Optional[int]:
    return _cal().table.last_day(year, month)

def month_bounds(year: int, month: int) -> Dict[str, Any]:
    return _cal().month_bounds(year, month)

def new_year_day(year: int) -> date:
    return _cal().new_year_day(year)

def civil_month(year: int, month: int) -> List[Dict[str, Any]]:
    return _cal().civil_month(year, month)

# ============================================================
# Differences
# ============================================================

def duration(start: BSDate, end: BSDate) -> Duration:
    return _duration.duration(start, end, table=_cal().table)

def days_between(start: BSDate, end: BSDate) -> int:
    return _duration.days_between(start, end)
