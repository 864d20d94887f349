from __future__ import annotations
from calnep.engines.calendar import BSCalendar, default_calendar

def build_calendar() -> BSCalendar:
    return default_calendar()
