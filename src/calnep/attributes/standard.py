from __future__ import annotations
from typing import Any, Dict

from ..engines.table import BS_TABLE
from .registry import register_attribute, weekday

WEEKDAY_NAMES = (
    "Aaitabar", "Sombar", "Mangalbar", "Budhabar", "Bihibar", "Sukrabar", "Sanibar",
)

# Nepal's fiscal year runs from 1 Shrawan to the end of Asar.
FISCAL_YEAR_START_MONTH = 4

def weekday_attr(info) -> Dict[str, Any]:
    # Convention: 0=Sun..6=Sat, the Nepali week.
    w = weekday(info)
    return {"weekday": w, "weekday_name": WEEKDAY_NAMES[w]}

def month_name(info) -> Dict[str, Any]:
    return {"month_name": info.bs.month_name}

def fiscal_year(info) -> Dict[str, Any]:
    y = info.bs.year
    start = y if info.bs.month >= FISCAL_YEAR_START_MONTH else y - 1
    return {"fiscal_year": f"{start}/{(start + 1) % 100:02d}"}

def day_of_year(info) -> Dict[str, Any]:
    b = info.bs
    before = sum(BS_TABLE.month_lengths(b.year)[: b.month - 1])
    return {"day_of_year": before + b.day}

register_attribute("weekday", weekday_attr)
register_attribute("month_name", month_name)
register_attribute("fiscal_year", fiscal_year)
register_attribute("day_of_year", day_of_year)
