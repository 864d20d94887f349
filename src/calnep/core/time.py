from __future__ import annotations
from datetime import date

# date.toordinal() of 0001-01-01 is 1; its Julian Day Number is 1721426.
_JDN_ORDINAL_SHIFT = 1721425


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return d.toordinal() + _JDN_ORDINAL_SHIFT

def from_jdn(jdn: int) -> date:
    """Inverse of to_jdn."""
    return date.fromordinal(jdn - _JDN_ORDINAL_SHIFT)

def weekday_sun0(d: date) -> int:
    """Day of week with 0=Sunday..6=Saturday (Nepali week convention)."""
    return (to_jdn(d) + 1) % 7
