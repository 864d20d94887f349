class CalnepError(Exception):
    """Base error."""

class InvalidDateError(CalnepError, ValueError):
    """Raised when a BS date is constructed from an invalid year/month/day."""

class DateOrderError(CalnepError, ValueError):
    """Raised when a date range is given end-before-start."""

class DateRangeError(CalnepError, OverflowError):
    """Raised when date arithmetic leaves the tabulated BS range."""

class TableError(CalnepError):
    """Raised when calendar table data is malformed."""
