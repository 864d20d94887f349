"""Calendar bootstrap (import side-effect)."""
from .api import set_calendar
from .bootstrap import build_calendar
from .attributes import standard as _standard  # noqa: F401  (registers attributes)

set_calendar(build_calendar())
