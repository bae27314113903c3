from .core import (
    days,
    from_date,
    from_now,
    hours,
    milliseconds,
    minutes,
    seconds,
    weeks,
)
from .duration import DurationBuilder
from .engine import CalendarEngine, DateutilCalendar, default_calendar
from .errors import CalshiftError, InputTypeError, ValidationError
from .offsets import Offsets
from .relative import RelativeBuilder
from .validation import require_finite_magnitude_bound, require_safe_integer

__all__ = [
    "weeks",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "from_date",
    "from_now",
    "DurationBuilder",
    "RelativeBuilder",
    "Offsets",
    "CalendarEngine",
    "DateutilCalendar",
    "default_calendar",
    "CalshiftError",
    "ValidationError",
    "InputTypeError",
    "require_finite_magnitude_bound",
    "require_safe_integer",
]
