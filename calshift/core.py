import logging
import time
from datetime import date, datetime, timedelta, timezone
from typing import Any

from dateutil.parser import isoparse

from calshift.duration import DurationBuilder
from calshift.engine import EPOCH, CalendarEngine
from calshift.errors import InputTypeError, ValidationError
from calshift.relative import RelativeBuilder
from calshift.validation import require_safe_integer

logger = logging.getLogger(__name__)

_UTC_EPOCH = EPOCH.replace(tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def weeks(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` weeks."""
    return DurationBuilder().weeks(n)


def days(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` days."""
    return DurationBuilder().days(n)


def hours(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` hours."""
    return DurationBuilder().hours(n)


def minutes(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` minutes."""
    return DurationBuilder().minutes(n)


def seconds(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` seconds."""
    return DurationBuilder().seconds(n)


def milliseconds(n: float = 1) -> DurationBuilder:
    """Start a fixed duration of ``n`` milliseconds."""
    return DurationBuilder().milliseconds(n)


def _datetime_to_ms(value: datetime) -> int:
    """Convert to epoch milliseconds; naive values are read as UTC."""
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _UTC_EPOCH) // _ONE_MS


def _coerce_instant(value: Any) -> int:
    """Convert from_date input to epoch milliseconds.

    Accepts:
    - datetime: Aware values keep their instant, naive values are UTC
    - date: Midnight UTC of that day
    - int/float: Epoch milliseconds, must be a safe integer
    - str: ISO 8601, parsed with dateutil; no offset means UTC

    Raises:
        InputTypeError: If value is an unsupported type
        ValidationError: If a number is not a safe integer or a string
            does not parse
    """
    if isinstance(value, datetime):
        return _datetime_to_ms(value)
    if isinstance(value, date):
        return _datetime_to_ms(datetime(value.year, value.month, value.day))
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        require_safe_integer(value, "fromDate")
        return int(value)
    if isinstance(value, str):
        try:
            parsed = isoparse(value)
        except (ValueError, OverflowError) as e:
            raise ValidationError(
                "fromDate", "invalid date", "Invalid date input"
            ) from e
        return _datetime_to_ms(parsed)
    raise InputTypeError(
        "fromDate",
        "Input must be a Date object, timestamp (number), or ISO date string",
    )


def from_date(value: Any, *, calendar: CalendarEngine | None = None) -> RelativeBuilder:
    """
    Anchor a calendar-aware builder at a given instant.

    Args:
        value: datetime, date, epoch milliseconds, or ISO 8601 string
        calendar: Calendar engine for resolution (default: dateutil-backed)

    Returns:
        RelativeBuilder with no offsets yet

    Raises:
        ValidationError: If the input is invalid or outside the calendar range

    Examples:
        >>> from calshift import from_date
        >>>
        >>> # One month after Jan 31 clamps to the end of February
        >>> from_date("2021-01-31T00:00:00Z").months(1).to_datetime()
        datetime.datetime(2021, 2, 28, 0, 0, tzinfo=datetime.timezone.utc)
        >>>
        >>> # Mixed signs: plus one year, then minus three months
        >>> from_date(1_672_531_200_000).years(1).months(-3).timestamp()
        1696118400000
    """
    anchor_ms = _coerce_instant(value)
    try:
        builder = RelativeBuilder(anchor_ms, calendar=calendar)
    except (OverflowError, ValueError) as e:
        raise ValidationError("fromDate", "invalid date", "Invalid date input") from e
    logger.debug("Anchored relative builder at %d ms", anchor_ms)
    return builder


def from_now(*, calendar: CalendarEngine | None = None) -> RelativeBuilder:
    """Anchor a calendar-aware builder at the current instant."""
    return from_date(time.time_ns() // 1_000_000, calendar=calendar)
