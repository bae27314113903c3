"""Fixed-length durations measured in milliseconds.

Every unit is a fixed multiple of a millisecond (1 week = 7 days = 168 hours),
so the builder keeps a single running total. No calendar is involved.
"""

from typing import overload

from calshift.util import DAY, HOUR, MILLISECOND, MINUTE, SECOND, WEEK
from calshift.validation import require_finite_magnitude_bound


class DurationBuilder:
    """Chainable fixed-duration accumulator.

    Calling a unit method with a value adds that many units to the running
    total and returns the same builder. Calling it with no value reads the
    total in that unit.

    Example:
        >>> weeks(2).days()
        14.0
        >>> days(1).hours(12).days()
        1.5

    The builder mutates in place; do not share one instance between
    independent chains.
    """

    def __init__(self) -> None:
        self._total: float = 0

    def __repr__(self) -> str:
        return f"DurationBuilder(total_ms={self._total!r})"

    @property
    def total_ms(self) -> float:
        return self._total

    def _apply(
        self, n: float | None, scale: int, unit: str
    ) -> "DurationBuilder | float":
        if n is None:
            return self._total / scale
        require_finite_magnitude_bound(n, unit)
        self._total += n * scale
        return self

    @overload
    def weeks(self) -> float: ...

    @overload
    def weeks(self, n: float) -> "DurationBuilder": ...

    def weeks(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, WEEK, "weeks")

    @overload
    def days(self) -> float: ...

    @overload
    def days(self, n: float) -> "DurationBuilder": ...

    def days(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, DAY, "days")

    @overload
    def hours(self) -> float: ...

    @overload
    def hours(self, n: float) -> "DurationBuilder": ...

    def hours(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, HOUR, "hours")

    @overload
    def minutes(self) -> float: ...

    @overload
    def minutes(self, n: float) -> "DurationBuilder": ...

    def minutes(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, MINUTE, "minutes")

    @overload
    def seconds(self) -> float: ...

    @overload
    def seconds(self, n: float) -> "DurationBuilder": ...

    def seconds(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, SECOND, "seconds")

    @overload
    def milliseconds(self) -> float: ...

    @overload
    def milliseconds(self, n: float) -> "DurationBuilder": ...

    def milliseconds(self, n: float | None = None) -> "DurationBuilder | float":
        return self._apply(n, MILLISECOND, "milliseconds")
