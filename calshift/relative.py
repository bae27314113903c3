"""Calendar-aware offsets measured from a fixed anchor instant.

Offsets are stored per calendar unit and applied only when a result is
requested. Each unit is applied as its own calendar step, in the fixed order
years, months, days, hours, minutes, seconds, milliseconds, so a chain such as
``years(1).months(-3)`` keeps both signs instead of collapsing into a single
mixed-sign adjustment.
"""

import logging
from datetime import datetime, timezone
from typing import overload

from calshift.engine import CalendarEngine, default_calendar
from calshift.offsets import ZERO, Offsets, Unit
from calshift.util import DAY, HOUR, MINUTE, SECOND, WEEK
from calshift.validation import require_safe_integer

logger = logging.getLogger(__name__)


class RelativeBuilder:
    """Immutable builder of calendar offsets from an anchor instant.

    Calling a unit method with a whole number returns a new builder with the
    same anchor and the offset added; the original builder is left untouched
    and can be extended independently. Calling it with no value resolves the
    offsets and measures the distance from the anchor in that unit.

    Example:
        >>> b = from_date("2021-01-31T00:00:00Z").months(1)
        >>> b.to_datetime().isoformat()
        '2021-02-28T00:00:00+00:00'
        >>> b.months()
        1.0
        >>> b.days()
        28.0
    """

    def __init__(
        self,
        anchor_ms: int,
        offsets: Offsets = ZERO,
        *,
        calendar: CalendarEngine | None = None,
        _anchor_civil: datetime | None = None,
    ):
        """
        Args:
            anchor_ms: Anchor instant in epoch milliseconds
            offsets: Accumulated per-unit offsets
            calendar: Calendar engine (default: dateutil-backed Gregorian)
        """
        self._calendar: CalendarEngine = calendar or default_calendar
        self._anchor_ms: int = anchor_ms
        self._anchor_civil: datetime = (
            _anchor_civil
            if _anchor_civil is not None
            else self._calendar.to_civil(anchor_ms)
        )
        self._offsets: Offsets = offsets

    def __repr__(self) -> str:
        return (
            f"RelativeBuilder(anchor={self._anchor_civil.isoformat()}Z, "
            f"offsets={self._offsets})"
        )

    @property
    def anchor_ms(self) -> int:
        return self._anchor_ms

    @property
    def offsets(self) -> Offsets:
        return self._offsets

    @property
    def calendar(self) -> CalendarEngine:
        return self._calendar

    def _plus(self, unit: Unit, amount: int) -> "RelativeBuilder":
        # Anchor and engine are shared, offsets are copied
        return RelativeBuilder(
            self._anchor_ms,
            self._offsets.plus(unit, amount),
            calendar=self._calendar,
            _anchor_civil=self._anchor_civil,
        )

    def _target_civil(self) -> datetime:
        result = self._anchor_civil
        for unit, amount in self._offsets.nonzero():
            result = self._calendar.add_calendar_unit(result, unit, amount)
        logger.debug(
            "Resolved %s from %s to %s", self._offsets, self._anchor_civil, result
        )
        return result

    def _delta_ms(self) -> int:
        return self._calendar.to_epoch_ms(self._target_civil()) - self._anchor_ms

    def _months_fraction(self) -> float:
        """Months from anchor to target; a partial month is divided by the
        length of the month it starts in.
        """
        target = self._target_civil()
        diff = self._calendar.calendar_difference(
            self._anchor_civil, target, largest_unit="months"
        )
        whole = diff.years * 12 + diff.months

        if not (
            diff.days != 0
            or diff.hours != 0
            or diff.minutes != 0
            or diff.seconds != 0
            or diff.milliseconds != 0
        ):
            return float(whole)

        anchor_plus_whole = self._calendar.add_calendar_unit(
            self._anchor_civil, "months", whole
        )
        rem = self._calendar.calendar_difference(
            anchor_plus_whole, target, largest_unit="days"
        )
        month_ms = self._calendar.days_in_month(anchor_plus_whole) * DAY
        rem_ms = (
            rem.days * DAY
            + rem.hours * HOUR
            + rem.minutes * MINUTE
            + rem.seconds * SECOND
            + rem.milliseconds
        )
        return whole + rem_ms / month_ms

    def _step(
        self, n: int, unit: str, field: Unit, factor: int = 1
    ) -> "RelativeBuilder":
        require_safe_integer(n, unit)
        return self._plus(field, int(n) * factor)

    @overload
    def years(self) -> float: ...

    @overload
    def years(self, n: int) -> "RelativeBuilder": ...

    def years(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._months_fraction() / 12
        return self._step(n, "years", "years")

    @overload
    def months(self) -> float: ...

    @overload
    def months(self, n: int) -> "RelativeBuilder": ...

    def months(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._months_fraction()
        return self._step(n, "months", "months")

    @overload
    def weeks(self) -> float: ...

    @overload
    def weeks(self, n: int) -> "RelativeBuilder": ...

    def weeks(self, n: int | None = None) -> "RelativeBuilder | float":
        # No separate weeks offset: a week is always 7 calendar days
        if n is None:
            return self._delta_ms() / WEEK
        return self._step(n, "weeks", "days", factor=7)

    @overload
    def days(self) -> float: ...

    @overload
    def days(self, n: int) -> "RelativeBuilder": ...

    def days(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._delta_ms() / DAY
        return self._step(n, "days", "days")

    @overload
    def hours(self) -> float: ...

    @overload
    def hours(self, n: int) -> "RelativeBuilder": ...

    def hours(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._delta_ms() / HOUR
        return self._step(n, "hours", "hours")

    @overload
    def minutes(self) -> float: ...

    @overload
    def minutes(self, n: int) -> "RelativeBuilder": ...

    def minutes(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._delta_ms() / MINUTE
        return self._step(n, "minutes", "minutes")

    @overload
    def seconds(self) -> float: ...

    @overload
    def seconds(self, n: int) -> "RelativeBuilder": ...

    def seconds(self, n: int | None = None) -> "RelativeBuilder | float":
        if n is None:
            return self._delta_ms() / SECOND
        return self._step(n, "seconds", "seconds")

    @overload
    def milliseconds(self) -> int: ...

    @overload
    def milliseconds(self, n: int) -> "RelativeBuilder": ...

    def milliseconds(self, n: int | None = None) -> "RelativeBuilder | int":
        if n is None:
            return self._delta_ms()
        return self._step(n, "milliseconds", "milliseconds")

    def timestamp(self) -> int:
        """Resolved target instant in epoch milliseconds."""
        return self._delta_ms() + self._anchor_ms

    def to_datetime(self) -> datetime:
        """Resolved target instant as an aware UTC datetime."""
        return self._target_civil().replace(tzinfo=timezone.utc)
