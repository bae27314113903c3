"""Calendar engines used by RelativeBuilder to resolve offsets.

The engine owns every piece of civil calendar arithmetic: adding whole
calendar units to a wall-clock value, measuring the calendar difference
between two wall-clock values, and reporting month lengths. Civil values are
naive ``datetime`` objects read as UTC wall clock.

The default engine is backed by python-dateutil's relativedelta, which
clamps to the end of the month instead of rolling over (Jan 31 + 1 month is
Feb 28 or 29, never Mar 3).
"""

import calendar
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Literal, TypeAlias

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from calshift.offsets import Offsets, Unit
from calshift.util import DAY, HOUR, MINUTE, SECOND

LargestUnit: TypeAlias = Literal["years", "months", "days"]

EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)


class CalendarEngine(ABC):
    """Civil calendar arithmetic on naive UTC wall-clock datetimes."""

    @abstractmethod
    def add_calendar_unit(self, civil: datetime, unit: Unit, amount: int) -> datetime:
        """Add ``amount`` whole ``unit``s to ``civil``, clamping month ends."""
        pass

    @abstractmethod
    def calendar_difference(
        self, start: datetime, end: datetime, largest_unit: LargestUnit
    ) -> Offsets:
        """Return the calendar distance from ``start`` to ``end``.

        All components share the sign of ``end - start``. No component is
        larger than ``largest_unit``.
        """
        pass

    @abstractmethod
    def days_in_month(self, civil: datetime) -> int:
        """Number of days in the month containing ``civil``."""
        pass

    def to_civil(self, epoch_ms: int) -> datetime:
        """Read an epoch millisecond instant as UTC wall clock."""
        return EPOCH + timedelta(milliseconds=epoch_ms)

    def to_epoch_ms(self, civil: datetime) -> int:
        """Inverse of to_civil."""
        return (civil - EPOCH) // _ONE_MS


class DateutilCalendar(CalendarEngine):
    """Proleptic Gregorian calendar backed by dateutil.relativedelta.

    Representable range is that of ``datetime``: years 1 through 9999.
    Results outside it raise OverflowError or ValueError.
    """

    @override
    def add_calendar_unit(self, civil: datetime, unit: Unit, amount: int) -> datetime:
        if unit == "milliseconds":
            # relativedelta has no millisecond field
            return civil + relativedelta(microseconds=amount * 1000)
        return civil + relativedelta(**{unit: amount})

    @override
    def calendar_difference(
        self, start: datetime, end: datetime, largest_unit: LargestUnit
    ) -> Offsets:
        if largest_unit == "days":
            return self._day_difference(start, end)
        if largest_unit not in ("years", "months"):
            raise ValueError(
                f"Unsupported largest_unit: {largest_unit!r}\n"
                f"Valid units: years, months, days"
            )

        delta = relativedelta(end, start)
        years, months = delta.years, delta.months
        if largest_unit == "months":
            years, months = 0, years * 12 + months
        return Offsets(
            years=years,
            months=months,
            days=delta.days,
            hours=delta.hours,
            minutes=delta.minutes,
            seconds=delta.seconds,
            milliseconds=delta.microseconds // 1000,
        )

    def _day_difference(self, start: datetime, end: datetime) -> Offsets:
        total = (end - start) // _ONE_MS
        sign = -1 if total < 0 else 1
        days, rest = divmod(abs(total), DAY)
        hours, rest = divmod(rest, HOUR)
        minutes, rest = divmod(rest, MINUTE)
        seconds, milliseconds = divmod(rest, SECOND)
        return Offsets(
            days=sign * days,
            hours=sign * hours,
            minutes=sign * minutes,
            seconds=sign * seconds,
            milliseconds=sign * milliseconds,
        )

    @override
    def days_in_month(self, civil: datetime) -> int:
        return calendar.monthrange(civil.year, civil.month)[1]


default_calendar: CalendarEngine = DateutilCalendar()
