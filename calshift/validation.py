"""Numeric guards shared by the duration and relative builders.

Both guards raise ValidationError with a message prefixed by the caller's
unit name, e.g. ``"days: value must be a finite number"``.
"""

import math
from numbers import Real
from typing import Any

from calshift.errors import ValidationError
from calshift.util import MAX_SAFE_INTEGER


def _is_finite_real(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


def require_finite_magnitude_bound(value: Any, unit: str) -> None:
    """Require a finite number whose integer part is a safe integer.

    Fractional values are allowed. Used by DurationBuilder.

    Raises:
        ValidationError: If the value is not finite or too large
    """
    if not _is_finite_real(value):
        raise ValidationError(unit, "not finite", "value must be a finite number")
    if abs(math.trunc(value)) > MAX_SAFE_INTEGER:
        raise ValidationError(
            unit, "exceeds safe range", "absolute value exceeds safe range"
        )


def require_safe_integer(value: Any, unit: str) -> None:
    """Require a whole number within the safe integer range.

    Calendar units can only be requested in whole steps; fractional values
    are rejected. Used by RelativeBuilder and from_date.

    Raises:
        ValidationError: If the value is not finite, not whole, or too large
    """
    if not _is_finite_real(value):
        raise ValidationError(unit, "not finite", "value must be a finite integer")
    if math.trunc(value) != value:
        raise ValidationError(
            unit, "has fractional part", "value must be an integer (no decimals)"
        )
    if abs(value) > MAX_SAFE_INTEGER:
        raise ValidationError(
            unit, "exceeds safe range", "value exceeds safe integer range"
        )
