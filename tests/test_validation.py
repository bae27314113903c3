"""Tests for the numeric guards."""

import re
from fractions import Fraction

import pytest

from calshift import (
    CalshiftError,
    ValidationError,
    require_finite_magnitude_bound,
    require_safe_integer,
)
from calshift.util import MAX_SAFE_INTEGER


def test_finite_magnitude_bound_accepts_fractions():
    """Fractional and negative values within range pass."""
    for value in (0, 1, -1, 2.5, -0.25, Fraction(1, 3), float(MAX_SAFE_INTEGER)):
        require_finite_magnitude_bound(value, "days")


def test_finite_magnitude_bound_failures():
    """Each failure cause has its own message."""
    with pytest.raises(ValidationError, match="days: value must be a finite number"):
        require_finite_magnitude_bound(float("-inf"), "days")
    with pytest.raises(ValidationError, match="days: value must be a finite number"):
        require_finite_magnitude_bound(None, "days")
    with pytest.raises(ValidationError, match="days: value must be a finite number"):
        require_finite_magnitude_bound(True, "days")
    with pytest.raises(
        ValidationError, match="days: absolute value exceeds safe range"
    ):
        require_finite_magnitude_bound(-(MAX_SAFE_INTEGER + 1), "days")


def test_safe_integer_accepts_whole_numbers():
    """Whole ints and integral floats pass."""
    for value in (0, 7, -7, 3.0, MAX_SAFE_INTEGER, -MAX_SAFE_INTEGER):
        require_safe_integer(value, "months")


def test_safe_integer_failures():
    """Non-finite, fractional and oversized values fail with distinct messages."""
    with pytest.raises(
        ValidationError, match="months: value must be a finite integer"
    ) as excinfo:
        require_safe_integer(float("nan"), "months")
    assert excinfo.value.category == "not finite"

    with pytest.raises(
        ValidationError,
        match=re.escape("months: value must be an integer (no decimals)"),
    ) as excinfo:
        require_safe_integer(2.5, "months")
    assert excinfo.value.category == "has fractional part"

    with pytest.raises(
        ValidationError, match="months: value exceeds safe integer range"
    ) as excinfo:
        require_safe_integer(MAX_SAFE_INTEGER + 1, "months")
    assert excinfo.value.category == "exceeds safe range"


def test_validation_error_is_value_error():
    """Validation errors can be caught generically."""
    with pytest.raises(ValueError):
        require_safe_integer(0.5, "days")
    with pytest.raises(CalshiftError):
        require_safe_integer(0.5, "days")
