"""Tests for the per-unit offsets record."""

import dataclasses

import pytest

from calshift import Offsets, ValidationError
from calshift.offsets import UNIT_ORDER, ZERO
from calshift.util import MAX_SAFE_INTEGER


def test_defaults_to_zero():
    assert Offsets() == ZERO
    assert ZERO.is_zero
    assert ZERO.nonzero() == []
    assert str(ZERO) == "Offsets(zero)"


def test_plus_returns_new_record():
    """plus copies; the original is unchanged."""
    base = Offsets(months=1)
    updated = base.plus("days", -3)
    assert base == Offsets(months=1)
    assert updated == Offsets(months=1, days=-3)
    assert updated.plus("days", 3) == base


def test_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ZERO.days = 1  # type: ignore[misc]


def test_nonzero_follows_unit_order():
    """nonzero lists units from years down to milliseconds."""
    offsets = Offsets(milliseconds=1, years=-2, hours=3)
    assert offsets.nonzero() == [("years", -2), ("hours", 3), ("milliseconds", 1)]
    assert UNIT_ORDER[0] == "years"
    assert UNIT_ORDER[-1] == "milliseconds"


def test_rejects_fractional_fields():
    with pytest.raises(ValidationError, match="days: value must be an integer"):
        Offsets(days=1.5)  # type: ignore[arg-type]


def test_accumulation_beyond_safe_range_fails():
    """Sums that leave the safe range are rejected."""
    with pytest.raises(ValidationError, match="days: value exceeds safe integer range"):
        Offsets(days=MAX_SAFE_INTEGER).plus("days", 1)
