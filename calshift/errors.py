"""Exception hierarchy for calshift.

All calshift-specific exceptions inherit from CalshiftError. Validation
errors also inherit from ValueError so callers can catch them generically.
"""

from typing import Literal, TypeAlias

Category: TypeAlias = Literal[
    "not finite",
    "has fractional part",
    "exceeds safe range",
    "invalid date",
    "invalid type",
]


class CalshiftError(Exception):
    """Base exception for all calshift errors."""


class ValidationError(CalshiftError, ValueError):
    """Invalid input to a builder or factory.

    Attributes:
        unit: Name of the offending call, e.g. "months" or "fromDate"
        category: Failure cause
    """

    def __init__(self, unit: str, category: Category, message: str):
        super().__init__(f"{unit}: {message}")
        self.unit: str = unit
        self.category: Category = category


class InputTypeError(ValidationError, TypeError):
    """Input of a type that cannot be read as an instant."""

    def __init__(self, unit: str, message: str):
        super().__init__(unit, "invalid type", message)


__all__ = ["CalshiftError", "ValidationError", "InputTypeError", "Category"]
