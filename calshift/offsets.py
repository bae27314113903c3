from dataclasses import dataclass, fields, replace
from typing import Literal, TypeAlias

from calshift.validation import require_safe_integer

Unit: TypeAlias = Literal[
    "years", "months", "days", "hours", "minutes", "seconds", "milliseconds"
]

# Resolution order; independent of the order offsets were requested in
UNIT_ORDER: tuple[Unit, ...] = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
)


@dataclass(frozen=True, kw_only=True)
class Offsets:
    """Signed per-unit calendar offsets, kept apart so each sign survives."""

    years: int = 0
    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            require_safe_integer(getattr(self, field.name), field.name)

    def __str__(self) -> str:
        parts = [f"{amount:+d} {unit}" for unit, amount in self.nonzero()]
        return f"Offsets({', '.join(parts) or 'zero'})"

    @property
    def is_zero(self) -> bool:
        return not any(getattr(self, unit) for unit in UNIT_ORDER)

    def nonzero(self) -> list[tuple[Unit, int]]:
        """Return (unit, amount) pairs with a nonzero amount, in UNIT_ORDER."""
        return [
            (unit, getattr(self, unit)) for unit in UNIT_ORDER if getattr(self, unit)
        ]

    def plus(self, unit: Unit, amount: int) -> "Offsets":
        """Return a copy with ``amount`` added to ``unit``."""
        return replace(self, **{unit: getattr(self, unit) + int(amount)})


ZERO = Offsets()
