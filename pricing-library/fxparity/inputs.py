"""
Rate inputs for a single-period parity computation.

`RateInputs` is an immutable snapshot of the three numbers the calculator
needs. Conventions:
- `spot_rate` is quoted as **foreign units per one domestic unit**.
- Interest rates are **annualized percentages** (2.360 means 2.360%), not
  decimal fractions; the pricer divides by 100.

Fields are addressed by the `Field` enum so validation errors and risk bumps
refer to a closed set of keys rather than free-form strings.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class Field(str, Enum):
    """Input field keys (values are the camelCase names used on the wire)."""

    SPOT_RATE = "spotRate"
    DOMESTIC_RATE = "domesticRate"
    FOREIGN_RATE = "foreignRate"


_ATTRIBUTES: dict[Field, str] = {
    Field.SPOT_RATE: "spot_rate",
    Field.DOMESTIC_RATE: "domestic_rate",
    Field.FOREIGN_RATE: "foreign_rate",
}


@dataclass(frozen=True)
class RateInputs:
    """
    Spot rate plus domestic and foreign interest rates.

    Immutable-style: `with_value` / `bumped` return new instances so a
    snapshot handed to the validator is exactly the one the pricer sees.
    """

    spot_rate: float
    domestic_rate: float
    foreign_rate: float

    def value(self, field: Field) -> float:
        """Return the raw value of `field`."""
        return getattr(self, _ATTRIBUTES[field])

    def with_value(self, field: Field, value: float) -> "RateInputs":
        """Return new inputs with `field` replaced by `value`."""
        return replace(self, **{_ATTRIBUTES[field]: value})

    def bumped(self, field: Field, delta: float) -> "RateInputs":
        """Return new inputs with `delta` added to `field` (same units as the field)."""
        return self.with_value(field, self.value(field) + delta)


# EUR/USD-style sample used by the demo and as the API's default form values.
DEFAULT_INPUTS = RateInputs(spot_rate=1.2602, domestic_rate=2.360, foreign_rate=2.430)
