"""Plausibility rules for spot and interest-rate inputs."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Any

from fxparity.inputs import Field, RateInputs
from fxparity.validation.base import BaseRule


def _as_float(value: Any) -> float:
    """Real numbers (bool excluded) as float; anything else becomes NaN."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return math.nan
    return float(value)


@dataclass(frozen=True)
class RangeRule(BaseRule):
    """
    Open lower bound, closed upper bound: accepted iff lower < value <= upper.

    The lower bound is checked first, so a value failing it is reported with
    `below_message` only. NaN fails the lower bound, as does anything that is
    not a real number (None, str, bool, Decimal); -inf and +inf fall out of
    the ordinary comparisons.
    """

    field: Field
    lower: float
    upper: float
    below_message: str
    above_message: str

    def check(self, inputs: RateInputs) -> str | None:
        value = _as_float(inputs.value(self.field))
        if math.isnan(value) or value <= self.lower:
            return self.below_message
        if value > self.upper:
            return self.above_message
        return None


def rate_rule(field: Field, label: str) -> RangeRule:
    """Interest-rate bounds (percent): strictly above -100, at most 50."""
    return RangeRule(
        field=field,
        lower=-100.0,
        upper=50.0,
        below_message=f"{label} interest rate must be greater than -100%",
        above_message=f"{label} interest rate cannot exceed 50%",
    )


SPOT_RATE_RULE = RangeRule(
    field=Field.SPOT_RATE,
    lower=0.0,
    upper=10.0,
    below_message="Spot exchange rate must be positive",
    above_message="Spot exchange rate seems unrealistically high",
)
DOMESTIC_RATE_RULE = rate_rule(Field.DOMESTIC_RATE, "Domestic")
FOREIGN_RATE_RULE = rate_rule(Field.FOREIGN_RATE, "Foreign")
