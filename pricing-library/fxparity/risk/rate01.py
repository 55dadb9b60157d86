"""Rate01 risk measure (bump one interest rate, reprice the forward)."""

from __future__ import annotations

from dataclasses import dataclass

from fxparity.inputs import Field, RateInputs
from fxparity.parity import price
from fxparity.risk.base import BaseRiskMeasure

_RATE_FIELDS = (Field.DOMESTIC_RATE, Field.FOREIGN_RATE)


@dataclass
class ForwardRate01(BaseRiskMeasure):
    """Rate01: change in the forward rate for a bump_bp shift of one interest rate."""

    field: Field
    bump_bp: float = 1.0

    def __post_init__(self) -> None:
        if self.field not in _RATE_FIELDS:
            raise ValueError(
                f"Rate01 bumps an interest rate; got field '{self.field.value}'"
            )

    @property
    def name(self) -> str:
        return f"Rate01_{self.field.value}"

    def compute(self, inputs: RateInputs) -> float:
        """F(bumped) - F(base). Rates are in percent, so 1bp = 0.01."""
        bump = self.bump_bp / 100.0
        bumped_inputs = inputs.bumped(self.field, bump)
        return price(bumped_inputs).forward_rate - price(inputs).forward_rate
