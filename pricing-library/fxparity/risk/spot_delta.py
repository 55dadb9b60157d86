"""Forward spot delta (spot bump, finite difference)."""

from __future__ import annotations

from dataclasses import dataclass

from fxparity.inputs import Field, RateInputs
from fxparity.parity import price
from fxparity.risk.base import BaseRiskMeasure


@dataclass
class ForwardSpotDelta(BaseRiskMeasure):
    """Spot delta: (F(bumped) - F(base)) / (spot_bumped - spot)."""

    bump_pct: float = 0.01

    def __post_init__(self) -> None:
        if self.bump_pct == 0:
            raise ValueError("SpotDelta needs a non-zero bump_pct")

    @property
    def name(self) -> str:
        return "SpotDelta"

    def compute(self, inputs: RateInputs) -> float:
        """Finite-difference delta with relative spot bump."""
        spot = inputs.spot_rate
        spot_bumped = spot * (1.0 + self.bump_pct)
        if spot_bumped == spot:
            raise ValueError(
                f"SpotDelta bump_pct={self.bump_pct!r} does not move spot {spot!r}"
            )
        bumped_inputs = inputs.with_value(Field.SPOT_RATE, spot_bumped)
        fwd_base = price(inputs).forward_rate
        fwd_bumped = price(bumped_inputs).forward_rate
        return (fwd_bumped - fwd_base) / (spot_bumped - spot)
