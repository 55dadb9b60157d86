"""
Forward-rate sensitivities implemented via "bump and reprice".

ForwardSpotDelta and ForwardRate01 are composable measure objects; the
spot_delta and rate01 functions are shortcuts for one-off calls.
"""

from __future__ import annotations

from fxparity.inputs import Field, RateInputs
from fxparity.risk.base import BaseRiskMeasure
from fxparity.risk.rate01 import ForwardRate01
from fxparity.risk.spot_delta import ForwardSpotDelta


def spot_delta(inputs: RateInputs, bump_pct: float = 0.01) -> float:
    """
    Spot delta: (F(bumped) - F(base)) / (spot_bumped - spot).
    Spot is bumped by factor (1 + bump_pct).
    """
    return ForwardSpotDelta(bump_pct=bump_pct).compute(inputs)


def rate01(inputs: RateInputs, field: Field, bump_bp: float = 1.0) -> float:
    """
    Rate01: change in the forward when `field` is bumped by bump_bp basis points.
    Returns F(bumped) - F(base).
    """
    return ForwardRate01(field=field, bump_bp=bump_bp).compute(inputs)


__all__ = [
    "BaseRiskMeasure",
    "ForwardRate01",
    "ForwardSpotDelta",
    "rate01",
    "spot_delta",
]
