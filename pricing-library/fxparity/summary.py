"""Plain-language summary of a pricing result (forward points, premium/discount)."""

from __future__ import annotations

from dataclasses import dataclass

from fxparity.inputs import RateInputs
from fxparity.results import PricingResult

_DIRECTION_TEXT = {
    "premium": "The forward rate is higher than spot, so the domestic currency "
    "trades at a forward premium (the foreign currency at a forward discount).",
    "discount": "The forward rate is lower than spot, so the domestic currency "
    "trades at a forward discount (the foreign currency at a forward premium).",
    "flat": "The forward rate equals spot because the two interest rates are equal.",
}


@dataclass(frozen=True)
class ForwardSummary:
    """Derived figures for reports; `direction` is 'premium', 'discount' or 'flat'."""

    rate_differential_pct: float
    forward_points: float
    forward_premium_pct: float
    direction: str
    description: str


def summarize(inputs: RateInputs, result: PricingResult) -> ForwardSummary:
    """Describe how the forward relates to spot for a valid result."""
    spot = inputs.spot_rate
    fwd = result.forward_rate
    differential = inputs.foreign_rate - inputs.domestic_rate
    if fwd > spot:
        direction = "premium"
    elif fwd < spot:
        direction = "discount"
    else:
        direction = "flat"
    description = (
        f"Spot {spot:.4f} at t = 0 versus forward {fwd:.4f} at t = 1, with a "
        f"domestic rate of {inputs.domestic_rate:.3f}% and a foreign rate of "
        f"{inputs.foreign_rate:.3f}%. {_DIRECTION_TEXT[direction]} "
        f"The interest rate differential of {differential:.3f} percentage points "
        f"drives this forward rate."
    )
    return ForwardSummary(
        rate_differential_pct=differential,
        forward_points=fwd - spot,
        forward_premium_pct=(fwd / spot - 1.0) * 100.0,
        direction=direction,
        description=description,
    )
