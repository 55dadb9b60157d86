"""
Covered interest rate parity pricer (continuous compounding, single period).

With spot S (foreign per domestic) and decimal rates r_d, r_f over one year:

    F = S * exp(r_f - r_d)

The pricer also replays the two textbook strategies on a fixed notional:
- invest domestically at r_d;
- convert at spot, invest abroad at r_f, convert back at F.

Both strategies grow with simple interest over the period while F is
continuously compounded, so the converted-back value is
N * (1 + r_f) * exp(r_d - r_f). The gap to N * (1 + r_d) is roughly
N * r_f * (r_f - r_d); `arbitrage_diff` reports it.
"""

from __future__ import annotations

import math

from fxparity.inputs import RateInputs
from fxparity.pricers.base import BasePricer
from fxparity.results import ChartPoint, PointKind, PricingResult

INITIAL_INVESTMENT = 1000.0
ARBITRAGE_TOLERANCE = 0.01


def _exp(x: float) -> float:
    """exp() that saturates to +inf instead of raising OverflowError."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _div(numerator: float, denominator: float) -> float:
    """Division that yields NaN for a zero denominator instead of raising."""
    if denominator == 0:
        return math.nan
    return numerator / denominator


def forward_rate(spot_rate: float, r_d: float, r_f: float) -> float:
    """CIP forward with decimal rates: F = S * exp(r_f - r_d)."""
    return spot_rate * _exp(r_f - r_d)


class ContinuousCIPPricer(BasePricer):
    """Pricer for the single-period CIP forward with a fixed notional."""

    def __init__(
        self,
        initial_investment: float = INITIAL_INVESTMENT,
        tolerance: float = ARBITRAGE_TOLERANCE,
    ) -> None:
        self.initial_investment = initial_investment
        self.tolerance = tolerance

    def price(self, inputs: RateInputs) -> PricingResult:
        spot = inputs.spot_rate
        r_d = inputs.domestic_rate / 100.0
        r_f = inputs.foreign_rate / 100.0
        fwd = forward_rate(spot, r_d, r_f)

        # Strategy 1: stay in domestic currency.
        domestic_ending_value = self.initial_investment * (1.0 + r_d)

        # Strategy 2: convert at spot, grow abroad, convert back at the forward.
        foreign_currency_amount = self.initial_investment * spot
        foreign_ending_value = foreign_currency_amount * (1.0 + r_f)
        domestic_equivalent = _div(foreign_ending_value, fwd)

        arbitrage_diff = abs(domestic_ending_value - domestic_equivalent)
        # NaN compares False, so an undefined comparison never reads as arbitrage-free.
        no_arbitrage = arbitrage_diff < self.tolerance

        chart_data = (
            ChartPoint(
                label="t = 0",
                exchange_rate=spot,
                domestic_rate_pct=inputs.domestic_rate,
                foreign_rate_pct=inputs.foreign_rate,
                kind=PointKind.SPOT,
            ),
            ChartPoint(
                label="t = 1",
                exchange_rate=fwd,
                domestic_rate_pct=inputs.domestic_rate,
                foreign_rate_pct=inputs.foreign_rate,
                kind=PointKind.FORWARD,
            ),
        )
        return PricingResult(
            forward_rate=fwd,
            domestic_ending_value=domestic_ending_value,
            foreign_ending_value=foreign_ending_value,
            domestic_equivalent=domestic_equivalent,
            arbitrage_diff=arbitrage_diff,
            no_arbitrage=no_arbitrage,
            chart_data=chart_data,
            is_valid=spot > 0 and r_d > -1 and r_f > -1,
        )
