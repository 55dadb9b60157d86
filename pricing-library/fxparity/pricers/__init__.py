"""Pricer implementations used by the parity engine."""

from fxparity.pricers.base import BasePricer
from fxparity.pricers.cip_pricer import (
    ARBITRAGE_TOLERANCE,
    INITIAL_INVESTMENT,
    ContinuousCIPPricer,
    forward_rate,
)

__all__ = [
    "ARBITRAGE_TOLERANCE",
    "BasePricer",
    "ContinuousCIPPricer",
    "INITIAL_INVESTMENT",
    "forward_rate",
]
