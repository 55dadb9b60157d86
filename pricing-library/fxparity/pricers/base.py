"""Base pricer abstract class for forward pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fxparity.inputs import RateInputs
from fxparity.results import PricingResult


class BasePricer(ABC):
    """Abstract base class for forward pricers.

    Subclasses implement price(). Pricers are expected to be total: inputs
    outside their domain produce a result with is_valid=False, not an exception.
    """

    @abstractmethod
    def price(self, inputs: RateInputs) -> PricingResult:
        """Compute the forward rate and the strategy comparison."""
        ...
