"""
Protocol-based interfaces for the extension points of the parity library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
This keeps the engine open for new validation rules, pricers and
sensitivities without modifying core code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fxparity.inputs import Field, RateInputs
    from fxparity.results import PricingResult


@runtime_checkable
class Rule(Protocol):
    """Protocol for a single-field validation rule.

    A rule inspects exactly one field and returns a message when that field
    is implausible, or None when it is accepted.
    """

    field: Field

    def check(self, inputs: RateInputs) -> str | None:
        """Return an error message for the field, or None if it passes."""
        ...


class Pricer(Protocol):
    """Protocol for forward pricing implementations.

    A pricer must be total: it returns a structurally complete result for any
    inputs and reports domain problems through `PricingResult.is_valid`.
    """

    def price(self, inputs: RateInputs) -> PricingResult:
        """Compute the forward rate, strategy outcomes and chart data."""
        ...


class RiskMeasure(Protocol):
    """Protocol for forward-rate sensitivities (bump-and-reprice or analytic)."""

    @property
    def name(self) -> str:
        """Human-readable name (e.g., 'SpotDelta', 'Rate01_foreignRate')."""
        ...

    def compute(self, inputs: RateInputs) -> float:
        """Compute the sensitivity value."""
        ...
