"""
Parity engine: validate a rate snapshot, then price it.

Design intent:
- Validation and pricing stay separate, pluggable units (rules and a pricer).
- The engine owns the control flow: the pricer only ever sees inputs that
  passed every rule, and a caller gets either errors or a result, never both.
- Nothing here is stateful; the same engine can serve any number of callers.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fxparity.inputs import RateInputs
from fxparity.interfaces import Pricer, Rule
from fxparity.results import Evaluation, PricingResult, ValidationErrors
from fxparity.validation import DEFAULT_RULES, validate

logger = logging.getLogger(__name__)


class ParityEngine:
    """
    Validate-then-price engine.

    Rules are applied in registration order; the first failing rule per field
    wins.
    """

    def __init__(self, pricer: Pricer, rules: Sequence[Rule] = DEFAULT_RULES) -> None:
        if not rules:
            raise ValueError("ParityEngine needs at least one validation rule")
        self._pricer = pricer
        self._rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def validate(self, inputs: RateInputs) -> ValidationErrors:
        """Run the rule set against `inputs`."""
        return validate(inputs, self._rules)

    def price(self, inputs: RateInputs) -> PricingResult:
        """Price without validating (the pricer degrades via is_valid)."""
        return self._pricer.price(inputs)

    def evaluate(self, inputs: RateInputs) -> Evaluation:
        """Validate, and price only when every field is accepted."""
        errors = self.validate(inputs)
        if errors:
            logger.debug(
                "Rejected inputs %s: %s",
                inputs,
                {f.value: msg for f, msg in errors.items()},
            )
            return Evaluation(errors=errors)
        result = self.price(inputs)
        if result.is_valid and not result.no_arbitrage:
            logger.warning(
                "Strategy outcomes differ by %.6f for %s (tolerance exceeded)",
                result.arbitrage_diff,
                inputs,
            )
        return Evaluation(result=result)


def create_default_engine() -> ParityEngine:
    """Factory for the default engine: continuous CIP pricer and default rules."""
    from fxparity.pricers import ContinuousCIPPricer

    return ParityEngine(pricer=ContinuousCIPPricer(), rules=DEFAULT_RULES)
