"""
Input validation: per-field plausibility rules.

Each field is checked on its own (no cross-field rules) and only the first
failing rule per field is reported. The result is a mapping of `Field` to
message; an empty mapping means the inputs may be priced.
"""

from __future__ import annotations

from collections.abc import Sequence

from fxparity.inputs import RateInputs
from fxparity.interfaces import Rule
from fxparity.results import ValidationErrors
from fxparity.validation.base import BaseRule
from fxparity.validation.rules import (
    DOMESTIC_RATE_RULE,
    FOREIGN_RATE_RULE,
    SPOT_RATE_RULE,
    RangeRule,
    rate_rule,
)

DEFAULT_RULES: tuple[RangeRule, ...] = (
    SPOT_RATE_RULE,
    DOMESTIC_RATE_RULE,
    FOREIGN_RATE_RULE,
)


def validate(inputs: RateInputs, rules: Sequence[Rule] = DEFAULT_RULES) -> ValidationErrors:
    """Return field -> message for every field that fails a rule (first failure wins)."""
    errors: ValidationErrors = {}
    for rule in rules:
        if rule.field in errors:
            continue
        message = rule.check(inputs)
        if message is not None:
            errors[rule.field] = message
    return errors


def is_acceptable(inputs: RateInputs) -> bool:
    """True when `validate(inputs)` reports no errors."""
    return not validate(inputs)


__all__ = [
    "BaseRule",
    "DEFAULT_RULES",
    "DOMESTIC_RATE_RULE",
    "FOREIGN_RATE_RULE",
    "RangeRule",
    "SPOT_RATE_RULE",
    "is_acceptable",
    "rate_rule",
    "validate",
]
