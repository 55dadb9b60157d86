"""
Parity entrypoint.

Most users of the library should only need `evaluate(inputs)` (or `price` /
`validate` separately). They delegate to a default `ParityEngine` instance.

Keeping this as a thin wrapper gives a stable, ergonomic API while still
allowing advanced users to build engines with their own rules or pricer.
"""

from fxparity.engine import create_default_engine
from fxparity.inputs import RateInputs
from fxparity.results import Evaluation, PricingResult, ValidationErrors

_default_engine = create_default_engine()


def validate(inputs: RateInputs) -> ValidationErrors:
    """Return field -> message for implausible inputs (empty when accepted)."""
    return _default_engine.validate(inputs)


def price(inputs: RateInputs) -> PricingResult:
    """Return the CIP pricing result for `inputs` (via the default engine)."""
    return _default_engine.price(inputs)


def evaluate(inputs: RateInputs) -> Evaluation:
    """Validate `inputs` and price them when no field is rejected."""
    return _default_engine.evaluate(inputs)
