"""Parity library: rate inputs, validation, CIP forward pricing, summaries and risk."""

from fxparity.engine import ParityEngine, create_default_engine
from fxparity.inputs import DEFAULT_INPUTS, Field, RateInputs
from fxparity.interfaces import Pricer, RiskMeasure, Rule
from fxparity.parity import evaluate, price, validate
from fxparity.pricers import (
    ARBITRAGE_TOLERANCE,
    INITIAL_INVESTMENT,
    BasePricer,
    ContinuousCIPPricer,
    forward_rate,
)
from fxparity.results import (
    ChartPoint,
    Evaluation,
    PointKind,
    PricingResult,
    ValidationErrors,
)
from fxparity.risk import ForwardRate01, ForwardSpotDelta, rate01, spot_delta
from fxparity.summary import ForwardSummary, summarize
from fxparity.validation import DEFAULT_RULES, BaseRule, RangeRule, is_acceptable

__all__ = [
    "ARBITRAGE_TOLERANCE",
    "BasePricer",
    "BaseRule",
    "ChartPoint",
    "ContinuousCIPPricer",
    "DEFAULT_INPUTS",
    "DEFAULT_RULES",
    "Evaluation",
    "Field",
    "ForwardRate01",
    "ForwardSpotDelta",
    "ForwardSummary",
    "INITIAL_INVESTMENT",
    "ParityEngine",
    "PointKind",
    "Pricer",
    "PricingResult",
    "RangeRule",
    "RateInputs",
    "RiskMeasure",
    "Rule",
    "ValidationErrors",
    "create_default_engine",
    "evaluate",
    "forward_rate",
    "is_acceptable",
    "price",
    "rate01",
    "spot_delta",
    "summarize",
    "validate",
]
