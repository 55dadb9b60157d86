"""GraphQL types for the forward parity API."""

from __future__ import annotations

from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class RateInputsInput:
    """Spot (foreign units per 1 domestic) and annual interest rates in percent."""

    spot_rate: float
    domestic_rate: float
    foreign_rate: float


# --- Output types (response payloads) ---


@strawberry.type
class RateInputsType:
    """Rate inputs echoed back (e.g. default form values)."""

    spot_rate: float
    domestic_rate: float
    foreign_rate: float


@strawberry.type
class FieldError:
    """Validation error for one input field (field is the camelCase key)."""

    field: str
    message: str


@strawberry.type
class ChartPointType:
    """One time point for the spot/forward chart; kind is 'Spot Rate' or 'Forward Rate'."""

    label: str
    exchange_rate: float
    domestic_rate_pct: float
    foreign_rate_pct: float
    kind: str


@strawberry.type
class ForwardSummaryType:
    """Forward points, premium/discount and a plain-language description."""

    rate_differential_pct: float
    forward_points: float
    forward_premium_pct: float
    direction: str
    description: str


@strawberry.type
class RiskMeasures:
    """Risk measures: spot delta (spot bump), Rate01 per interest rate (1bp bump)."""

    spot_delta: Optional[float] = None
    domestic_rate01: Optional[float] = None
    foreign_rate01: Optional[float] = None


@strawberry.type
class ForwardPricing:
    """CIP forward, strategy comparison on a 1000-unit notional, chart data and summary."""

    forward_rate: float
    domestic_ending_value: float
    foreign_ending_value: float
    domestic_equivalent: float
    arbitrage_diff: float
    no_arbitrage: bool
    is_valid: bool
    chart_data: list[ChartPointType]
    summary: ForwardSummaryType
    risk_measures: Optional[RiskMeasures] = None


@strawberry.type
class ForwardEvaluation:
    """Either errors (result null) or a result (errors empty)."""

    errors: list[FieldError]
    result: Optional[ForwardPricing] = None
