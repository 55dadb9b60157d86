"""Service layer: convert GraphQL inputs to library objects and run validation/pricing/risk."""

from __future__ import annotations

import logging

from fxparity.inputs import DEFAULT_INPUTS, Field, RateInputs
from fxparity.parity import evaluate, validate
from fxparity.results import PricingResult, ValidationErrors
from fxparity.risk import rate01, spot_delta
from fxparity.summary import summarize

from app.types import (
    ChartPointType,
    FieldError,
    ForwardEvaluation,
    ForwardPricing,
    ForwardSummaryType,
    RateInputsInput,
    RateInputsType,
    RiskMeasures,
)

logger = logging.getLogger(__name__)


def inputs_from_input(i: RateInputsInput) -> RateInputs:
    """Build RateInputs from GraphQL RateInputsInput."""
    return RateInputs(
        spot_rate=i.spot_rate,
        domestic_rate=i.domestic_rate,
        foreign_rate=i.foreign_rate,
    )


def _field_errors(errors: ValidationErrors) -> list[FieldError]:
    # Field order is stable (enum order) so responses are deterministic.
    return [
        FieldError(field=f.value, message=errors[f])
        for f in Field
        if f in errors
    ]


def _pricing_from_result(inputs: RateInputs, result: PricingResult) -> ForwardPricing:
    summary = summarize(inputs, result)
    return ForwardPricing(
        forward_rate=result.forward_rate,
        domestic_ending_value=result.domestic_ending_value,
        foreign_ending_value=result.foreign_ending_value,
        domestic_equivalent=result.domestic_equivalent,
        arbitrage_diff=result.arbitrage_diff,
        no_arbitrage=result.no_arbitrage,
        is_valid=result.is_valid,
        chart_data=[
            ChartPointType(
                label=p.label,
                exchange_rate=p.exchange_rate,
                domestic_rate_pct=p.domestic_rate_pct,
                foreign_rate_pct=p.foreign_rate_pct,
                kind=p.kind.value,
            )
            for p in result.chart_data
        ],
        summary=ForwardSummaryType(
            rate_differential_pct=summary.rate_differential_pct,
            forward_points=summary.forward_points,
            forward_premium_pct=summary.forward_premium_pct,
            direction=summary.direction,
            description=summary.description,
        ),
    )


def default_inputs() -> RateInputsType:
    """Default form values (EUR/USD-style sample)."""
    return RateInputsType(
        spot_rate=DEFAULT_INPUTS.spot_rate,
        domestic_rate=DEFAULT_INPUTS.domestic_rate,
        foreign_rate=DEFAULT_INPUTS.foreign_rate,
    )


def validate_inputs(inputs: RateInputsInput) -> list[FieldError]:
    """Validate rate inputs; empty list means they may be priced."""
    return _field_errors(validate(inputs_from_input(inputs)))


def price_forward(
    inputs: RateInputsInput,
    calculate_spot_delta: bool = False,
    calculate_rate01: bool = False,
    rate01_bump_bp: float = 1.0,
    spot_delta_bump_pct: float = 0.01,
) -> ForwardEvaluation:
    """Validate and price the CIP forward; optionally compute spot delta and Rate01."""
    rate_inputs = inputs_from_input(inputs)
    evaluation = evaluate(rate_inputs)
    if evaluation.errors:
        return ForwardEvaluation(errors=_field_errors(evaluation.errors))
    if not evaluation.displayable:
        # Accepted but outside the pricer's domain: nothing to show.
        logger.info("No displayable result for %s", rate_inputs)
        return ForwardEvaluation(errors=[])
    pricing = _pricing_from_result(rate_inputs, evaluation.result)
    if calculate_spot_delta or calculate_rate01:
        risk = RiskMeasures()
        if calculate_spot_delta:
            risk.spot_delta = spot_delta(rate_inputs, bump_pct=spot_delta_bump_pct)
        if calculate_rate01:
            risk.domestic_rate01 = rate01(rate_inputs, Field.DOMESTIC_RATE, bump_bp=rate01_bump_bp)
            risk.foreign_rate01 = rate01(rate_inputs, Field.FOREIGN_RATE, bump_bp=rate01_bump_bp)
        pricing.risk_measures = risk
    return ForwardEvaluation(errors=[], result=pricing)
