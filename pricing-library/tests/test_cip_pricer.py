"""Tests for the continuous-compounding CIP pricer."""

import math

import pytest

from fxparity.inputs import DEFAULT_INPUTS, RateInputs
from fxparity.parity import price
from fxparity.pricers import ARBITRAGE_TOLERANCE, ContinuousCIPPricer, forward_rate
from fxparity.results import PointKind


def test_forward_formula_default_scenario() -> None:
    """F = S * exp(r_f - r_d) with the default EUR/USD-style inputs."""
    result = price(DEFAULT_INPUTS)
    expected = 1.2602 * math.exp(0.0243 - 0.0236)
    assert abs(result.forward_rate - expected) < 1e-12
    assert abs(result.forward_rate - 1.26108) < 1e-5
    assert result.is_valid


def test_domestic_strategy_default_scenario() -> None:
    """Domestic strategy grows 1000 at 2.36% to 1023.60."""
    result = price(DEFAULT_INPUTS)
    assert abs(result.domestic_ending_value - 1023.60) < 1e-9


def test_foreign_strategy_values() -> None:
    """Foreign leg: 1000 * S * (1 + r_f), converted back at F."""
    result = price(DEFAULT_INPUTS)
    expected_foreign = 1000.0 * 1.2602 * 1.0243
    assert abs(result.foreign_ending_value - expected_foreign) < 1e-9
    assert result.domestic_equivalent == pytest.approx(
        result.foreign_ending_value / result.forward_rate, rel=1e-15
    )


@pytest.mark.parametrize(
    "spot, dom, fgn",
    [(1.2602, 2.360, 2.430), (0.5, 5.0, 1.0), (9.5, -3.0, 4.0), (0.0001, 0.0, 0.0), (3.0, 49.0, -99.0)],
)
def test_domestic_equivalent_closed_form(spot: float, dom: float, fgn: float) -> None:
    """Converted-back value is 1000 * (1 + r_f) * exp(r_d - r_f), independent of spot."""
    r_d, r_f = dom / 100.0, fgn / 100.0
    result = price(RateInputs(spot_rate=spot, domestic_rate=dom, foreign_rate=fgn))
    assert result.domestic_equivalent == pytest.approx(1000.0 * (1 + r_f) * math.exp(r_d - r_f), rel=1e-12)
    assert result.arbitrage_diff == pytest.approx(
        abs(result.domestic_ending_value - result.domestic_equivalent), rel=1e-12
    )


def test_default_scenario_gap_exceeds_tolerance() -> None:
    """Simple-interest strategies vs continuous forward leave a ~0.0168 gap at the defaults."""
    result = price(DEFAULT_INPUTS)
    assert 0.0167 < result.arbitrage_diff < 0.0168
    assert result.arbitrage_diff > ARBITRAGE_TOLERANCE
    assert result.no_arbitrage is False
    assert result.is_valid  # diagnostic only


def test_low_rates_within_tolerance() -> None:
    """Gap is about 1000 * r_f * (r_f - r_d): low rates keep it under one cent."""
    result = price(RateInputs(spot_rate=1.1, domestic_rate=0.5, foreign_rate=0.6))
    assert result.arbitrage_diff < ARBITRAGE_TOLERANCE
    assert result.no_arbitrage


@pytest.mark.parametrize("rate", [-50.0, 0.0, 2.5, 50.0])
def test_equal_rates_forward_equals_spot(rate: float) -> None:
    """exp(0) = 1: forward collapses to spot and both strategies agree."""
    result = price(RateInputs(spot_rate=1.37, domestic_rate=rate, foreign_rate=rate))
    assert result.forward_rate == 1.37
    assert result.arbitrage_diff < 1e-9
    assert result.no_arbitrage


def test_inverted_differential_forward_below_spot() -> None:
    result = price(RateInputs(spot_rate=1.2602, domestic_rate=4.0, foreign_rate=1.0))
    assert result.forward_rate < 1.2602


def test_forward_strictly_increasing_in_foreign_rate() -> None:
    foreign_rates = [-99.0, -20.0, -1.0, 0.0, 0.001, 2.43, 10.0, 49.999, 50.0]
    forwards = [
        price(RateInputs(spot_rate=1.2602, domestic_rate=2.36, foreign_rate=f)).forward_rate
        for f in foreign_rates
    ]
    for i in range(1, len(forwards)):
        assert forwards[i] > forwards[i - 1]


def test_repeated_pricing_is_identical() -> None:
    assert price(DEFAULT_INPUTS) == price(DEFAULT_INPUTS)


def test_chart_data_points() -> None:
    """Two labelled points: spot at t=0, forward at t=1, rates carried as percentages."""
    result = price(DEFAULT_INPUTS)
    spot_point, fwd_point = result.chart_data
    assert spot_point.label == "t = 0"
    assert spot_point.kind is PointKind.SPOT
    assert spot_point.exchange_rate == 1.2602
    assert fwd_point.label == "t = 1"
    assert fwd_point.kind is PointKind.FORWARD
    assert fwd_point.exchange_rate == result.forward_rate
    for point in result.chart_data:
        assert point.domestic_rate_pct == 2.360
        assert point.foreign_rate_pct == 2.430
    assert PointKind.SPOT.value == "Spot Rate"
    assert PointKind.FORWARD.value == "Forward Rate"


def test_zero_spot_degrades_without_raising() -> None:
    """Out-of-domain input yields a complete result flagged invalid."""
    result = price(RateInputs(spot_rate=0.0, domestic_rate=2.0, foreign_rate=3.0))
    assert result.is_valid is False
    assert result.forward_rate == 0.0
    assert math.isnan(result.domestic_equivalent)
    assert result.no_arbitrage is False
    assert len(result.chart_data) == 2


@pytest.mark.parametrize("field_values", [
    (1.2, -100.0, 2.0),
    (1.2, 2.0, -100.0),
    (1.2, -250.0, 2.0),
    (-1.0, 2.0, 2.0),
])
def test_domain_boundaries_flag_invalid(field_values: tuple[float, float, float]) -> None:
    spot, dom, fgn = field_values
    result = price(RateInputs(spot_rate=spot, domestic_rate=dom, foreign_rate=fgn))
    assert result.is_valid is False


def test_nan_and_overflow_inputs_do_not_raise() -> None:
    nan_result = price(RateInputs(spot_rate=math.nan, domestic_rate=2.0, foreign_rate=2.0))
    assert nan_result.is_valid is False
    assert math.isnan(nan_result.forward_rate)

    huge = price(RateInputs(spot_rate=1.0, domestic_rate=0.0, foreign_rate=1e6))
    assert huge.forward_rate == math.inf
    assert huge.domestic_equivalent == 0.0


def test_forward_rate_helper_uses_decimal_rates() -> None:
    assert abs(forward_rate(1.0, 0.05, 0.03) - math.exp(-0.02)) < 1e-15


def test_custom_notional_scales_strategies() -> None:
    pricer = ContinuousCIPPricer(initial_investment=1_000_000.0)
    result = pricer.price(DEFAULT_INPUTS)
    assert abs(result.domestic_ending_value - 1_023_600.0) < 1e-6
    assert result.forward_rate == price(DEFAULT_INPUTS).forward_rate
