"""Demo: default spot/rates, forward via CIP, strategy comparison, summary and risks."""

from fxparity.inputs import DEFAULT_INPUTS, Field, RateInputs
from fxparity.parity import evaluate
from fxparity.pricers import INITIAL_INVESTMENT
from fxparity.risk import rate01, spot_delta
from fxparity.summary import summarize


def main() -> None:
    inputs = DEFAULT_INPUTS
    evaluation = evaluate(inputs)
    print("=== Forward Exchange Rate Demo ===\n")
    print(
        f"Spot {inputs.spot_rate:.4f} | domestic {inputs.domestic_rate:.3f}% | "
        f"foreign {inputs.foreign_rate:.3f}%\n"
    )
    result = evaluation.result
    assert result is not None and result.is_valid

    print("1) Implied forward rate (F = S * exp(r_f - r_d))")
    print(f"   F      = {result.forward_rate:.4f}\n")

    print(f"2) Strategies on {INITIAL_INVESTMENT:,.0f} domestic units")
    print(f"   Domestic investment      = {result.domestic_ending_value:,.2f}")
    print(f"   Foreign, converted back  = {result.domestic_equivalent:,.2f}")
    print(f"   Difference               = {result.arbitrage_diff:.4f}")
    print(f"   Within tolerance         = {result.no_arbitrage}\n")

    print("3) Chart data")
    for point in result.chart_data:
        print(
            f"   {point.label}: {point.kind.value:<12} {point.exchange_rate:.4f} "
            f"(domestic {point.domestic_rate_pct:.3f}%, foreign {point.foreign_rate_pct:.3f}%)"
        )
    print()

    summary = summarize(inputs, result)
    print("4) Summary")
    print(f"   Forward points = {summary.forward_points:.6f}")
    print(f"   {summary.description}\n")

    print("5) Sensitivities")
    print(f"   Spot delta       = {spot_delta(inputs):.6f}")
    print(f"   Rate01 domestic  = {rate01(inputs, Field.DOMESTIC_RATE):.8f}")
    print(f"   Rate01 foreign   = {rate01(inputs, Field.FOREIGN_RATE):.8f}\n")

    rejected = evaluate(RateInputs(spot_rate=0.0, domestic_rate=-100.0, foreign_rate=60.0))
    print("6) Rejected inputs")
    for field, message in rejected.errors.items():
        print(f"   {field.value}: {message}")
    print("\nDone.")


if __name__ == "__main__":
    main()
