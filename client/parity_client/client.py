"""FX parity API client using sgqlc."""

from __future__ import annotations

from typing import Any

from sgqlc.endpoint.http import HTTPEndpoint

from parity_client.types import (
    ChartPoint,
    FieldError,
    ForwardEvaluation,
    ForwardQuote,
    RateInputs,
)


def _inputs_to_vars(i: RateInputs) -> dict[str, Any]:
    """Serialize RateInputs to GraphQL variables (camelCase)."""
    return {
        "spotRate": i.spot_rate,
        "domesticRate": i.domestic_rate,
        "foreignRate": i.foreign_rate,
    }


def _errors_from_raw(raw: list[dict[str, Any]]) -> list[FieldError]:
    return [FieldError(field=e["field"], message=e["message"]) for e in raw]


def _quote_from_raw(raw: dict[str, Any]) -> ForwardQuote:
    risk = raw.get("riskMeasures") or {}
    summary = raw["summary"]
    return ForwardQuote(
        forward_rate=raw["forwardRate"],
        domestic_ending_value=raw["domesticEndingValue"],
        foreign_ending_value=raw["foreignEndingValue"],
        domestic_equivalent=raw["domesticEquivalent"],
        arbitrage_diff=raw["arbitrageDiff"],
        no_arbitrage=raw["noArbitrage"],
        chart_data=[
            ChartPoint(
                label=p["label"],
                exchange_rate=p["exchangeRate"],
                domestic_rate_pct=p["domesticRatePct"],
                foreign_rate_pct=p["foreignRatePct"],
                kind=p["kind"],
            )
            for p in raw["chartData"]
        ],
        direction=summary["direction"],
        forward_points=summary["forwardPoints"],
        description=summary["description"],
        spot_delta=risk.get("spotDelta"),
        domestic_rate01=risk.get("domesticRate01"),
        foreign_rate01=risk.get("foreignRate01"),
    )


class ParityClient:
    """
    Client for the FX parity GraphQL API.
    Use from notebooks or scripts; configurable base URL for local vs Docker.
    """

    def __init__(self, url: str = "http://api:8000/graphql", timeout: float = 30.0) -> None:
        self._url = url.rstrip("/")
        self._timeout = timeout
        self._endpoint = HTTPEndpoint(self._url, timeout=timeout)

    def _request(self, query: str, variables: dict | None = None) -> dict:
        result = self._endpoint(query, variables or {})
        if "errors" in result and result["errors"]:
            raise RuntimeError(f"GraphQL errors: {result['errors']}")
        return result.get("data", {})

    def version(self) -> str:
        """Call the version query."""
        query = """
            query Version {
                version
            }
        """
        data = self._request(query)
        return data["version"]

    def default_inputs(self) -> RateInputs:
        """Fetch the server's default spot and rates."""
        query = """
            query DefaultInputs {
                defaultInputs { spotRate domesticRate foreignRate }
            }
        """
        raw = self._request(query)["defaultInputs"]
        return RateInputs(
            spot_rate=raw["spotRate"],
            domestic_rate=raw["domesticRate"],
            foreign_rate=raw["foreignRate"],
        )

    def validate_inputs(self, inputs: RateInputs) -> list[FieldError]:
        """Validate inputs server-side; empty list means they may be priced."""
        query = """
            query ValidateInputs($inputs: RateInputsInput!) {
                validateInputs(inputs: $inputs) { field message }
            }
        """
        data = self._request(query, {"inputs": _inputs_to_vars(inputs)})
        return _errors_from_raw(data["validateInputs"])

    def price_forward(
        self,
        inputs: RateInputs,
        calculate_spot_delta: bool = False,
        calculate_rate01: bool = False,
        rate01_bump_bp: float = 1.0,
        spot_delta_bump_pct: float = 0.01,
    ) -> ForwardEvaluation:
        """Validate and price the CIP forward. Optionally compute spot delta and Rate01."""
        query = """
            query PriceForward(
                $inputs: RateInputsInput!,
                $calculateSpotDelta: Boolean,
                $calculateRate01: Boolean,
                $rate01BumpBp: Float,
                $spotDeltaBumpPct: Float
            ) {
                priceForward(
                    inputs: $inputs,
                    calculateSpotDelta: $calculateSpotDelta,
                    calculateRate01: $calculateRate01,
                    rate01BumpBp: $rate01BumpBp,
                    spotDeltaBumpPct: $spotDeltaBumpPct
                ) {
                    errors { field message }
                    result {
                        forwardRate
                        domesticEndingValue
                        foreignEndingValue
                        domesticEquivalent
                        arbitrageDiff
                        noArbitrage
                        chartData { label exchangeRate domesticRatePct foreignRatePct kind }
                        summary { forwardPoints direction description }
                        riskMeasures { spotDelta domesticRate01 foreignRate01 }
                    }
                }
            }
        """
        variables: dict[str, Any] = {
            "inputs": _inputs_to_vars(inputs),
            "calculateSpotDelta": calculate_spot_delta,
            "calculateRate01": calculate_rate01,
            "rate01BumpBp": rate01_bump_bp,
            "spotDeltaBumpPct": spot_delta_bump_pct,
        }
        data = self._request(query, variables)
        raw = data["priceForward"]
        errors = _errors_from_raw(raw["errors"])
        quote = _quote_from_raw(raw["result"]) if raw.get("result") else None
        return ForwardEvaluation(errors=errors, quote=quote)
