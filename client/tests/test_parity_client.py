"""Client tests: queries run against the in-process API through a test transport."""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from parity_client import ParityClient, RateInputs


@pytest.fixture
def client() -> ParityClient:
    """ParityClient whose sgqlc endpoint is replaced by the FastAPI test client."""
    http = TestClient(app)

    def endpoint(query: str, variables: dict) -> dict:
        response = http.post("/graphql", json={"query": query, "variables": variables})
        return response.json()

    parity = ParityClient(url="http://testserver/graphql/")
    parity._endpoint = endpoint
    return parity


def test_url_trailing_slash_stripped(client: ParityClient) -> None:
    assert client._url == "http://testserver/graphql"


def test_version(client: ParityClient) -> None:
    assert client.version() == "0.1.0"


def test_default_inputs_round_trip_to_quote(client: ParityClient) -> None:
    inputs = client.default_inputs()
    assert inputs == RateInputs(spot_rate=1.2602, domestic_rate=2.36, foreign_rate=2.43)
    evaluation = client.price_forward(inputs)
    assert evaluation.errors == []
    quote = evaluation.quote
    assert quote is not None
    assert abs(quote.forward_rate - 1.26108) < 1e-5
    assert abs(quote.domestic_ending_value - 1023.60) < 1e-9
    assert [p.kind for p in quote.chart_data] == ["Spot Rate", "Forward Rate"]
    assert quote.direction == "premium"
    assert quote.spot_delta is None


def test_price_forward_with_risk(client: ParityClient) -> None:
    evaluation = client.price_forward(
        RateInputs(spot_rate=1.1, domestic_rate=3.0, foreign_rate=1.0),
        calculate_spot_delta=True,
        calculate_rate01=True,
    )
    quote = evaluation.quote
    assert quote is not None
    assert quote.forward_rate < 1.1
    assert quote.direction == "discount"
    assert quote.spot_delta is not None and quote.spot_delta < 1.0
    assert quote.domestic_rate01 is not None and quote.domestic_rate01 < 0
    assert quote.foreign_rate01 is not None and quote.foreign_rate01 > 0


def test_rejected_inputs_return_errors(client: ParityClient) -> None:
    inputs = RateInputs(spot_rate=-1.0, domestic_rate=2.0, foreign_rate=2.0)
    errors = client.validate_inputs(inputs)
    assert [(e.field, e.message) for e in errors] == [
        ("spotRate", "Spot exchange rate must be positive")
    ]
    evaluation = client.price_forward(inputs)
    assert evaluation.quote is None
    assert evaluation.errors == errors


def test_graphql_errors_raise(client: ParityClient) -> None:
    with pytest.raises(RuntimeError, match="GraphQL errors"):
        client.price_forward(
            RateInputs(spot_rate=1.2, domestic_rate=2.0, foreign_rate=3.0),
            calculate_spot_delta=True,
            spot_delta_bump_pct=0.0,
        )
