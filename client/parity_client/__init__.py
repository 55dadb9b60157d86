"""Python client for the FX parity GraphQL API."""

from parity_client.client import ParityClient
from parity_client.types import (
    ChartPoint,
    FieldError,
    ForwardEvaluation,
    ForwardQuote,
    RateInputs,
)

__all__ = [
    "ChartPoint",
    "FieldError",
    "ForwardEvaluation",
    "ForwardQuote",
    "ParityClient",
    "RateInputs",
]
