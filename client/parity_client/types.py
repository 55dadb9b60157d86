"""Client-side types for the FX parity GraphQL API (mirror API contracts)."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RateInputs:
    """Spot (foreign units per 1 domestic) and annual interest rates in percent."""

    spot_rate: float
    domestic_rate: float
    foreign_rate: float


@dataclass
class FieldError:
    """Validation error for one field (field is the camelCase key, e.g. 'spotRate')."""

    field: str
    message: str


@dataclass
class ChartPoint:
    """Spot/forward chart point; kind is 'Spot Rate' or 'Forward Rate'."""

    label: str
    exchange_rate: float
    domestic_rate_pct: float
    foreign_rate_pct: float
    kind: str


@dataclass
class ForwardQuote:
    """Flattened pricing result: forward, strategies, summary and optional risk measures."""

    forward_rate: float
    domestic_ending_value: float
    foreign_ending_value: float
    domestic_equivalent: float
    arbitrage_diff: float
    no_arbitrage: bool
    chart_data: list[ChartPoint]
    direction: str
    forward_points: float
    description: str
    spot_delta: Optional[float] = None
    domestic_rate01: Optional[float] = None
    foreign_rate01: Optional[float] = None


@dataclass
class ForwardEvaluation:
    """Either errors (quote None) or a quote (errors empty)."""

    errors: list[FieldError] = field(default_factory=list)
    quote: Optional[ForwardQuote] = None
