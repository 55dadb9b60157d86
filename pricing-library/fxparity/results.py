"""Result records produced by the validator, the pricer and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TypeAlias

from fxparity.inputs import Field

ValidationErrors: TypeAlias = dict[Field, str]


class PointKind(str, Enum):
    """Which rate a chart point plots."""

    SPOT = "Spot Rate"
    FORWARD = "Forward Rate"


@dataclass(frozen=True)
class ChartPoint:
    """One time point of the spot/forward chart; rates are carried as percentages."""

    label: str
    exchange_rate: float
    domestic_rate_pct: float
    foreign_rate_pct: float
    kind: PointKind


@dataclass(frozen=True)
class PricingResult:
    """
    Output of a single CIP computation on a fixed notional.

    - `domestic_ending_value`: notional grown at the domestic rate.
    - `foreign_ending_value`: notional converted at spot, grown at the foreign rate
      (foreign currency units).
    - `domestic_equivalent`: foreign ending value converted back at the forward rate.
    - `arbitrage_diff` / `no_arbitrage`: diagnostic comparison of the two strategies.
    - `is_valid`: inputs are inside the domain where the formulas are meaningful.
    """

    forward_rate: float
    domestic_ending_value: float
    foreign_ending_value: float
    domestic_equivalent: float
    arbitrage_diff: float
    no_arbitrage: bool
    chart_data: tuple[ChartPoint, ChartPoint]
    is_valid: bool


@dataclass(frozen=True)
class Evaluation:
    """Validate-then-price outcome: either `errors` is non-empty or `result` is set."""

    errors: ValidationErrors = field(default_factory=dict)
    result: Optional[PricingResult] = None

    @property
    def accepted(self) -> bool:
        """True when validation passed and a result was computed."""
        return not self.errors and self.result is not None

    @property
    def displayable(self) -> bool:
        """True when a caller may show the result (accepted and inside the pricer's domain)."""
        return self.accepted and self.result.is_valid
