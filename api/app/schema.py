"""GraphQL schema: validation and forward pricing queries."""

import strawberry

from app.services import default_inputs, price_forward, validate_inputs
from app.settings import API_VERSION
from app.types import (
    FieldError,
    ForwardEvaluation,
    RateInputsInput,
    RateInputsType,
)


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def default_inputs(self) -> RateInputsType:
        """Default spot and rates for a new form."""
        return default_inputs()

    @strawberry.field
    def validate_inputs(self, inputs: RateInputsInput) -> list[FieldError]:
        """Validate rate inputs without pricing."""
        return validate_inputs(inputs)

    @strawberry.field
    def price_forward(
        self,
        inputs: RateInputsInput,
        calculate_spot_delta: bool = False,
        calculate_rate01: bool = False,
        rate01_bump_bp: float = 1.0,
        spot_delta_bump_pct: float = 0.01,
    ) -> ForwardEvaluation:
        """Validate and price the CIP forward. Optionally compute spot delta and Rate01."""
        return price_forward(
            inputs=inputs,
            calculate_spot_delta=calculate_spot_delta,
            calculate_rate01=calculate_rate01,
            rate01_bump_bp=rate01_bump_bp,
            spot_delta_bump_pct=spot_delta_bump_pct,
        )


schema = strawberry.Schema(query=Query)
