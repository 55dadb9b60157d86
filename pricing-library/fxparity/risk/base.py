"""Base class for forward-rate sensitivity implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fxparity.inputs import RateInputs


class BaseRiskMeasure(ABC):
    """Base class for risk measure implementations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, inputs: RateInputs) -> float:
        """Compute the risk measure value."""
        ...
