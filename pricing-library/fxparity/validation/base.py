"""Base rule abstract class for input validation rules."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fxparity.inputs import Field, RateInputs


class BaseRule(ABC):
    """Abstract base class for single-field validation rules.

    Subclasses set `field` and implement check(). A rule never raises on odd
    numbers (NaN, infinities, missing values); it reports them as messages.
    """

    field: Field

    @abstractmethod
    def check(self, inputs: RateInputs) -> str | None:
        """Return an error message for `self.field`, or None when it is acceptable."""
        ...
