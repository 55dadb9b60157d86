"""Tests for RateInputs and Field."""

import dataclasses

import pytest

from fxparity.inputs import DEFAULT_INPUTS, Field, RateInputs


def test_field_values_are_wire_keys() -> None:
    """Field values are the camelCase keys used by callers."""
    assert [f.value for f in Field] == ["spotRate", "domesticRate", "foreignRate"]
    assert Field.SPOT_RATE == "spotRate"


def test_value_reads_each_field() -> None:
    inputs = RateInputs(spot_rate=1.5, domestic_rate=3.0, foreign_rate=1.0)
    assert inputs.value(Field.SPOT_RATE) == 1.5
    assert inputs.value(Field.DOMESTIC_RATE) == 3.0
    assert inputs.value(Field.FOREIGN_RATE) == 1.0


def test_with_value_returns_new_instance() -> None:
    """Copy-on-write update: original snapshot unchanged."""
    new = DEFAULT_INPUTS.with_value(Field.SPOT_RATE, 1.3)
    assert new.spot_rate == 1.3
    assert new.domestic_rate == DEFAULT_INPUTS.domestic_rate
    assert DEFAULT_INPUTS.spot_rate == 1.2602


def test_bumped_adds_delta() -> None:
    inputs = RateInputs(spot_rate=1.0, domestic_rate=2.0, foreign_rate=3.0)
    bumped = inputs.bumped(Field.FOREIGN_RATE, 0.01)
    assert abs(bumped.foreign_rate - 3.01) < 1e-12
    assert bumped.domestic_rate == 2.0


def test_inputs_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_INPUTS.spot_rate = 2.0  # type: ignore[misc]
