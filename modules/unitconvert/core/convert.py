from __future__ import annotations

from typing import Mapping

from modules.unitconvert.core.outcome import Failed, Ok, Outcome, unsupported_unit
from modules.unitconvert.core.units import LENGTH_TO_METERS, WEIGHT_TO_KG


def _scale(
    table: Mapping[str, float],
    category: str,
    value: float,
    from_unit: str,
    to_unit: str,
) -> Outcome:
    if from_unit not in table or to_unit not in table:
        return unsupported_unit(category)
    if from_unit == to_unit:
        return Ok(value)

    base_value = value * table[from_unit]
    return Ok(base_value / table[to_unit])


def convert_length(value: float, from_unit: str, to_unit: str) -> Outcome:
    return _scale(LENGTH_TO_METERS, "length", value, from_unit, to_unit)


def convert_weight(value: float, from_unit: str, to_unit: str) -> Outcome:
    return _scale(WEIGHT_TO_KG, "weight", value, from_unit, to_unit)


def to_celsius(value: float, from_unit: str) -> Outcome:
    if from_unit == "Celsius":
        return Ok(value)
    if from_unit == "Fahrenheit":
        return Ok((value - 32) * 5 / 9)
    if from_unit == "Kelvin":
        return Ok(value - 273.15)
    return unsupported_unit("temperature")


def from_celsius(celsius: float, to_unit: str) -> Outcome:
    if to_unit == "Celsius":
        return Ok(celsius)
    if to_unit == "Fahrenheit":
        return Ok(celsius * 9 / 5 + 32)
    if to_unit == "Kelvin":
        return Ok(celsius + 273.15)
    return unsupported_unit("temperature")


def convert_temperature(value: float, from_unit: str, to_unit: str) -> Outcome:
    """Convert through Celsius; the first failing stage is returned as-is."""
    celsius = to_celsius(value, from_unit)
    if isinstance(celsius, Failed):
        return celsius

    converted = from_celsius(celsius.value, to_unit)
    if isinstance(converted, Failed):
        return converted
    if from_unit == to_unit:
        return Ok(value)
    return converted
