from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Tuple

from modules.unitconvert.core.convert import (
    convert_length,
    convert_temperature,
    convert_weight,
)
from modules.unitconvert.core.outcome import Outcome
from modules.unitconvert.core.units import LENGTH_UNITS, TEMPERATURE_UNITS, WEIGHT_UNITS

Converter = Callable[[float, str, str], Outcome]


@dataclass(frozen=True)
class Category:
    """Everything the request handler needs to serve one converter tab."""

    name: str
    label: str
    units: Tuple[str, ...]
    converter: Converter
    default_from: str
    default_to: str
    placeholder: str


CATEGORIES: Mapping[str, Category] = MappingProxyType(
    {
        "length": Category(
            name="length",
            label="Length",
            units=LENGTH_UNITS,
            converter=convert_length,
            default_from="meter",
            default_to="kilometer",
            placeholder="e.g. 123.45",
        ),
        "weight": Category(
            name="weight",
            label="Weight",
            units=WEIGHT_UNITS,
            converter=convert_weight,
            default_from="gram",
            default_to="kilogram",
            placeholder="e.g. 2500",
        ),
        "temperature": Category(
            name="temperature",
            label="Temperature",
            units=TEMPERATURE_UNITS,
            converter=convert_temperature,
            default_from="Celsius",
            default_to="Fahrenheit",
            placeholder="e.g. 37",
        ),
    }
)


def get_category(name: str) -> Category:
    try:
        return CATEGORIES[name]
    except KeyError:
        raise ValueError(f"Unknown category '{name}'.") from None


def list_categories() -> list[Category]:
    return list(CATEGORIES.values())
