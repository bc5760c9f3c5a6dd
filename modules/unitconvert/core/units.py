from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# Length (base: meter)
LENGTH_TO_METERS: Mapping[str, float] = MappingProxyType(
    {
        "millimeter": 0.001,
        "centimeter": 0.01,
        "meter": 1.0,
        "kilometer": 1000.0,
        "inch": 0.0254,
        "foot": 0.3048,
        "yard": 0.9144,
        "mile": 1609.344,
    }
)
LENGTH_UNITS: Tuple[str, ...] = (
    "millimeter",
    "centimeter",
    "meter",
    "kilometer",
    "inch",
    "foot",
    "yard",
    "mile",
)

# Weight (base: kilogram)
WEIGHT_TO_KG: Mapping[str, float] = MappingProxyType(
    {
        "milligram": 1e-6,
        "gram": 1e-3,
        "kilogram": 1.0,
        "ounce": 0.028349523125,
        "pound": 0.45359237,
    }
)
WEIGHT_UNITS: Tuple[str, ...] = ("milligram", "gram", "kilogram", "ounce", "pound")

# Temperature uses formulas through Celsius, not factors.
TEMPERATURE_UNITS: Tuple[str, ...] = ("Celsius", "Fahrenheit", "Kelvin")
