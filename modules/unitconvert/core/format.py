from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

DISPLAY_PLACES = 6

# Enough digits to quantize any finite double without InvalidOperation.
_PRECISION = 400


def _quantize(value: float, places: int = DISPLAY_PLACES) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = _PRECISION
        quant = Decimal("1").scaleb(-places)
        return Decimal(value).quantize(quant, rounding=ROUND_HALF_UP)


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "+Inf" if value > 0 else "-Inf"


def round_result(value: float, places: int = DISPLAY_PLACES) -> float:
    # A finite input can still overflow during conversion; keep it as-is.
    if not math.isfinite(value):
        return value
    return float(_quantize(value, places))


def format_result(value: float, places: int = DISPLAY_PLACES) -> str:
    if not math.isfinite(value):
        return _non_finite_text(value)
    return f"{_quantize(value, places):.{places}f}"
