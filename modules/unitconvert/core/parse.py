from __future__ import annotations

import math
from typing import Any

from modules.unitconvert.core.outcome import Outcome, Ok, empty_input, invalid_number


def parse_value(value: Any) -> Outcome:
    """Parse user-entered text into a finite float.

    Commas are treated as grouping separators and dropped. Exponent
    notation is accepted; ``inf``, ``nan`` and digit-group underscores are
    not.
    """
    if value is None:
        return empty_input()
    raw = str(value).strip()
    if not raw:
        return empty_input()

    compact = raw.replace(",", "")
    if "_" in compact:
        return invalid_number()

    try:
        parsed = float(compact)
    except ValueError:
        return invalid_number()

    if not math.isfinite(parsed):
        return invalid_number()
    return Ok(parsed)
