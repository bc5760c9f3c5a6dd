from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

import structlog

from modules.unitconvert.core.categories import Category
from modules.unitconvert.core.format import format_result, round_result
from modules.unitconvert.core.outcome import Failed, Ok, Outcome
from modules.unitconvert.core.parse import parse_value

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ViewState:
    active: str
    label: str
    units: Tuple[str, ...]
    value: str
    from_unit: str
    to_unit: str
    placeholder: str = ""
    outcome: Outcome | None = None

    @property
    def error(self) -> str | None:
        if isinstance(self.outcome, Failed):
            return self.outcome.message
        return None

    @property
    def has_result(self) -> bool:
        return isinstance(self.outcome, Ok)

    @property
    def result(self) -> float | None:
        if isinstance(self.outcome, Ok):
            return self.outcome.value
        return None

    @property
    def result_text(self) -> str | None:
        if isinstance(self.outcome, Ok):
            return format_result(self.outcome.value)
        return None


def _selected_or_default(fields: Mapping[str, str | None], name: str, default: str) -> str:
    value = fields.get(name)
    if value:
        return value
    return default


def _convert(category: Category, raw_value: str, from_unit: str, to_unit: str) -> Outcome:
    parsed = parse_value(raw_value)
    if isinstance(parsed, Failed):
        return parsed

    converted = category.converter(parsed.value, from_unit, to_unit)
    if isinstance(converted, Failed):
        return converted
    return Ok(round_result(converted.value))


def resolve_view(
    category: Category,
    fields: Mapping[str, str | None],
    *,
    submitted: bool,
) -> ViewState:
    """Build the page state for one request against ``category``.

    ``fields`` holds the raw ``value``, ``from`` and ``to`` inputs. Only a
    submitted request is parsed and converted; otherwise the inputs are
    echoed with the category defaults filled in.
    """
    from_unit = _selected_or_default(fields, "from", category.default_from)
    to_unit = _selected_or_default(fields, "to", category.default_to)
    raw_value = fields.get("value") or ""

    outcome: Outcome | None = None
    if submitted:
        outcome = _convert(category, raw_value, from_unit, to_unit)
        if isinstance(outcome, Failed):
            logger.info(
                "conversion.rejected",
                category=category.name,
                error=outcome.kind.value,
            )
        else:
            logger.info(
                "conversion.completed",
                category=category.name,
                from_unit=from_unit,
                to_unit=to_unit,
            )

    return ViewState(
        active=category.name,
        label=category.label,
        units=category.units,
        value=raw_value,
        from_unit=from_unit,
        to_unit=to_unit,
        placeholder=category.placeholder,
        outcome=outcome,
    )
