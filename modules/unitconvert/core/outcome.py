from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ErrorKind(str, Enum):
    EMPTY_INPUT = "empty_input"
    INVALID_NUMBER = "invalid_number"
    UNSUPPORTED_UNIT = "unsupported_unit"


@dataclass(frozen=True)
class Ok:
    value: float


@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    message: str


Outcome = Union[Ok, Failed]


def empty_input() -> Failed:
    return Failed(ErrorKind.EMPTY_INPUT, "Please enter a value.")


def invalid_number() -> Failed:
    return Failed(ErrorKind.INVALID_NUMBER, "Invalid number.")


def unsupported_unit(category: str) -> Failed:
    return Failed(ErrorKind.UNSUPPORTED_UNIT, f"Unsupported {category} unit.")
