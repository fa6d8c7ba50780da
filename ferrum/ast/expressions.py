"""Expression trees used for structured attribute values.

Expressions are shapes only; nothing in Ferrum evaluates them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

BINARY_OPERATORS = ("+", "-", "*", "/", "==", "!=", ">", "<", "&&", "||")

# Binding strength per operator, higher binds tighter.
OPERATOR_PRECEDENCE = {
    "||": 1,
    "&&": 2,
    "==": 3,
    "!=": 3,
    ">": 4,
    "<": 4,
    "+": 5,
    "-": 5,
    "*": 6,
    "/": 6,
}


@dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclass(frozen=True)
class Number:
    value: float


@dataclass(frozen=True)
class SignalAccess:
    name: str


@dataclass(frozen=True)
class PropertyAccess:
    signal: str
    property: str


@dataclass(frozen=True)
class BinaryOperation:
    left: "Expression"
    operator: str
    right: "Expression"

    def __post_init__(self) -> None:
        if self.operator not in OPERATOR_PRECEDENCE:
            raise ValueError(f"Unsupported operator: {self.operator!r}")


@dataclass(frozen=True)
class FunctionCall:
    function: str
    args: Tuple["Expression", ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))


Expression = Union[StringLiteral, Number, SignalAccess, PropertyAccess, BinaryOperation, FunctionCall]


__all__ = [
    "BINARY_OPERATORS",
    "OPERATOR_PRECEDENCE",
    "StringLiteral",
    "Number",
    "SignalAccess",
    "PropertyAccess",
    "BinaryOperation",
    "FunctionCall",
    "Expression",
]
