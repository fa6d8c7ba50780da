"""AST node and expression types shared by every Ferrum consumer."""

from .expressions import (
    BINARY_OPERATORS,
    OPERATOR_PRECEDENCE,
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    PropertyAccess,
    SignalAccess,
    StringLiteral,
)
from .nodes import (
    SELF_CLOSING_TAGS,
    Component,
    Element,
    Forest,
    Import,
    Node,
    StateBinding,
    Text,
    can_have_children,
    walk,
)

__all__ = [
    "BINARY_OPERATORS",
    "OPERATOR_PRECEDENCE",
    "BinaryOperation",
    "Expression",
    "FunctionCall",
    "Number",
    "PropertyAccess",
    "SignalAccess",
    "StringLiteral",
    "SELF_CLOSING_TAGS",
    "Component",
    "Element",
    "Forest",
    "Import",
    "Node",
    "StateBinding",
    "Text",
    "can_have_children",
    "walk",
]
