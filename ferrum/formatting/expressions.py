"""Pretty-printer for expression trees."""

from __future__ import annotations

from ferrum.ast import (
    OPERATOR_PRECEDENCE,
    BinaryOperation,
    Expression,
    FunctionCall,
    Number,
    PropertyAccess,
    SignalAccess,
    StringLiteral,
)


def format_number(value: float) -> str:
    """Integral values print without a fraction: ``-1.0`` becomes ``-1``."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def format_expression(expression: Expression, parent_precedence: int = 0) -> str:
    """Render ``expression`` with parentheses only where precedence needs them."""
    if isinstance(expression, StringLiteral):
        return f'"{expression.value}"'
    if isinstance(expression, Number):
        return format_number(expression.value)
    if isinstance(expression, SignalAccess):
        return expression.name
    if isinstance(expression, PropertyAccess):
        return f"{expression.signal}.{expression.property}"
    if isinstance(expression, BinaryOperation):
        precedence = OPERATOR_PRECEDENCE[expression.operator]
        left = format_expression(expression.left, precedence)
        # operators are left-associative, so an equal-precedence right operand
        # needs parentheses
        right = format_expression(expression.right, precedence + 1)
        text = f"{left} {expression.operator} {right}"
        if precedence < parent_precedence:
            return f"({text})"
        return text
    if isinstance(expression, FunctionCall):
        args = ", ".join(format_expression(arg) for arg in expression.args)
        return f"{expression.function}({args})"
    raise TypeError(f"Unsupported expression: {expression!r}")


__all__ = ["format_expression", "format_number"]
