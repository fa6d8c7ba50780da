"""Tests for the attribute-value expression reader."""

from __future__ import annotations

import pytest

from ferrum.ast import (
    BinaryOperation,
    FunctionCall,
    Number,
    PropertyAccess,
    SignalAccess,
    StringLiteral,
)
from ferrum.errors import ExpressionError, FerrumSyntaxError
from ferrum.parser import parse_expression
from ferrum.parser.expressions import Lexer, TokenType


def test_literals() -> None:
    assert parse_expression('"hello"') == StringLiteral("hello")
    assert parse_expression("42") == Number(42.0)
    assert parse_expression("1.5e3") == Number(1500.0)
    assert parse_expression("-1") == Number(-1.0)


def test_names() -> None:
    assert parse_expression("count") == SignalAccess("count")
    assert parse_expression("count.value") == PropertyAccess("count", "value")


def test_calls() -> None:
    assert parse_expression("set_count(-1)") == FunctionCall("set_count", (Number(-1.0),))
    assert parse_expression("reset()") == FunctionCall("reset")
    assert parse_expression('user.greet(name, "!")') == FunctionCall(
        "user.greet", (SignalAccess("name"), StringLiteral("!"))
    )


def test_precedence() -> None:
    expected = BinaryOperation(Number(1.0), "+", BinaryOperation(Number(2.0), "*", Number(3.0)))
    assert parse_expression("1 + 2 * 3") == expected


def test_left_associative() -> None:
    a, b, c = SignalAccess("a"), SignalAccess("b"), SignalAccess("c")
    assert parse_expression("a - b - c") == BinaryOperation(BinaryOperation(a, "-", b), "-", c)


def test_parentheses_override_precedence() -> None:
    expression = parse_expression("(a + b) * c")

    assert expression.operator == "*"
    assert expression.left == BinaryOperation(SignalAccess("a"), "+", SignalAccess("b"))


def test_logical_operators_bind_loosest() -> None:
    expression = parse_expression("count.value > 0 && ok")

    assert expression == BinaryOperation(
        BinaryOperation(PropertyAccess("count", "value"), ">", Number(0.0)),
        "&&",
        SignalAccess("ok"),
    )
    assert parse_expression("a || b && c").operator == "||"
    assert parse_expression("a == b != c").left.operator == "=="


def test_binary_operation_rejects_unknown_operator() -> None:
    with pytest.raises(ValueError):
        BinaryOperation(Number(1.0), "%", Number(2.0))


def test_lexer_tokens() -> None:
    tokens = Lexer('inc(count.value, "x") > 1').tokenize()

    assert [token.type for token in tokens] == [
        TokenType.NAME,
        TokenType.LPAREN,
        TokenType.NAME,
        TokenType.DOT,
        TokenType.NAME,
        TokenType.COMMA,
        TokenType.STRING,
        TokenType.RPAREN,
        TokenType.OPERATOR,
        TokenType.NUMBER,
        TokenType.EOF,
    ]
    assert tokens[6].value == "x"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "1 +",
        '"unterminated',
        '"a\\"b"',
        "a $ b",
        "(a",
        "a b",
        "1e",
        "'single'",
        "count.",
        "f(1,)",
    ],
)
def test_invalid_expressions(text: str) -> None:
    with pytest.raises(ExpressionError):
        parse_expression(text)


def test_expression_error_is_a_syntax_error() -> None:
    with pytest.raises(FerrumSyntaxError) as exc_info:
        parse_expression("a $ b")

    error = exc_info.value
    assert error.column == 3
    assert error.source_line == "a $ b"
