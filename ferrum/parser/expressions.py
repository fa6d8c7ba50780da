"""Reader for attribute-value expressions.

Component arguments are stored as raw strings. This module turns such a
string into an :mod:`ferrum.ast.expressions` tree so the formatter can
re-print it canonically. Expressions are never evaluated.

Grammar (lowest precedence first)::

    expr     := or
    or       := and ("||" and)*
    and      := equality ("&&" equality)*
    equality := compare (("==" | "!=") compare)*
    compare  := sum (("<" | ">") sum)*
    sum      := product (("+" | "-") product)*
    product  := primary (("*" | "/") primary)*
    primary  := STRING | "-"? NUMBER | "(" expr ")"
              | NAME ("." NAME)? ("(" [expr ("," expr)*] ")")?
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

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
from ferrum.errors import ExpressionError


class TokenType(Enum):
    STRING = auto()
    NUMBER = auto()
    NAME = auto()
    OPERATOR = auto()
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    DOT = auto()
    EOF = auto()


@dataclass
class Token:
    type: TokenType
    value: str
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.column})"


_TWO_CHAR_OPERATORS = ("==", "!=", "&&", "||")
_ONE_CHAR_OPERATORS = ("+", "-", "*", "/", "<", ">")
_PUNCTUATION = {"(": TokenType.LPAREN, ")": TokenType.RPAREN, ",": TokenType.COMMA, ".": TokenType.DOT}


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and char in "0123456789"


class Lexer:
    """Tokenizer for a single expression."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.tokens: List[Token] = []

    def error(self, message: str) -> ExpressionError:
        return ExpressionError(f"{message} in expression {self.text!r}", column=self.pos + 1, source_line=self.text)

    def peek(self, offset: int = 0) -> Optional[str]:
        pos = self.pos + offset
        if pos < len(self.text):
            return self.text[pos]
        return None

    def advance(self) -> str:
        char = self.text[self.pos]
        self.pos += 1
        return char

    def read_string(self) -> str:
        self.advance()  # opening quote
        chars = []
        while True:
            char = self.peek()
            if char is None:
                raise self.error("Unterminated string literal")
            if char == "\\":
                raise self.error("Escape sequences are not supported")
            self.advance()
            if char == '"':
                return "".join(chars)
            chars.append(char)

    def read_number(self) -> str:
        chars = []
        while _is_digit(self.peek()):
            chars.append(self.advance())
        if self.peek() == "." and _is_digit(self.peek(1)):
            chars.append(self.advance())
            while _is_digit(self.peek()):
                chars.append(self.advance())
        if self.peek() in ("e", "E"):
            chars.append(self.advance())
            if self.peek() in ("+", "-"):
                chars.append(self.advance())
            if not _is_digit(self.peek()):
                raise self.error("Malformed exponent")
            while _is_digit(self.peek()):
                chars.append(self.advance())
        return "".join(chars)

    def read_name(self) -> str:
        chars = []
        while self.peek() is not None and (self.peek().isalnum() or self.peek() == "_"):
            chars.append(self.advance())
        return "".join(chars)

    def tokenize(self) -> List[Token]:
        while self.pos < len(self.text):
            char = self.peek()
            start = self.pos
            if char.isspace():
                self.advance()
            elif char == '"':
                self.tokens.append(Token(TokenType.STRING, self.read_string(), start))
            elif _is_digit(char):
                self.tokens.append(Token(TokenType.NUMBER, self.read_number(), start))
            elif char.isalpha() or char == "_":
                self.tokens.append(Token(TokenType.NAME, self.read_name(), start))
            elif self.text.startswith(_TWO_CHAR_OPERATORS, self.pos):
                self.tokens.append(Token(TokenType.OPERATOR, self.text[self.pos:self.pos + 2], start))
                self.pos += 2
            elif char in _ONE_CHAR_OPERATORS:
                self.tokens.append(Token(TokenType.OPERATOR, self.advance(), start))
            elif char in _PUNCTUATION:
                self.tokens.append(Token(_PUNCTUATION[char], self.advance(), start))
            else:
                raise self.error(f"Unexpected character {char!r}")
        self.tokens.append(Token(TokenType.EOF, "", self.pos))
        return self.tokens


class ExpressionParser:
    """Precedence-climbing parser over :class:`Lexer` tokens."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = Lexer(text).tokenize()
        self.index = 0

    def error(self, message: str) -> ExpressionError:
        token = self.current
        return ExpressionError(
            f"{message} in expression {self.text!r}",
            column=token.column + 1,
            source_line=self.text,
        )

    @property
    def current(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        if token.type is not TokenType.EOF:
            self.index += 1
        return token

    def expect(self, token_type: TokenType) -> Token:
        if self.current.type is not token_type:
            raise self.error(f"Expected {token_type.name.lower()}")
        return self.advance()

    def parse(self) -> Expression:
        if self.current.type is TokenType.EOF:
            raise self.error("Empty expression")
        expression = self.parse_binary(1)
        if self.current.type is not TokenType.EOF:
            raise self.error(f"Unexpected {self.current.value!r}")
        return expression

    def parse_binary(self, min_precedence: int) -> Expression:
        left = self.parse_primary()
        while True:
            token = self.current
            if token.type is not TokenType.OPERATOR:
                return left
            precedence = OPERATOR_PRECEDENCE[token.value]
            if precedence < min_precedence:
                return left
            self.advance()
            right = self.parse_binary(precedence + 1)
            left = BinaryOperation(left, token.value, right)

    def parse_primary(self) -> Expression:
        token = self.advance()
        if token.type is TokenType.STRING:
            return StringLiteral(token.value)
        if token.type is TokenType.NUMBER:
            return Number(float(token.value))
        if token.type is TokenType.OPERATOR and token.value == "-" and self.current.type is TokenType.NUMBER:
            return Number(-float(self.advance().value))
        if token.type is TokenType.LPAREN:
            inner = self.parse_binary(1)
            self.expect(TokenType.RPAREN)
            return inner
        if token.type is TokenType.NAME:
            return self.parse_name(token.value)
        if token.type is not TokenType.EOF:
            self.index -= 1
        raise self.error(f"Unexpected {token.value!r}" if token.value else "Unexpected end of input")

    def parse_name(self, name: str) -> Expression:
        member: Optional[str] = None
        if self.current.type is TokenType.DOT:
            self.advance()
            member = self.expect(TokenType.NAME).value
        if self.current.type is TokenType.LPAREN:
            self.advance()
            args: List[Expression] = []
            if self.current.type is not TokenType.RPAREN:
                args.append(self.parse_binary(1))
                while self.current.type is TokenType.COMMA:
                    self.advance()
                    args.append(self.parse_binary(1))
            self.expect(TokenType.RPAREN)
            function = f"{name}.{member}" if member else name
            return FunctionCall(function, tuple(args))
        if member is not None:
            return PropertyAccess(name, member)
        return SignalAccess(name)


def parse_expression(text: str) -> Expression:
    """Read ``text`` as an expression tree.

    Raises:
        ExpressionError: when ``text`` is not a well-formed expression.
    """
    return ExpressionParser(text).parse()


__all__ = ["TokenType", "Token", "Lexer", "ExpressionParser", "parse_expression"]
