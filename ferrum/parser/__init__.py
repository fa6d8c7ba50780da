"""Public parser entry points for Ferrum source."""

from __future__ import annotations

from ferrum.errors import ExpressionError, FerrumSyntaxError

from .base import Parser, measure_indent, parse
from .expressions import parse_expression
from .lines import KNOWN_TAGS, is_comment, parse_line

__all__ = [
    "Parser",
    "parse",
    "parse_line",
    "parse_expression",
    "measure_indent",
    "is_comment",
    "KNOWN_TAGS",
    "FerrumSyntaxError",
    "ExpressionError",
]
