"""
AST-based formatter for Ferrum.

This package:
1. Parses .frr source into a forest
2. Writes every node back in canonical form
3. Keeps the result stable under repeated formatting
"""

from __future__ import annotations

__all__ = [
    "Formatter",
    "FormattingOptions",
    "FormattedResult",
    "IndentStyle",
    "DefaultFormattingRules",
    "format_source",
    "format_expression",
]

from .core import FormattedResult, Formatter, FormattingOptions, IndentStyle, format_source
from .expressions import format_expression
from .rules import DefaultFormattingRules
