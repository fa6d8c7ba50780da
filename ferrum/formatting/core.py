"""Core formatting infrastructure for canonical Ferrum source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from ferrum.ast import Component, Element, Forest, Import, Node, StateBinding, Text
from ferrum.errors import ExpressionError, FerrumSyntaxError, FormatError
from ferrum.parser import is_comment, parse, parse_expression, parse_line
from ferrum.parser.expressions import Lexer, TokenType

from .expressions import format_expression

logger = logging.getLogger(__name__)


class IndentStyle(Enum):
    """Supported indentation styles."""
    SPACES = "spaces"
    TABS = "tabs"


@dataclass(frozen=True)
class FormattingOptions:
    """Configuration options for formatting.

    ``indent_width`` copies of ``indent_char`` are written per nesting level.
    """

    indent_width: int = 4
    indent_char: str = " "

    # Re-print component argument values that read as expressions. Off by
    # default: values are written back exactly as parsed.
    normalize_expressions: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.indent_width, int) or self.indent_width < 0:
            raise ValueError(f"indent_width must be a non-negative integer, got {self.indent_width!r}")
        if len(self.indent_char) != 1 or not self.indent_char.isspace():
            raise ValueError(f"indent_char must be a single whitespace character, got {self.indent_char!r}")

    @classmethod
    def from_style(cls, style: IndentStyle, size: int = 4, **kwargs) -> "FormattingOptions":
        if style is IndentStyle.TABS:
            return cls(indent_width=1, indent_char="\t", **kwargs)
        return cls(indent_width=size, indent_char=" ", **kwargs)

    @property
    def indent_unit(self) -> str:
        return self.indent_char * self.indent_width


@dataclass
class FormattedResult:
    """Result of formatting a document."""

    formatted_text: str
    is_changed: bool


class Formatter:
    """
    Canonical formatter for Ferrum documents.

    Parses the source, then writes every node back depth-first with
    normalized indentation, shorthand selectors and quoting. Formatting its
    own output reproduces it byte for byte.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.options = options or FormattingOptions()
        self._indent_str = self.options.indent_unit

    def format(self, source_text: str, file_path: Optional[str] = None) -> str:
        """Format ``source_text`` and return the canonical text.

        Raises:
            FormatError: when the source does not parse.
        """
        try:
            forest = parse(source_text, path=file_path)
        except FerrumSyntaxError as exc:
            raise FormatError(
                f"Cannot format: {exc.message}",
                path=exc.path,
                line=exc.line,
                code=exc.code,
                hint=exc.hint,
            ) from exc
        return self.format_nodes(forest)

    def format_document(self, source_text: str, file_path: Optional[str] = None) -> FormattedResult:
        formatted_text = self.format(source_text, file_path)
        return FormattedResult(formatted_text=formatted_text, is_changed=formatted_text != source_text)

    def format_nodes(self, forest: Forest) -> str:
        lines: List[str] = []
        for node in forest:
            self._format_node(node, 0, lines)
        logger.debug("Formatted %d top-level nodes into %d lines", len(forest), len(lines))
        return "".join(f"{line}\n" for line in lines)

    def _format_node(self, node: Node, depth: int, lines: List[str]) -> None:
        indent = self._indent_str * depth

        if isinstance(node, Element):
            lines.append(indent + self._format_element(node))
            for child in node.children:
                self._format_node(child, depth + 1, lines)
        elif isinstance(node, Component):
            lines.append(indent + self._format_component(node))
            for child in node.children:
                self._format_node(child, depth + 1, lines)
        elif isinstance(node, Text):
            lines.append(indent + self._format_text(node))
        elif isinstance(node, StateBinding):
            lines.append(indent + node.path)
        elif isinstance(node, Import):
            names = f" {', '.join(node.names)} " if node.names else " "
            lines.append(f'{indent}import {{{names}}} from "{node.source}"')
        else:
            raise TypeError(f"Unsupported node: {node!r}")

    def _format_element(self, element: Element) -> str:
        shorthand = element.tag
        if element.id:
            shorthand += f"#{element.id}"
        for name in element.classes:
            shorthand += f".{name}"
        shorthand += "".join(f' {key}="{value}"' for key, value in _other_attributes(element.attributes))

        if _reads_back(shorthand, Element(element.tag, element.attributes)):
            return shorthand
        return self._format_bracketed(element)

    def _format_bracketed(self, element: Element) -> str:
        attributes = "".join(f' {key}="{value}"' for key, value in element.attributes.items())
        return f"<{element.tag}{attributes}>"

    def _format_component(self, component: Component) -> str:
        arguments = []
        for key, value in component.attributes.items():
            value = self._format_value(value)
            arguments.append(f"{key}: {value}" if value else f"{key}:")
        return f"{component.name}({', '.join(arguments)})"

    def _format_value(self, value: str) -> str:
        if not self.options.normalize_expressions:
            return value
        try:
            normalized = format_expression(parse_expression(value))
        except ExpressionError:
            return value
        # only spacing and parentheses may change, never a literal
        if _number_literals(normalized) != _number_literals(value):
            return value
        return normalized

    def _format_text(self, text: Text) -> str:
        if " " not in text.value and _reads_back(text.value, text):
            return text.value
        return f'"{text.value}"'


def _other_attributes(attributes: Mapping[str, str]):
    return [(key, value) for key, value in attributes.items() if key not in ("id", "class")]


def _number_literals(text: str) -> List[str]:
    return [token.value for token in Lexer(text).tokenize() if token.type is TokenType.NUMBER]


def _reads_back(line: str, expected: Node) -> bool:
    """True when ``line`` alone parses back to ``expected``."""
    if not line or line != line.strip() or is_comment(line):
        return False
    try:
        return parse_line(line) == expected
    except FerrumSyntaxError:
        return False


def format_source(source: str, options: Optional[FormattingOptions] = None) -> str:
    """Format Ferrum ``source`` into canonical form.

    Raises:
        FormatError: when the source does not parse.
    """
    return Formatter(options).format(source)


__all__ = ["IndentStyle", "FormattingOptions", "FormattedResult", "Formatter", "format_source"]
