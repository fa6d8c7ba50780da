"""Indentation-driven tree reconstruction for Ferrum source."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ferrum.ast import Element, Forest, Node, can_have_children

from .lines import is_comment, parse_line

logger = logging.getLogger(__name__)


@dataclass
class _OpenNode:
    """A node whose indented children are still being collected."""

    node: Node
    indent: int
    children: List["_OpenNode"] = field(default_factory=list)

    def freeze(self) -> Node:
        if not self.children:
            return self.node
        extra = tuple(child.freeze() for child in self.children)
        return dataclasses.replace(self.node, children=self.node.children + extra)


def measure_indent(line: str) -> int:
    """Width of the leading whitespace, one column per character."""
    return len(line) - len(line.lstrip())


class Parser:
    """Turns Ferrum source text into an ordered forest of nodes.

    Nesting follows an explicit stack of open nodes together with the indent
    each one was declared at. A new line closes every open node whose indent
    is greater than or equal to its own, so any consistent indentation width
    nests correctly.
    """

    def __init__(self, source: str, *, path: Optional[str] = None):
        self.source = source
        self.path = path

    def parse(self) -> Forest:
        roots: List[_OpenNode] = []
        stack: List[_OpenNode] = []
        void_indent: Optional[int] = None

        for number, raw in enumerate(self.source.splitlines(), start=1):
            content = raw.strip()
            if not content or is_comment(content):
                continue

            indent = measure_indent(raw)
            node = parse_line(content, line=number, path=self.path, source_line=raw)

            if void_indent is not None:
                if indent > void_indent:
                    logger.warning(
                        "%s:%d: ignoring indentation under a self-closing tag",
                        self.path or "<string>",
                        number,
                    )
                else:
                    void_indent = None

            while stack and stack[-1].indent >= indent:
                stack.pop()

            entry = _OpenNode(node=node, indent=indent)
            if stack:
                stack[-1].children.append(entry)
            else:
                roots.append(entry)

            if can_have_children(node):
                stack.append(entry)
            elif isinstance(node, Element) and void_indent is None:
                void_indent = indent

        forest = [entry.freeze() for entry in roots]
        logger.debug("Parsed %d top-level nodes from %s", len(forest), self.path or "<string>")
        return forest


def parse(source: str, *, path: Optional[str] = None) -> Forest:
    """Parse Ferrum source into a forest.

    Raises:
        FerrumSyntaxError: on the first malformed line; no partial forest is
            returned.
    """
    return Parser(source, path=path).parse()


__all__ = ["Parser", "parse", "measure_indent"]
