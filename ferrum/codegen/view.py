"""View-code generator: renders a forest as Leptos ``view!`` markup."""

from __future__ import annotations

import logging
import re
from typing import List

from ferrum.ast import Component, Element, Forest, Import, Node, StateBinding, Text, walk

logger = logging.getLogger(__name__)

PRELUDE = "use leptos::*;"
INDENT = "    "

_PATH_SEPARATOR_RE = re.compile(r"[:/.]+")


def to_view_code(forest: Forest) -> str:
    """Render ``forest`` as view code, one ``view!`` block per top-level node.

    Imports anywhere in the forest become ``use`` lines after the prelude.
    """
    header = [PRELUDE]
    header.extend(_render_import(node) for node in walk(forest) if isinstance(node, Import))

    blocks: List[str] = []
    for node in forest:
        if isinstance(node, Import):
            continue
        lines: List[str] = []
        _render_node(node, 1, lines)
        blocks.append("\n".join(["view! {", *lines, "}"]))

    logger.debug("Generated %d view blocks", len(blocks))
    return "\n\n".join(["\n".join(header), *blocks]) + "\n"


def _render_import(node: Import) -> str:
    path = _PATH_SEPARATOR_RE.sub("::", node.source.strip(":/.")).replace("-", "_")
    if not node.names:
        return f"use {path};"
    return f"use {path}::{{{', '.join(node.names)}}};"


def _render_node(node: Node, depth: int, lines: List[str]) -> None:
    indent = INDENT * depth
    if isinstance(node, Element):
        attributes = "".join(f" {key}={_string_literal(value)}" for key, value in node.attributes.items())
        _render_tag(node.tag, attributes, node.children, depth, lines)
    elif isinstance(node, Component):
        attributes = "".join(
            f" {key}={{{value}}}" if value else f" {key}" for key, value in node.attributes.items()
        )
        _render_tag(node.name, attributes, node.children, depth, lines)
    elif isinstance(node, Text):
        lines.append(indent + _string_literal(node.value))
    elif isinstance(node, StateBinding):
        lines.append(f"{indent}{{read({node.path})}}")
    elif isinstance(node, Import):
        return
    else:
        raise TypeError(f"Unsupported node: {node!r}")


def _render_tag(name: str, attributes: str, children, depth: int, lines: List[str]) -> None:
    indent = INDENT * depth
    if not children:
        lines.append(f"{indent}<{name}{attributes} />")
        return
    lines.append(f"{indent}<{name}{attributes}>")
    for child in children:
        _render_node(child, depth + 1, lines)
    lines.append(f"{indent}</{name}>")


def _string_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


__all__ = ["to_view_code", "PRELUDE"]
