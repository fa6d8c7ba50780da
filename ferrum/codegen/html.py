"""
Static HTML generator for Ferrum.

Turns a parsed forest into a single self-contained document: a fixed
shell (doctype, head with the packaged stylesheet inlined, and a
``ferrum-app`` root container) wrapped around the rendered nodes.

Components are never expanded. Each becomes a ``div`` carrying its name
and arguments as ``data-*`` attributes. Text is written verbatim without
escaping, and state bindings and imports produce no markup.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib import resources
from typing import Iterable, List, Mapping

from jinja2 import Environment, PackageLoader, StrictUndefined

from ferrum.ast import Component, Element, Forest, Import, Node, StateBinding, Text

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Ferrum App"
DOCUMENT_TEMPLATE = "document.html.j2"
STYLESHEET_RESOURCE = "static/ferrum.css"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=PackageLoader("ferrum.codegen", "templates"),
        autoescape=False,  # body markup is already rendered
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


@lru_cache(maxsize=1)
def load_stylesheet() -> str:
    """Return the stylesheet inlined into every generated document."""
    return resources.files("ferrum.codegen").joinpath(STYLESHEET_RESOURCE).read_text(encoding="utf-8")


def to_html(forest: Forest, *, title: str = DEFAULT_TITLE) -> str:
    """Render ``forest`` as a complete HTML document."""
    body = to_html_body(forest)
    template = _environment().get_template(DOCUMENT_TEMPLATE)
    document = template.render(title=title, stylesheet=load_stylesheet().strip(), body=body)
    logger.debug("Generated HTML document (%d bytes) from %d nodes", len(document), len(forest))
    return document


def to_html_body(forest: Iterable[Node]) -> str:
    """Render nodes without the document shell."""
    parts: List[str] = []
    for node in forest:
        _render_node(node, parts)
    return "".join(parts)


def _render_node(node: Node, parts: List[str]) -> None:
    if isinstance(node, Element):
        attributes = _render_attributes(node.attributes)
        if node.is_void:
            parts.append(f"<{node.tag}{attributes} />")
            return
        parts.append(f"<{node.tag}{attributes}>")
        for child in node.children:
            _render_node(child, parts)
        parts.append(f"</{node.tag}>")
    elif isinstance(node, Component):
        data = {"component": node.name}
        data.update((key, value) for key, value in node.attributes.items() if key != "component")
        parts.append(f"<div{_render_attributes(data, prefix='data-')}>")
        for child in node.children:
            _render_node(child, parts)
        parts.append("</div>")
    elif isinstance(node, Text):
        parts.append(node.value)
    elif isinstance(node, (StateBinding, Import)):
        return
    else:
        raise TypeError(f"Unsupported node: {node!r}")


def _render_attributes(attributes: Mapping[str, str], prefix: str = "") -> str:
    return "".join(f" {prefix}{key}='{value}'" for key, value in attributes.items())


__all__ = ["to_html", "to_html_body", "load_stylesheet", "DEFAULT_TITLE"]
