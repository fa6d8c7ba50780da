"""
Ferrum markup language front end.

Ferrum (``.frr``) files describe nested UI structure with significant
indentation instead of closing tags: HTML-like elements, reusable
components, text content, reactive state bindings and imports.

The code is organised into several modules:

* ``ast`` – frozen dataclasses for document nodes and attribute-value
  expressions.  Every other module talks only through these types.
* ``parser`` – a line-oriented parser that classifies each line and
  rebuilds nesting from an explicit stack of indented open nodes.
* ``formatting`` – the canonical formatter.  Its output parses back to
  the same structure and is stable under repeated formatting.
* ``codegen`` – back ends that turn a parsed forest into a static HTML
  document or into ``view!`` markup for the Leptos framework.
* ``config`` – formatter and generator settings read from
  ``ferrum.toml`` and ``FERRUM_*`` environment variables.

Everything here is pure and synchronous; callers such as a dev server or
a build step supply source text and get a value or a ``FerrumError``
back.
"""

import re
from importlib import metadata as _metadata
from pathlib import Path
from typing import Optional

from .ast import Component, Element, Forest, Import, Node, StateBinding, Text
from .codegen import to_html, to_html_body, to_view_code
from .errors import ConfigError, ExpressionError, FerrumError, FerrumSyntaxError, FormatError
from .formatting import FormattingOptions, format_source
from .parser import parse


def _local_version() -> Optional[str]:
    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    if not pyproject.exists():
        return None
    try:
        text = pyproject.read_text(encoding="utf-8")
    except OSError:  # pragma: no cover - IO errors should not break imports
        return None
    match = re.search(r"^version\s*=\s*\"([^\"]+)\"", text, flags=re.MULTILINE)
    if match:
        return match.group(1)
    return None


try:  # pragma: no cover - metadata lookup for installed copies
    __version__ = _metadata.version("ferrum")
except _metadata.PackageNotFoundError:  # pragma: no cover - source tree
    __version__ = _local_version() or "0.1.0"


__all__ = [
    "__version__",
    "parse",
    "format_source",
    "to_html",
    "to_html_body",
    "to_view_code",
    "FormattingOptions",
    "Node",
    "Forest",
    "Element",
    "Text",
    "Component",
    "StateBinding",
    "Import",
    "FerrumError",
    "FerrumSyntaxError",
    "ExpressionError",
    "FormatError",
    "ConfigError",
]
