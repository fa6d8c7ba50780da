"""Single-line classification for Ferrum source.

Lines are the only lexical unit of the language: every non-blank,
non-comment line becomes exactly one node (plus, for elements, an optional
inline text child).
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

from ferrum.ast import SELF_CLOSING_TAGS, Component, Element, Import, Node, StateBinding, Text
from ferrum.errors import FerrumSyntaxError

# Bare identifiers in this set are elements, any other identifier is a
# state binding.
KNOWN_TAGS = frozenset({
    "a", "abbr", "address", "area", "article", "aside", "audio", "b", "base",
    "blockquote", "body", "br", "button", "canvas", "caption", "code", "col",
    "dd", "details", "dialog", "div", "dl", "dt", "em", "embed", "fieldset",
    "figcaption", "figure", "footer", "form", "h1", "h2", "h3", "h4", "h5",
    "h6", "head", "header", "hr", "html", "i", "iframe", "img", "input",
    "label", "legend", "li", "link", "main", "mark", "meta", "nav", "ol",
    "optgroup", "option", "output", "p", "picture", "pre", "progress",
    "section", "select", "small", "source", "span", "strong", "sub",
    "summary", "sup", "svg", "table", "tbody", "td", "template", "textarea",
    "tfoot", "th", "thead", "time", "title", "tr", "u", "ul", "video",
})

COMMENT_PREFIX = "//"

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
_BINDING_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_]*)\.([A-Za-z_][A-Za-z0-9_]*)\Z")
_COMPONENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*\(")
_IMPORT_PREFIX_RE = re.compile(r"import\b")
_IMPORT_RE = re.compile(r'import\s*\{([^}]*)\}\s*from\s+"([^"]*)"\Z')
_ATTRIBUTE_RE = re.compile(r'([^\s="]+)="([^"]*)"')
_TOKEN_RE = re.compile(r'"[^"]*"|[^\s"=]+="[^"]*"|\S+')
_SELECTOR_PART_RE = re.compile(r"([#.])([^#.]*)")
_BRACKET_TAG_RE = re.compile(r"[^\s>]*")

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = {")", "]", "}"}


def is_comment(content: str) -> bool:
    return content.startswith(COMMENT_PREFIX)


def parse_line(
    content: str,
    *,
    line: Optional[int] = None,
    path: Optional[str] = None,
    source_line: Optional[str] = None,
) -> Node:
    """Classify one trimmed, non-empty line and build its node.

    Args:
        content: The line with surrounding whitespace removed.
        line: 1-based line number, used for error reporting only.
        path: Source path, used for error reporting only.
        source_line: The untrimmed line, attached to syntax errors.

    Raises:
        FerrumSyntaxError: for a malformed import, component call or
            bracketed element.
    """
    context = _LineContext(content, line=line, path=path, source_line=source_line)

    if _IMPORT_PREFIX_RE.match(content):
        return _parse_import(context)

    if len(content) >= 2 and content.startswith('"') and content.endswith('"'):
        return Text(content[1:-1])

    if _COMPONENT_RE.match(content):
        return _parse_component(context)

    if content.startswith("<"):
        return _parse_bracketed(context)

    if not any(char in content for char in " \t#.("):
        if content in KNOWN_TAGS:
            return Element(content)
        if _IDENTIFIER_RE.match(content):
            return StateBinding(content)
        return Text(content)

    binding = _BINDING_RE.match(content)
    if binding and binding.group(1) not in KNOWN_TAGS:
        return StateBinding(binding.group(1), binding.group(2))

    return _parse_shorthand(context)


class _LineContext:
    __slots__ = ("content", "line", "path", "source_line")

    def __init__(self, content: str, *, line: Optional[int], path: Optional[str], source_line: Optional[str]):
        self.content = content
        self.line = line
        self.path = path
        self.source_line = source_line if source_line is not None else content

    def error(self, message: str, *, code: str, hint: Optional[str] = None) -> FerrumSyntaxError:
        return FerrumSyntaxError(
            f"{message}: {self.source_line.strip()}",
            source_line=self.source_line,
            path=self.path,
            line=self.line,
            code=code,
            hint=hint,
        )


# ----------------------------------------------------------------------
# Imports
# ----------------------------------------------------------------------
def _parse_import(context: _LineContext) -> Import:
    match = _IMPORT_RE.match(context.content)
    if not match:
        raise context.error(
            "Malformed import",
            code="FRR003",
            hint='Use: import { name } from "source"',
        )
    names = tuple(name.strip() for name in match.group(1).split(",") if name.strip())
    return Import(names=names, source=match.group(2))


# ----------------------------------------------------------------------
# Component calls
# ----------------------------------------------------------------------
def _parse_component(context: _LineContext) -> Component:
    content = context.content
    open_index = content.index("(")
    close_index = _find_matching(content, open_index)
    if close_index is None:
        raise context.error("Unbalanced parentheses in component call", code="FRR001")
    if close_index != len(content) - 1:
        raise context.error(
            "Unexpected text after component call",
            code="FRR001",
            hint="Put children on their own indented lines",
        )

    attributes: Dict[str, str] = {}
    for segment in split_top_level(content[open_index + 1:close_index], ","):
        key, separator, value = segment.partition(":")
        key = key.strip()
        if not separator or not key:
            continue
        attributes[key] = value.strip()

    return Component(name=content[:open_index], attributes=attributes)


def _find_matching(text: str, open_index: int) -> Optional[int]:
    """Return the index of the bracket closing ``text[open_index]``."""
    stack: List[str] = []
    in_string = False
    for index in range(open_index, len(text)):
        char = text[index]
        if in_string:
            if char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _OPENERS:
            stack.append(_OPENERS[char])
        elif char in _CLOSERS:
            if not stack or stack.pop() != char:
                return None
            if not stack:
                return index
    return None


def split_top_level(text: str, separator: str) -> List[str]:
    """Split on ``separator`` outside quotes and brackets.

    Empty segments are dropped.
    """
    parts: List[str] = []
    depth = 0
    in_string = False
    current: List[str] = []
    for char in text:
        if in_string:
            current.append(char)
            if char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(depth - 1, 0)
        elif char == separator and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part for part in parts if part.strip()]


def _find_unquoted(text: str, target: str, start: int) -> Optional[int]:
    """Return the index of the first ``target`` outside double quotes."""
    in_string = False
    for index in range(start, len(text)):
        char = text[index]
        if char == '"':
            in_string = not in_string
        elif char == target and not in_string:
            return index
    return None


# ----------------------------------------------------------------------
# Elements
# ----------------------------------------------------------------------
def _parse_bracketed(context: _LineContext) -> Element:
    content = context.content
    tag_match = _BRACKET_TAG_RE.match(content, 1)
    tag = tag_match.group().rstrip("/")
    if not tag:
        raise context.error("Element is missing a tag name", code="FRR002")

    # '>' inside a quoted attribute value does not close the tag
    close_index = _find_unquoted(content, ">", tag_match.end())
    if close_index is None:
        raise context.error("Unterminated element, expected '>'", code="FRR002")

    element_id: Optional[str] = None
    classes: List[str] = []
    others: Dict[str, str] = {}
    for key, value in _ATTRIBUTE_RE.findall(content[tag_match.end():close_index]):
        element_id = _apply_attribute(key, value, element_id, classes, others)

    children: Tuple[Node, ...] = ()
    tail = content[close_index + 1:].strip()
    closing = f"</{tag}>"
    if tail.endswith(closing):
        tail = tail[: -len(closing)].rstrip()
    if tail and tag not in SELF_CLOSING_TAGS:
        children = (Text(_unquote(tail)),)

    return Element(tag=tag, attributes=assemble_attributes(element_id, classes, others), children=children)


def _parse_shorthand(context: _LineContext) -> Element:
    tokens = _TOKEN_RE.findall(context.content)
    tag, element_id, classes = _parse_selector(tokens[0])

    others: Dict[str, str] = {}
    children: List[Node] = []
    for token in tokens[1:]:
        if len(token) >= 2 and token.startswith('"') and token.endswith('"'):
            children.append(Text(token[1:-1]))
        elif token.startswith("."):
            classes.extend(name for name in token.split(".") if name)
        else:
            attribute = _ATTRIBUTE_RE.fullmatch(token)
            if attribute:
                element_id = _apply_attribute(attribute.group(1), attribute.group(2), element_id, classes, others)

    if tag in SELF_CLOSING_TAGS:
        children = []

    return Element(tag=tag, attributes=assemble_attributes(element_id, classes, others), children=tuple(children))


def _parse_selector(selector: str) -> Tuple[str, Optional[str], List[str]]:
    """Split ``tag#id.class1.class2`` into its parts."""
    tag_end = len(selector)
    for marker in "#.":
        position = selector.find(marker)
        if position != -1:
            tag_end = min(tag_end, position)
    tag = selector[:tag_end] or "div"

    element_id: Optional[str] = None
    classes: List[str] = []
    for marker, name in _SELECTOR_PART_RE.findall(selector[tag_end:]):
        if not name:
            continue
        if marker == "#":
            element_id = name
        else:
            classes.append(name)
    return tag, element_id, classes


def _apply_attribute(
    key: str,
    value: str,
    element_id: Optional[str],
    classes: List[str],
    others: Dict[str, str],
) -> Optional[str]:
    if key == "id":
        return value
    if key == "class":
        classes.extend(value.split())
    else:
        others[key] = value
    return element_id


def assemble_attributes(
    element_id: Optional[str],
    classes: Iterable[str],
    others: Dict[str, str],
) -> Dict[str, str]:
    """Build the canonical attribute order: ``id``, ``class``, the rest."""
    attributes: Dict[str, str] = {}
    if element_id:
        attributes["id"] = element_id
    unique_classes = list(dict.fromkeys(classes))
    if unique_classes:
        attributes["class"] = " ".join(unique_classes)
    attributes.update(others)
    return attributes


def _unquote(text: str) -> str:
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


__all__ = ["KNOWN_TAGS", "COMMENT_PREFIX", "is_comment", "parse_line", "split_top_level", "assemble_attributes"]
