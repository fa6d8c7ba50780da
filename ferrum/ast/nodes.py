"""Document node definitions produced by the Ferrum parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Tuple, Union

# Tags that never receive children, whatever is indented beneath them.
SELF_CLOSING_TAGS = frozenset({"input", "img", "br", "hr", "meta", "link"})


def _freeze_attributes(node: object, attributes: Mapping[str, str]) -> None:
    if not isinstance(attributes, MappingProxyType):
        object.__setattr__(node, "attributes", MappingProxyType(dict(attributes)))


@dataclass(frozen=True)
class Element:
    """An HTML element such as ``div#app.container``."""

    tag: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        _freeze_attributes(self, self.attributes)
        object.__setattr__(self, "children", tuple(self.children))

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    @property
    def classes(self) -> Tuple[str, ...]:
        return tuple(self.attributes.get("class", "").split())

    @property
    def is_void(self) -> bool:
        return self.tag in SELF_CLOSING_TAGS


@dataclass(frozen=True)
class Text:
    """Literal text content."""

    value: str


@dataclass(frozen=True)
class Component:
    """A call to a reusable component, e.g. ``Button(onclick: inc())``.

    Components are never resolved here; attribute values are kept as the
    raw source strings.
    """

    name: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    children: Tuple["Node", ...] = ()

    def __post_init__(self) -> None:
        _freeze_attributes(self, self.attributes)
        object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class StateBinding:
    """A reactive read of ``signal`` or ``signal.member``."""

    signal: str
    member: str = ""

    @property
    def path(self) -> str:
        if self.member:
            return f"{self.signal}.{self.member}"
        return self.signal


@dataclass(frozen=True)
class Import:
    """``import { a, b } from "source"``"""

    names: Tuple[str, ...]
    source: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))


Node = Union[Element, Text, Component, StateBinding, Import]
Forest = List[Node]

CONTAINER_TYPES = (Element, Component)


def can_have_children(node: Node) -> bool:
    """Return True when lines indented beneath ``node`` become its children."""
    if isinstance(node, Element):
        return not node.is_void
    return isinstance(node, Component)


def walk(nodes: Union[Node, Forest]) -> Iterator[Node]:
    """Traverse depth-first, yielding each node before its children."""
    if not isinstance(nodes, (list, tuple)):
        nodes = [nodes]
    for node in nodes:
        yield node
        if isinstance(node, CONTAINER_TYPES):
            yield from walk(node.children)


__all__ = [
    "SELF_CLOSING_TAGS",
    "Element",
    "Text",
    "Component",
    "StateBinding",
    "Import",
    "Node",
    "Forest",
    "can_have_children",
    "walk",
]
