"""Typed node model for Ladrillo.

All nodes are frozen dataclasses with slots for:
- Immutability: a tree is built once and never mutated in place
- Sharing: a prebuilt node (e.g. an attribute group) can sit under many parents
- Pattern matching: the renderer dispatches with a single match statement

Node Variants:
Node (base)
├── Element           <name ...attributes>...content</name>
├── Attribute         name="value" inside an opening tag
├── BooleanAttribute  valueless attribute, e.g. required
├── Text              escaped at render time
├── Raw               emitted verbatim
├── Group             transparent; children spliced into the parent
├── Doctype           <!DOCTYPE html> followed by one child
└── Nothing           renders nothing (false conditional)

The Python value ``None`` is accepted anywhere a child is and renders
exactly like ``NOTHING``.

Lifetime:
Trees are plain Python objects owned by the scope that builds them and are
released together once unreferenced. There is no per-node lifetime tracking.

Thread Safety:
All nodes are frozen and safe to share across threads.

"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes."""


@dataclass(frozen=True, slots=True)
class Element(Node):
    """An HTML element.

    Children may interleave attributes and content in any order. The
    renderer emits every attribute into the opening tag and every content
    node into the body, each in input order.

    """

    name: str
    children: tuple["Child", ...] = ()


@dataclass(frozen=True, slots=True)
class Attribute(Node):
    """Valued attribute: ``name="value"``.

    The value is stored verbatim and escaped when emitted.

    """

    name: str
    value: str


@dataclass(frozen=True, slots=True)
class BooleanAttribute(Node):
    """Valueless attribute, e.g. ``disabled``."""

    name: str


@dataclass(frozen=True, slots=True)
class Text(Node):
    """User content. HTML-escaped at render time."""

    content: str


@dataclass(frozen=True, slots=True)
class Raw(Node):
    """Trusted markup, emitted byte-for-byte.

    Nothing is sanitized. Passing untrusted input here bypasses escaping.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Group(Node):
    """Transparent container.

    A Group is never rendered as a tag. Inside an element its children are
    spliced into the element's child sequence at the group's position, so
    attributes bundled in a group still land in the opening tag.

    """

    children: tuple["Child", ...] = ()


@dataclass(frozen=True, slots=True)
class Doctype(Node):
    """Document type declaration wrapping the document root."""

    child: "Child"


@dataclass(frozen=True, slots=True)
class Nothing(Node):
    """Absence marker. Renders nothing in either pass."""


NOTHING = Nothing()

# Closed set of values a tree may contain
Child: TypeAlias = (
    Element | Attribute | BooleanAttribute | Text | Raw | Group | Doctype | Nothing | None
)


def flatten(children: Iterable[Child]) -> Iterator[Child]:
    """Yield children with every Group replaced by its own children.

    Nested groups flatten transitively. Order is preserved exactly.

    Example:
        >>> kids = (Group((Attribute("id", "a"), Group((Text("x"),)))),)
        >>> list(flatten(kids))
        [Attribute(name='id', value='a'), Text(content='x')]

    """
    for child in children:
        if isinstance(child, Group):
            yield from flatten(child.children)
        else:
            yield child


__all__ = [
    "Attribute",
    "BooleanAttribute",
    "Child",
    "Doctype",
    "Element",
    "Group",
    "NOTHING",
    "Node",
    "Nothing",
    "Raw",
    "Text",
    "flatten",
]
