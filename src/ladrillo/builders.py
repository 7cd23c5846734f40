"""Node construction primitives.

Every constructor is pure and total: empty names, empty strings and empty
child lists all produce legal (if degenerate) nodes. Nothing is validated
here; see RenderConfig.validate_names for opt-in checks at render time.

Example:
    >>> from ladrillo.builders import attribute, element, text
    >>> element("p", attribute("class", "lead"), text("Hello"))
    Element(name='p', children=(Attribute(name='class', value='lead'), Text(content='Hello')))

"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from ladrillo.nodes import (
    NOTHING,
    Attribute,
    BooleanAttribute,
    Child,
    Doctype,
    Element,
    Group,
    Raw,
    Text,
)

T = TypeVar("T")


def element(name: str, *children: Child) -> Element:
    """Build an element.

    No tag whitelist is applied, so custom elements work and typos pass
    through unnoticed.

    Args:
        name: Tag name, emitted verbatim
        *children: Attributes and content in any order

    Returns:
        Element node
    """
    return Element(name, children)


def attribute(name: str, value: str) -> Attribute:
    """Build a valued attribute. The value is escaped when rendered."""
    return Attribute(name, value)


def boolean_attribute(name: str) -> BooleanAttribute:
    """Build a valueless attribute such as ``required``."""
    return BooleanAttribute(name)


def text(value: str) -> Text:
    """Build a text node. The value is escaped when rendered."""
    return Text(value)


def formatted_text(fmt: str, *args: object, **kwargs: object) -> Text:
    """Format with ``str.format`` and wrap the result as escaped text.

    Example:
        >>> formatted_text("{} items", 3)
        Text(content='3 items')
    """
    return Text(fmt.format(*args, **kwargs))


def raw(value: str) -> Raw:
    """Build a raw node, emitted without any escaping.

    The caller asserts that ``value`` is trusted markup. Passing
    user-controlled input here is an XSS hole; use text() instead.
    """
    return Raw(value)


def raw_formatted(fmt: str, *args: object, **kwargs: object) -> Raw:
    """Format with ``str.format`` and wrap the result as raw markup.

    Arguments are not escaped either.
    """
    return Raw(fmt.format(*args, **kwargs))


def group(*children: Child) -> Group:
    """Bundle nodes into a transparent group."""
    return Group(children)


def map_nodes(items: Iterable[T], fn: Callable[[T], Child]) -> Group:
    """Apply ``fn`` to each item and group the results in order.

    Example:
        >>> map_nodes(["a", "b"], text)
        Group(children=(Text(content='a'), Text(content='b')))
    """
    return Group(tuple(fn(item) for item in items))


def conditional(predicate: bool, node: Child) -> Child:
    """Return ``node`` if ``predicate`` holds, else NOTHING.

    ``node`` is built by the caller before this runs. Use
    lazy_conditional() when building it is expensive.
    """
    return node if predicate else NOTHING


def lazy_conditional(predicate: bool, producer: Callable[[], Child]) -> Child:
    """Call ``producer`` only if ``predicate`` holds, else return NOTHING."""
    return producer() if predicate else NOTHING


def document_type(root: Child) -> Doctype:
    """Wrap the document root so it renders after ``<!DOCTYPE html>``."""
    return Doctype(root)


__all__ = [
    "attribute",
    "boolean_attribute",
    "conditional",
    "document_type",
    "element",
    "formatted_text",
    "group",
    "lazy_conditional",
    "map_nodes",
    "raw",
    "raw_formatted",
    "text",
]
