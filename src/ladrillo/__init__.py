"""
Ladrillo: Programmatic HTML Builder for Python

Build documents from typed constructor calls instead of a template
language, then serialize the node tree to markup. Escaping is on by
default: text and attribute values are escaped at render time, and only
raw() bypasses it. Zero runtime dependencies.

Quick Start:
    >>> from ladrillo import attribute, element, render_to_string, text
    >>> render_to_string(element("p", attribute("class", "lead"), text("Fish & chips")))
    '<p class="lead">Fish &amp; chips</p>'

    >>> # Tag and attribute wrappers
    >>> from ladrillo.html import a, href
    >>> render_to_string(a(href("/"), text("Home")))
    '<a href="/">Home</a>'

Groups:
    >>> from ladrillo import group
    >>> card = group(attribute("class", "card"), attribute("role", "region"))
    >>> render_to_string(element("section", text("Hi"), card))
    '<section class="card" role="region">Hi</section>'

Writing to a stream:
    >>> import sys
    >>> from ladrillo import StreamSink, render
    >>> render(element("br"), StreamSink(sys.stdout))
    <br>

Installation:
    pip install ladrillo
"""

from ladrillo.builders import (
    attribute,
    boolean_attribute,
    conditional,
    document_type,
    element,
    formatted_text,
    group,
    lazy_conditional,
    map_nodes,
    raw,
    raw_formatted,
    text,
)
from ladrillo.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from ladrillo.errors import InvalidNameError, LadrilloError, RenderError
from ladrillo.nodes import (
    NOTHING,
    Attribute,
    BooleanAttribute,
    Child,
    Doctype,
    Element,
    Group,
    Node,
    Nothing,
    Raw,
    Text,
    flatten,
)
from ladrillo.renderers.html import DOCTYPE, VOID_ELEMENTS, HtmlRenderer
from ladrillo.renderers.protocol import NodeRenderer
from ladrillo.sinks import Sink, StreamSink, StringSink
from ladrillo.utils.text import escape_html

__version__ = "0.1.0"


def render(node: Child, sink: Sink, *, config: RenderConfig | None = None) -> None:
    """Write the serialized form of ``node`` to ``sink``.

    Args:
        node: Root of the tree to render
        sink: Anything with ``append(str)``: StringSink, StreamSink, a list
        config: Render configuration (defaults to the context's RenderConfig)

    Raises:
        RenderError: The tree holds a non-node object in strict mode.
        Exceptions raised by the sink propagate unchanged.

    Example:
        >>> sink = StringSink()
        >>> render(element("img", attribute("src", "a.png")), sink)
        >>> sink.build()
        '<img src="a.png">'
    """
    HtmlRenderer(config).render(node, sink)


def render_to_string(node: Child, *, config: RenderConfig | None = None) -> str:
    """Render ``node`` and return the markup as a string.

    Example:
        >>> render_to_string(document_type(element("html")))
        '<!DOCTYPE html><html></html>'
    """
    return HtmlRenderer(config).render_to_string(node)


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "render",
    "render_to_string",
    # Constructors
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
    # Nodes
    "Attribute",
    "BooleanAttribute",
    "Child",
    "Doctype",
    "Element",
    "Group",
    "Node",
    "NOTHING",
    "Nothing",
    "Raw",
    "Text",
    "flatten",
    # Renderer
    "DOCTYPE",
    "HtmlRenderer",
    "NodeRenderer",
    "VOID_ELEMENTS",
    "escape_html",
    # Sinks
    "Sink",
    "StreamSink",
    "StringSink",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "LadrilloError",
    "RenderError",
    "InvalidNameError",
]
