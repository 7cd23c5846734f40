"""Two-pass HTML renderer.

Each element is serialized in two walks over its group-flattened children:

1. Attribute pass: ``<name``, then every Attribute/BooleanAttribute in
   input order, then ``>``.
2. Content pass: every other child in input order, then ``</name>``.
   Skipped entirely for void elements such as ``img``.

All attributes therefore precede all content in the output, whatever their
relative position in the input.

Thread Safety:
HtmlRenderer holds no per-render state. One instance can be shared across
threads as long as every render() call gets its own sink.
"""

import re

from ladrillo.config import RenderConfig, get_render_config
from ladrillo.errors import InvalidNameError, RenderError
from ladrillo.nodes import (
    Attribute,
    BooleanAttribute,
    Child,
    Doctype,
    Element,
    Group,
    Nothing,
    Raw,
    Text,
    flatten,
)
from ladrillo.sinks import Sink, StringSink
from ladrillo.utils.logger import get_logger
from ladrillo.utils.text import escape_html

logger = get_logger(__name__)

DOCTYPE = "<!DOCTYPE html>"

# Elements that never have content or a closing tag
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Only checked when RenderConfig.validate_names is set
_ELEMENT_NAME_RE = re.compile(r"[A-Za-z][^\s\"'<>/=\x00-\x1f\x7f]*")
_ATTRIBUTE_NAME_RE = re.compile(r"[^\s\"'<>/=\x00-\x1f\x7f]+")

_ATTRIBUTE_TYPES = (Attribute, BooleanAttribute)


class HtmlRenderer:
    """Render a node tree to HTML.

    Usage:
        >>> from ladrillo.builders import attribute, element, text
        >>> renderer = HtmlRenderer()
        >>> renderer.render_to_string(element("div", text("x"), attribute("id", "a")))
        '<div id="a">x</div>'

    Args:
        config: Fixed configuration. When None, the context's RenderConfig
            is read at the start of every render() call.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        self._config = config

    @property
    def config(self) -> RenderConfig:
        """The configuration a render started now would use."""
        return self._config or get_render_config()

    def render(self, node: Child, sink: Sink) -> None:
        """Write the serialized form of ``node`` to ``sink``.

        Raises:
            RenderError: The tree holds a non-node object (strict mode), or a
                malformed name (with validate_names).
        """
        self._render_node(node, sink, self.config)

    def render_to_string(self, node: Child) -> str:
        """Render ``node`` into a fresh StringSink and return the markup."""
        sink = StringSink()
        self.render(node, sink)
        return sink.build()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render_node(self, node: Child, sink: Sink, config: RenderConfig) -> None:
        match node:
            case Element():
                self._render_element(node, sink, config)
            case Text(content=content):
                sink.append(escape_html(content))
            case Raw(content=content):
                sink.append(content)
            case Group(children=children):
                for child in children:
                    self._render_node(child, sink, config)
            case Doctype(child=child):
                sink.append(DOCTYPE)
                self._render_node(child, sink, config)
            case Attribute() | BooleanAttribute():
                # Outside an element: emit the opening-tag form
                self._render_attribute(node, sink, config)
            case Nothing() | None:
                pass
            case _:
                self._reject(node, config)

    # =========================================================================
    # Elements
    # =========================================================================

    def _render_element(self, el: Element, sink: Sink, config: RenderConfig) -> None:
        name = el.name
        if config.validate_names and not _ELEMENT_NAME_RE.fullmatch(name):
            raise InvalidNameError(name, "element")

        sink.append("<")
        sink.append(name)
        for child in flatten(el.children):
            if isinstance(child, _ATTRIBUTE_TYPES):
                self._render_attribute(child, sink, config)
        sink.append(">")

        if name.lower() in VOID_ELEMENTS:
            return

        for child in flatten(el.children):
            if not isinstance(child, _ATTRIBUTE_TYPES):
                self._render_node(child, sink, config)
        sink.append("</")
        sink.append(name)
        sink.append(">")

    def _render_attribute(
        self, attr: Attribute | BooleanAttribute, sink: Sink, config: RenderConfig
    ) -> None:
        if config.validate_names and not _ATTRIBUTE_NAME_RE.fullmatch(attr.name):
            raise InvalidNameError(attr.name, "attribute")
        if isinstance(attr, Attribute):
            sink.append(f' {attr.name}="{escape_html(attr.value)}"')
        else:
            sink.append(f" {attr.name}")

    def _reject(self, obj: object, config: RenderConfig) -> None:
        """Handle an object that is not a node."""
        hint = " (wrap strings with text() or raw())" if isinstance(obj, str) else ""
        if config.strict:
            raise RenderError(f"Cannot render {type(obj).__name__} object{hint}", obj)
        logger.warning("Skipping unrenderable %s object: %r", type(obj).__name__, obj)
