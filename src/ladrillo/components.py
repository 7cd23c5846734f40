"""Higher-level components built only from core primitives.

- html5(): full document skeleton from a DocumentConfig
- nav_link(): anchor marked ``active`` when it points at the current page
- classes(): ``class`` attribute from a name-to-flag mapping

Example:
    >>> from ladrillo import render_to_string, text
    >>> from ladrillo.components import DocumentConfig, html5
    >>> page = html5(DocumentConfig(title="Hi", body=(text("Hello"),)))
    >>> render_to_string(page)[:60]
    '<!DOCTYPE html><html><head><meta charset="utf-8"><meta name='

"""

from collections.abc import Mapping
from dataclasses import dataclass

from ladrillo.builders import conditional, document_type, group, text
from ladrillo.html import attributes as attr
from ladrillo.html import elements as el
from ladrillo.nodes import Attribute, Child, Doctype, Element


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """Inputs for html5().

    Attributes:
        title: Contents of ``<title>``
        body: Nodes placed in ``<body>``; attributes here land on the body tag
        description: ``<meta name="description">`` content, omitted when empty
        language: ``lang`` attribute on ``<html>``, omitted when empty
        head: Extra nodes appended to ``<head>``

    """

    title: str
    body: tuple[Child, ...]
    description: str = ""
    language: str = ""
    head: tuple[Child, ...] = ()


def html5(config: DocumentConfig) -> Doctype:
    """Build a complete HTML5 document."""
    return document_type(
        el.html(
            conditional(bool(config.language), attr.lang(config.language)),
            el.head(
                el.meta(attr.charset("utf-8")),
                el.meta(
                    attr.name("viewport"),
                    attr.content("width=device-width, initial-scale=1"),
                ),
                el.title(text(config.title)),
                conditional(
                    bool(config.description),
                    el.meta(attr.name("description"), attr.content(config.description)),
                ),
                group(*config.head),
            ),
            el.body(group(*config.body)),
        )
    )


def nav_link(href: str, label: str, current_path: str, *children: Child) -> Element:
    """Build ``<a href>`` with ``class="active"`` when ``href == current_path``.

    Args:
        href: Link target
        label: Link text (escaped)
        current_path: Path of the page being rendered
        *children: Extra attributes or content for the anchor
    """
    return el.a(
        attr.href(href),
        conditional(href == current_path, attr.class_("active")),
        text(label),
        *children,
    )


def classes(flags: Mapping[str, bool]) -> Attribute:
    """Build a ``class`` attribute from the names whose flag is truthy.

    Names are sorted so output does not depend on mapping order.

    Example:
        >>> classes({"card": True, "hidden": False, "active": True})
        Attribute(name='class', value='active card')
    """
    return attr.class_(" ".join(sorted(name for name, on in flags.items() if on)))


__all__ = ["DocumentConfig", "classes", "html5", "nav_link"]
