"""HTML element and attribute builders.

Thin wrappers over ``element()``, ``attribute()`` and
``boolean_attribute()`` with the tag or attribute name fixed. Import them
unqualified or through a short alias:

    >>> from ladrillo import html as h, render_to_string, text
    >>> render_to_string(h.a(h.href("/docs"), text("Docs")))
    '<a href="/docs">Docs</a>'

"""

from ladrillo.html import attributes, elements
from ladrillo.html.attributes import *  # noqa: F403
from ladrillo.html.elements import *  # noqa: F403

__all__ = [*elements.__all__, *attributes.__all__]
