"""Ladrillo renderers.

Available Renderers:
- HtmlRenderer: two-pass HTML serializer writing through a Sink

Thread Safety:
Renderers keep no per-render state. Safe for concurrent use from multiple
threads, one sink per render.

"""

from ladrillo.renderers.html import DOCTYPE, VOID_ELEMENTS, HtmlRenderer
from ladrillo.renderers.protocol import NodeRenderer

__all__ = ["DOCTYPE", "HtmlRenderer", "NodeRenderer", "VOID_ELEMENTS"]
