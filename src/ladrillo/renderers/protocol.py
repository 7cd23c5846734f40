"""NodeRenderer protocol: stable interface for node renderers.

Any renderer that implements ``render(node, sink)`` and
``render_to_string(node)`` conforms. The built-in ``HtmlRenderer`` is the
reference implementation.

Example:
    from ladrillo.renderers.protocol import NodeRenderer

    def write_page(renderer: NodeRenderer, page: Element, out: TextIO) -> None:
        renderer.render(page, StreamSink(out))

"""

from typing import Protocol

from ladrillo.nodes import Child
from ladrillo.sinks import Sink


class NodeRenderer(Protocol):
    """Protocol for node renderers."""

    def render(self, node: Child, sink: Sink) -> None:
        """Write the serialized form of ``node`` to ``sink``."""
        ...

    def render_to_string(self, node: Child) -> str:
        """Serialize ``node`` and return the result."""
        ...
