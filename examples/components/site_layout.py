"""Full HTML5 document with navigation, streamed to stdout.

Shows DocumentConfig/html5, nav_link, classes, map_nodes and StreamSink.
"""

import sys

from ladrillo import StreamSink, map_nodes, render, text
from ladrillo import html as h
from ladrillo.components import DocumentConfig, classes, html5, nav_link

PAGES = [("/", "Home"), ("/blog", "Blog"), ("/about", "About")]


def layout(current_path: str, title: str, *content):
    nav = h.nav(*(nav_link(href, label, current_path) for href, label in PAGES))
    return html5(
        DocumentConfig(
            title=f"{title} | Example",
            description="Example site built from typed nodes",
            language="en",
            head=(h.link(h.rel("stylesheet"), h.href("/site.css")),),
            body=(h.header(nav), h.main(*content)),
        )
    )


posts = ["First post", "Second <post>"]
page = layout(
    "/blog",
    "Blog",
    h.h1(text("Blog")),
    h.ul(
        map_nodes(
            posts,
            lambda title: h.li(classes({"post": True, "new": title == posts[-1]}), text(title)),
        )
    ),
)

render(page, StreamSink(sys.stdout))
sys.stdout.write("\n")
