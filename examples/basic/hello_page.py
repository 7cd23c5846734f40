"""Build and render a page in a few lines. No config, no dependencies."""

from ladrillo import render_to_string, text
from ladrillo import html as h

page = h.doctype(
    h.html(
        h.lang("en"),
        h.body(h.h1(text("Hello & welcome")), h.p(h.class_("lead"), text("Built with Ladrillo."))),
    )
)
print(render_to_string(page))
