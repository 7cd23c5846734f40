"""Text escaping for Ladrillo.

``escape_html`` is the only place markup escaping happens. Text nodes and
attribute values both route through it when rendered.

Example:
    >>> from ladrillo.utils.text import escape_html
    >>> escape_html("<a href='x'>Tom & Jerry</a>")
    '&lt;a href=&#39;x&#39;&gt;Tom &amp; Jerry&lt;/a&gt;'
"""

from __future__ import annotations

import html as html_module

# Escaped forms are part of the output contract; do not change spellings.
ENTITY_MAP: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#39;

    Ampersands are replaced first, so generated entities are never
    escaped a second time.

    Args:
        text: Text to escape

    Returns:
        Text safe for element content and double-quoted attribute values
    """
    if not text:
        return ""

    # html.escape handles &, <, > in the right order; quotes are spelled here.
    escaped = html_module.escape(text, quote=False)
    return escaped.replace('"', "&quot;").replace("'", "&#39;")
