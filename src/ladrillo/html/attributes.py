"""One builder per HTML attribute.

Valued attributes take the value string; boolean attributes take nothing.

Naming:
- Python keywords/builtins get a trailing underscore: ``class_``, ``id_``,
  ``for_``, ``type_``, ``async_``, ``open_``, ``max_``, ``min_``,
  ``list_``, ``dir_``.
- Names shared with elements carry an ``_attr`` suffix: ``title_attr``,
  ``form_attr``, ``label_attr``, ``span_attr``, ``cite_attr``,
  ``abbr_attr``, ``slot_attr``.

Example:
    >>> from ladrillo import render_to_string
    >>> from ladrillo.html import input_, name, required, type_
    >>> render_to_string(input_(type_("email"), name("email"), required()))
    '<input type="email" name="email" required>'

"""

from collections.abc import Callable

from ladrillo.builders import attribute, boolean_attribute
from ladrillo.nodes import Attribute, BooleanAttribute


def _attribute(attr: str, py_name: str | None = None) -> Callable[[str], Attribute]:
    def build(value: str) -> Attribute:
        return attribute(attr, value)

    build.__name__ = build.__qualname__ = py_name or attr.replace("-", "_")
    build.__doc__ = f"Build a ``{attr}`` attribute."
    return build


def _boolean(attr: str, py_name: str | None = None) -> Callable[[], BooleanAttribute]:
    def build() -> BooleanAttribute:
        return boolean_attribute(attr)

    build.__name__ = build.__qualname__ = py_name or attr
    build.__doc__ = f"Build the boolean ``{attr}`` attribute."
    return build


def data(name: str, value: str) -> Attribute:
    """Build a ``data-<name>`` attribute."""
    return attribute(f"data-{name}", value)


def aria(name: str, value: str) -> Attribute:
    """Build an ``aria-<name>`` attribute."""
    return attribute(f"aria-{name}", value)


# Global attributes
accesskey = _attribute("accesskey")
class_ = _attribute("class", "class_")
contenteditable = _attribute("contenteditable")
dir_ = _attribute("dir", "dir_")
draggable = _attribute("draggable")
enterkeyhint = _attribute("enterkeyhint")
id_ = _attribute("id", "id_")
inputmode = _attribute("inputmode")
lang = _attribute("lang")
nonce = _attribute("nonce")
popover = _attribute("popover")
role = _attribute("role")
slot_attr = _attribute("slot", "slot_attr")
spellcheck = _attribute("spellcheck")
style = _attribute("style")
tabindex = _attribute("tabindex")
title_attr = _attribute("title", "title_attr")
translate = _attribute("translate")

# Links and resources
as_ = _attribute("as", "as_")
crossorigin = _attribute("crossorigin")
download = _attribute("download")
href = _attribute("href")
hreflang = _attribute("hreflang")
integrity = _attribute("integrity")
media = _attribute("media")
ping = _attribute("ping")
referrerpolicy = _attribute("referrerpolicy")
rel = _attribute("rel")
sizes = _attribute("sizes")
src = _attribute("src")
srcset = _attribute("srcset")
target = _attribute("target")
type_ = _attribute("type", "type_")

# Metadata
charset = _attribute("charset")
content = _attribute("content")
http_equiv = _attribute("http-equiv", "http_equiv")
name = _attribute("name")
property_ = _attribute("property", "property_")

# Embedded content
allow = _attribute("allow")
alt = _attribute("alt")
height = _attribute("height")
loading = _attribute("loading")
poster = _attribute("poster")
preload = _attribute("preload")
sandbox = _attribute("sandbox")
srcdoc = _attribute("srcdoc")
width = _attribute("width")

# Tables
abbr_attr = _attribute("abbr", "abbr_attr")
colspan = _attribute("colspan")
headers = _attribute("headers")
rowspan = _attribute("rowspan")
scope = _attribute("scope")
span_attr = _attribute("span", "span_attr")

# Forms
accept = _attribute("accept")
action = _attribute("action")
autocomplete = _attribute("autocomplete")
cols = _attribute("cols")
enctype = _attribute("enctype")
for_ = _attribute("for", "for_")
form_attr = _attribute("form", "form_attr")
formaction = _attribute("formaction")
label_attr = _attribute("label", "label_attr")
list_ = _attribute("list", "list_")
max_ = _attribute("max", "max_")
maxlength = _attribute("maxlength")
method = _attribute("method")
min_ = _attribute("min", "min_")
minlength = _attribute("minlength")
pattern = _attribute("pattern")
placeholder = _attribute("placeholder")
rows = _attribute("rows")
step = _attribute("step")
value = _attribute("value")
wrap = _attribute("wrap")

# Edits and quotes
cite_attr = _attribute("cite", "cite_attr")
datetime = _attribute("datetime")

# Boolean attributes
async_ = _boolean("async", "async_")
autofocus = _boolean("autofocus")
autoplay = _boolean("autoplay")
checked = _boolean("checked")
controls = _boolean("controls")
default = _boolean("default")
defer = _boolean("defer")
disabled = _boolean("disabled")
formnovalidate = _boolean("formnovalidate")
hidden = _boolean("hidden")
inert = _boolean("inert")
ismap = _boolean("ismap")
loop = _boolean("loop")
multiple = _boolean("multiple")
muted = _boolean("muted")
novalidate = _boolean("novalidate")
open_ = _boolean("open", "open_")
playsinline = _boolean("playsinline")
readonly = _boolean("readonly")
required = _boolean("required")
reversed_ = _boolean("reversed", "reversed_")
selected = _boolean("selected")


__all__ = [
    "abbr_attr",
    "accept",
    "accesskey",
    "action",
    "allow",
    "alt",
    "aria",
    "as_",
    "async_",
    "autocomplete",
    "autofocus",
    "autoplay",
    "charset",
    "checked",
    "cite_attr",
    "class_",
    "cols",
    "colspan",
    "content",
    "contenteditable",
    "controls",
    "crossorigin",
    "data",
    "datetime",
    "default",
    "defer",
    "dir_",
    "disabled",
    "download",
    "draggable",
    "enctype",
    "enterkeyhint",
    "for_",
    "form_attr",
    "formaction",
    "formnovalidate",
    "headers",
    "height",
    "hidden",
    "href",
    "hreflang",
    "http_equiv",
    "id_",
    "inert",
    "inputmode",
    "integrity",
    "ismap",
    "label_attr",
    "lang",
    "list_",
    "loading",
    "loop",
    "max_",
    "maxlength",
    "media",
    "method",
    "min_",
    "minlength",
    "multiple",
    "muted",
    "name",
    "nonce",
    "novalidate",
    "open_",
    "pattern",
    "ping",
    "placeholder",
    "playsinline",
    "popover",
    "poster",
    "preload",
    "property_",
    "readonly",
    "referrerpolicy",
    "rel",
    "required",
    "reversed_",
    "role",
    "rows",
    "rowspan",
    "sandbox",
    "scope",
    "selected",
    "sizes",
    "slot_attr",
    "span_attr",
    "spellcheck",
    "src",
    "srcdoc",
    "srcset",
    "step",
    "style",
    "tabindex",
    "target",
    "title_attr",
    "translate",
    "type_",
    "value",
    "width",
    "wrap",
]
