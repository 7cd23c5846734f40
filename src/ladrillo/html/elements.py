"""One builder per HTML element.

Each builder is ``element(<tag>, *children)`` with the tag fixed. Builders
are produced by a single factory; this module is only the name table.

Naming:
- Python keywords/builtins get a trailing underscore: ``del_``, ``input_``,
  ``map_``, ``object_``.
- ``style_el`` and ``data_el`` leave ``style`` and ``data`` to the
  attribute module. Other shared names (``title``, ``form``, ``label``,
  ``span``, ``cite``, ``abbr``, ``slot``) are elements here and carry an
  ``_attr`` suffix in ``ladrillo.html.attributes``.

Example:
    >>> from ladrillo import render_to_string, text
    >>> from ladrillo.html import class_, div, p
    >>> render_to_string(div(class_("card"), p(text("Hello"))))
    '<div class="card"><p>Hello</p></div>'

"""

from collections.abc import Callable

from ladrillo.builders import document_type, element
from ladrillo.nodes import Child, Element


def _element(tag: str, py_name: str | None = None) -> Callable[..., Element]:
    def build(*children: Child) -> Element:
        return element(tag, *children)

    build.__name__ = build.__qualname__ = py_name or tag
    build.__doc__ = f"Build a ``<{tag}>`` element."
    return build


doctype = document_type

# Document and metadata
html = _element("html")
head = _element("head")
body = _element("body")
base = _element("base")
link = _element("link")
meta = _element("meta")
style_el = _element("style", "style_el")
title = _element("title")
script = _element("script")
noscript = _element("noscript")
template = _element("template")

# Sections
address = _element("address")
article = _element("article")
aside = _element("aside")
footer = _element("footer")
header = _element("header")
h1 = _element("h1")
h2 = _element("h2")
h3 = _element("h3")
h4 = _element("h4")
h5 = _element("h5")
h6 = _element("h6")
hgroup = _element("hgroup")
main = _element("main")
nav = _element("nav")
section = _element("section")
search = _element("search")

# Grouping content
blockquote = _element("blockquote")
dd = _element("dd")
div = _element("div")
dl = _element("dl")
dt = _element("dt")
figcaption = _element("figcaption")
figure = _element("figure")
hr = _element("hr")
li = _element("li")
menu = _element("menu")
ol = _element("ol")
p = _element("p")
pre = _element("pre")
ul = _element("ul")

# Text-level semantics
a = _element("a")
abbr = _element("abbr")
b = _element("b")
bdi = _element("bdi")
bdo = _element("bdo")
br = _element("br")
cite = _element("cite")
code = _element("code")
data_el = _element("data", "data_el")
dfn = _element("dfn")
em = _element("em")
i = _element("i")
kbd = _element("kbd")
mark = _element("mark")
q = _element("q")
rp = _element("rp")
rt = _element("rt")
ruby = _element("ruby")
s = _element("s")
samp = _element("samp")
small = _element("small")
span = _element("span")
strong = _element("strong")
sub = _element("sub")
sup = _element("sup")
time = _element("time")
u = _element("u")
var = _element("var")
wbr = _element("wbr")

# Edits
del_ = _element("del", "del_")
ins = _element("ins")

# Embedded content
area = _element("area")
audio = _element("audio")
canvas = _element("canvas")
embed = _element("embed")
iframe = _element("iframe")
img = _element("img")
map_ = _element("map", "map_")
object_ = _element("object", "object_")
param = _element("param")
picture = _element("picture")
source = _element("source")
svg = _element("svg")
track = _element("track")
video = _element("video")

# Tables
caption = _element("caption")
col = _element("col")
colgroup = _element("colgroup")
table = _element("table")
tbody = _element("tbody")
td = _element("td")
tfoot = _element("tfoot")
th = _element("th")
thead = _element("thead")
tr = _element("tr")

# Forms
button = _element("button")
datalist = _element("datalist")
fieldset = _element("fieldset")
form = _element("form")
input_ = _element("input", "input_")
label = _element("label")
legend = _element("legend")
meter = _element("meter")
optgroup = _element("optgroup")
option = _element("option")
output = _element("output")
progress = _element("progress")
select = _element("select")
textarea = _element("textarea")

# Interactive
details = _element("details")
dialog = _element("dialog")
summary = _element("summary")

# Web components
slot = _element("slot")


__all__ = [
    "a",
    "abbr",
    "address",
    "area",
    "article",
    "aside",
    "audio",
    "b",
    "base",
    "bdi",
    "bdo",
    "blockquote",
    "body",
    "br",
    "button",
    "canvas",
    "caption",
    "cite",
    "code",
    "col",
    "colgroup",
    "data_el",
    "datalist",
    "dd",
    "del_",
    "details",
    "dfn",
    "dialog",
    "div",
    "dl",
    "doctype",
    "dt",
    "em",
    "embed",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "head",
    "header",
    "hgroup",
    "hr",
    "html",
    "i",
    "iframe",
    "img",
    "input_",
    "ins",
    "kbd",
    "label",
    "legend",
    "li",
    "link",
    "main",
    "map_",
    "mark",
    "menu",
    "meta",
    "meter",
    "nav",
    "noscript",
    "object_",
    "ol",
    "optgroup",
    "option",
    "output",
    "p",
    "param",
    "picture",
    "pre",
    "progress",
    "q",
    "rp",
    "rt",
    "ruby",
    "s",
    "samp",
    "script",
    "search",
    "section",
    "select",
    "slot",
    "small",
    "source",
    "span",
    "strong",
    "style_el",
    "sub",
    "summary",
    "sup",
    "svg",
    "table",
    "tbody",
    "td",
    "template",
    "textarea",
    "tfoot",
    "th",
    "thead",
    "time",
    "title",
    "tr",
    "track",
    "u",
    "ul",
    "var",
    "video",
    "wbr",
]
