"""Tests for document assembly and helper components."""

from __future__ import annotations

from ladrillo import Doctype, render_to_string, text
from ladrillo import html as h
from ladrillo.components import DocumentConfig, classes, html5, nav_link

HEAD_START = (
    '<head><meta charset="utf-8">'
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
)


class TestHtml5:
    def test_minimal_document(self) -> None:
        page = html5(DocumentConfig(title="Hi", body=(h.p(text("Hello")),)))

        assert isinstance(page, Doctype)
        assert render_to_string(page) == (
            "<!DOCTYPE html><html>"
            f"{HEAD_START}<title>Hi</title></head>"
            "<body><p>Hello</p></body></html>"
        )

    def test_full_document(self) -> None:
        page = html5(
            DocumentConfig(
                title="Docs",
                description="All the docs",
                language="en",
                head=(h.link(h.rel("stylesheet"), h.href("/app.css")),),
                body=(h.class_("dark"), h.main(text("x"))),
            )
        )

        assert render_to_string(page) == (
            '<!DOCTYPE html><html lang="en">'
            f"{HEAD_START}<title>Docs</title>"
            '<meta name="description" content="All the docs">'
            '<link rel="stylesheet" href="/app.css"></head>'
            '<body class="dark"><main>x</main></body></html>'
        )

    def test_title_and_description_escaped(self) -> None:
        page = html5(DocumentConfig(title="A & B", description='say "hi"', body=()))
        html = render_to_string(page)

        assert "<title>A &amp; B</title>" in html
        assert 'content="say &quot;hi&quot;"' in html

    def test_empty_body(self) -> None:
        html = render_to_string(html5(DocumentConfig(title="", body=())))
        assert html.endswith("<title></title></head><body></body></html>")


class TestNavLink:
    def test_active_when_current(self) -> None:
        link = nav_link("/about", "About", "/about")
        assert render_to_string(link) == '<a href="/about" class="active">About</a>'

    def test_inactive_otherwise(self) -> None:
        link = nav_link("/about", "About", "/")
        assert render_to_string(link) == '<a href="/about">About</a>'

    def test_exact_match_only(self) -> None:
        assert "active" not in render_to_string(nav_link("/about", "About", "/about/team"))

    def test_extra_children(self) -> None:
        link = nav_link("/", "Home", "/", h.title_attr("Start"), h.span(text("!")))
        assert render_to_string(link) == (
            '<a href="/" class="active" title="Start">Home<span>!</span></a>'
        )

    def test_in_navigation(self) -> None:
        pages = [("/", "Home"), ("/blog", "Blog")]
        nav = h.nav(*(nav_link(href, label, "/blog") for href, label in pages))
        assert render_to_string(nav) == (
            '<nav><a href="/">Home</a><a href="/blog" class="active">Blog</a></nav>'
        )


class TestClasses:
    def test_sorted_enabled_names(self) -> None:
        assert render_to_string(classes({"b": True, "a": True, "c": False})) == ' class="a b"'

    def test_all_disabled(self) -> None:
        assert classes({"x": False}).value == ""

    def test_on_element(self) -> None:
        html = render_to_string(h.div(classes({"card": True, "selected": True}), text("x")))
        assert html == '<div class="card selected">x</div>'
