"""Tests for the element and attribute builder catalog."""

from __future__ import annotations

import pytest

from ladrillo import Attribute, BooleanAttribute, Element, render_to_string, text
from ladrillo import html as h
from ladrillo.html import attributes, elements


class TestElements:
    def test_builder_fixes_tag(self) -> None:
        assert h.div(text("x")) == Element("div", (text("x"),))

    def test_builder_metadata(self) -> None:
        assert h.div.__name__ == "div"
        assert h.input_.__name__ == "input_"
        assert "<input>" in (h.input_.__doc__ or "")

    @pytest.mark.parametrize(
        ("builder", "tag"),
        [
            (h.del_, "del"),
            (h.input_, "input"),
            (h.map_, "map"),
            (h.object_, "object"),
            (h.style_el, "style"),
            (h.data_el, "data"),
        ],
    )
    def test_renamed_elements(self, builder, tag: str) -> None:
        assert builder().name == tag

    def test_void_builders_render_without_close(self) -> None:
        assert render_to_string(h.img(h.src("a.png"), h.alt("A"))) == '<img src="a.png" alt="A">'
        assert render_to_string(h.br()) == "<br>"

    def test_doctype_alias(self) -> None:
        assert render_to_string(h.doctype(h.html())) == "<!DOCTYPE html><html></html>"

    def test_all_exports_build_elements(self) -> None:
        for name in elements.__all__:
            if name == "doctype":
                continue
            assert isinstance(getattr(elements, name)(), Element), name


class TestAttributes:
    def test_valued_attribute(self) -> None:
        assert h.href("/x") == Attribute("href", "/x")

    def test_boolean_attribute(self) -> None:
        assert h.required() == BooleanAttribute("required")

    @pytest.mark.parametrize(
        ("builder", "attr"),
        [
            (h.class_, "class"),
            (h.id_, "id"),
            (h.for_, "for"),
            (h.type_, "type"),
            (h.title_attr, "title"),
            (h.form_attr, "form"),
            (h.http_equiv, "http-equiv"),
        ],
    )
    def test_renamed_attributes(self, builder, attr: str) -> None:
        assert builder("v").name == attr

    def test_renamed_boolean_attributes(self) -> None:
        assert h.async_().name == "async"
        assert h.open_().name == "open"

    def test_data_and_aria(self) -> None:
        assert h.data("user-id", "7") == Attribute("data-user-id", "7")
        assert h.aria("label", "Close") == Attribute("aria-label", "Close")

    def test_no_name_clashes_between_modules(self) -> None:
        assert not set(elements.__all__) & set(attributes.__all__)


class TestComposition:
    def test_form(self) -> None:
        form = h.form(
            h.action("/subscribe"),
            h.method("post"),
            h.label(h.for_("email"), text("Email")),
            h.input_(h.id_("email"), h.type_("email"), h.name("email"), h.required()),
            h.button(h.type_("submit"), text("Go")),
        )
        assert render_to_string(form) == (
            '<form action="/subscribe" method="post">'
            '<label for="email">Email</label>'
            '<input id="email" type="email" name="email" required>'
            '<button type="submit">Go</button>'
            "</form>"
        )

    def test_table(self) -> None:
        rows = [("a", "1"), ("b", "2")]
        table = h.table(
            h.thead(h.tr(h.th(text("k")), h.th(text("v")))),
            h.tbody(*(h.tr(h.td(text(k)), h.td(text(v))) for k, v in rows)),
        )
        assert render_to_string(table) == (
            "<table><thead><tr><th>k</th><th>v</th></tr></thead>"
            "<tbody><tr><td>a</td><td>1</td></tr><tr><td>b</td><td>2</td></tr></tbody></table>"
        )
