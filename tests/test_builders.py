"""Tests for node construction primitives and the node model."""

from __future__ import annotations

import dataclasses

import pytest

from ladrillo import (
    NOTHING,
    Attribute,
    BooleanAttribute,
    Doctype,
    Element,
    Group,
    Nothing,
    Raw,
    Text,
    attribute,
    boolean_attribute,
    conditional,
    document_type,
    element,
    formatted_text,
    group,
    lazy_conditional,
    map_nodes,
    raw,
    raw_formatted,
    render_to_string,
    text,
)


class TestConstructors:
    def test_element(self) -> None:
        node = element("div", attribute("id", "a"), text("x"))
        assert node == Element("div", (Attribute("id", "a"), Text("x")))

    def test_element_preserves_child_order(self) -> None:
        kids = [text(str(i)) for i in range(10)]
        assert element("ol", *kids).children == tuple(kids)

    def test_attribute_stores_value_verbatim(self) -> None:
        assert attribute("title", "<&>").value == "<&>"

    def test_boolean_attribute(self) -> None:
        assert boolean_attribute("required") == BooleanAttribute("required")

    def test_text_stores_value_verbatim(self) -> None:
        assert text("<b>").content == "<b>"

    def test_raw(self) -> None:
        assert raw("<b>") == Raw("<b>")

    def test_group(self) -> None:
        assert group(text("a"), text("b")) == Group((Text("a"), Text("b")))

    def test_document_type(self) -> None:
        root = element("html")
        assert document_type(root) == Doctype(root)


class TestFormatted:
    def test_formatted_text_positional(self) -> None:
        assert formatted_text("{} of {}", 1, 3) == Text("1 of 3")

    def test_formatted_text_keywords(self) -> None:
        assert formatted_text("Hi {name}", name="Ana") == Text("Hi Ana")

    def test_formatted_text_is_escaped(self) -> None:
        assert render_to_string(formatted_text("{}", "<x>")) == "&lt;x&gt;"

    def test_raw_formatted_is_not_escaped(self) -> None:
        assert render_to_string(raw_formatted("<{tag}>", tag="hr")) == "<hr>"


class TestConditionals:
    def test_conditional_true(self) -> None:
        node = text("x")
        assert conditional(True, node) is node

    def test_conditional_false(self) -> None:
        assert conditional(False, text("x")) is NOTHING

    def test_lazy_conditional_true_calls_producer(self) -> None:
        assert lazy_conditional(True, lambda: text("x")) == Text("x")

    def test_lazy_conditional_false_skips_producer(self) -> None:
        calls: list[int] = []

        def producer() -> Text:
            calls.append(1)
            return text("x")

        assert lazy_conditional(False, producer) is NOTHING
        assert calls == []


class TestMapNodes:
    def test_map_nodes_preserves_order(self) -> None:
        node = map_nodes(["a", "b", "c"], lambda s: element("li", text(s)))
        assert render_to_string(element("ul", node)) == "<ul><li>a</li><li>b</li><li>c</li></ul>"

    def test_map_nodes_empty(self) -> None:
        assert map_nodes([], text) == Group(())

    def test_map_nodes_consumes_iterators(self) -> None:
        assert len(map_nodes(iter(["a", "b"]), text).children) == 2


class TestNodeModel:
    def test_nodes_are_frozen(self) -> None:
        node = element("div")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "span"  # type: ignore[misc]

    def test_nodes_are_hashable(self) -> None:
        shared = group(attribute("class", "x"))
        assert hash(element("a", shared)) == hash(element("a", shared))

    def test_structural_equality(self) -> None:
        assert element("p", text("a")) == element("p", text("a"))
        assert element("p", text("a")) != element("p", text("b"))

    def test_nothing_singleton_equality(self) -> None:
        assert Nothing() == NOTHING

    def test_element_default_children(self) -> None:
        assert Element("hr").children == ()
