"""Tests for utility modules."""

from __future__ import annotations

import logging

from ladrillo.utils import escape_html, get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("pages").name == "ladrillo.pages"

    def test_keeps_existing_prefix(self) -> None:
        assert get_logger("ladrillo.renderers.html").name == "ladrillo.renderers.html"

    def test_root_name(self) -> None:
        assert get_logger("ladrillo").name == "ladrillo"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)

    def test_does_not_match_lookalike_prefix(self) -> None:
        assert get_logger("ladrillos").name == "ladrillo.ladrillos"


class TestEscapeHtmlExport:
    def test_reexported(self) -> None:
        assert escape_html("<a href='x'>Tom & Jerry</a>") == (
            "&lt;a href=&#39;x&#39;&gt;Tom &amp; Jerry&lt;/a&gt;"
        )
