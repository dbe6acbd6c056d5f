"""Tests for inline script collection from HTML documents."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from bs4 import Comment, NavigableString
from bs4.builder import ParserRejectedMarkup

from elim_ranks.collector.script_collector import (
    collect_scripts,
    collect_scripts_from_html,
    parse_html,
)
from elim_ranks.core.exceptions import HTMLParseError


class TestCollectScripts:
    def test_scripts_in_document_order(self) -> None:
        html = (
            "<html><head><script>var a = 1;</script></head>"
            "<body><div><p><script>var b = 2;</script></p></div>"
            "<script>var c = 3;</script></body></html>"
        )
        assert collect_scripts_from_html(html) == ["var a = 1;", "var b = 2;", "var c = 3;"]

    def test_document_without_scripts_yields_empty_list(self) -> None:
        assert collect_scripts_from_html("<html><body><p>hi</p></body></html>") == []

    def test_empty_document_yields_empty_list(self) -> None:
        assert collect_scripts_from_html("") == []

    def test_external_script_without_body_contributes_nothing(self) -> None:
        html = '<script src="/app.js"></script><script>var x = [];</script>'
        assert collect_scripts_from_html(html) == ["var x = [];"]

    def test_script_text_is_not_stripped_or_unescaped(self) -> None:
        html = "<script>\n  if (a &amp;&amp; b < c) {}\n</script>"
        assert collect_scripts_from_html(html) == ["\n  if (a &amp;&amp; b < c) {}\n"]

    def test_text_outside_scripts_is_ignored(self) -> None:
        html = "<div>var ranks = [1];</div><style>body {}</style>"
        assert collect_scripts_from_html(html) == []

    def test_accepts_bytes(self) -> None:
        assert collect_scripts_from_html(b"<script>var n = 1;</script>") == ["var n = 1;"]

    def test_one_entry_per_text_child(self) -> None:
        soup = parse_html(
            "<body><script>first-a</script><div><script>second-a</script></div></body>"
        )
        first, second = soup.find_all("script")
        first.append(NavigableString("first-b"))
        second.append(NavigableString("second-b"))
        second.append(NavigableString("second-c"))

        assert collect_scripts(soup) == [
            "first-a",
            "first-b",
            "second-a",
            "second-b",
            "second-c",
        ]

    def test_comment_children_are_not_text(self) -> None:
        soup = parse_html("<script>code();</script>")
        soup.script.append(Comment("not code"))

        assert collect_scripts(soup) == ["code();"]

    def test_traversal_can_start_at_any_element(self) -> None:
        soup = parse_html(
            "<script>outside();</script><section><script>inside();</script></section>"
        )
        assert collect_scripts(soup.section) == ["inside();"]

    def test_script_descendants_are_not_searched(self) -> None:
        soup = parse_html("<script>outer();</script>")
        nested = soup.new_tag("script")
        nested.string = "nested();"
        soup.script.append(nested)

        assert collect_scripts(soup) == ["outer();"]

    def test_fixture_page(self, ranks_page_html: str) -> None:
        scripts = collect_scripts_from_html(ranks_page_html)

        assert len(scripts) == 2
        assert "gtag" in scripts[0]
        assert "var ranks" in scripts[1]


class TestParseHtml:
    def test_rejected_markup_raises_html_parse_error(self) -> None:
        with patch(
            "elim_ranks.collector.script_collector.BeautifulSoup",
            side_effect=ParserRejectedMarkup("bad markup"),
        ):
            with pytest.raises(HTMLParseError):
                parse_html("<html>")
