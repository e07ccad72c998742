"""
Unit tests for CascadeStyleOracle.

Tests cascade resolution of outline-style from <style> elements and
inline style attributes.
"""

import pytest
from bs4.element import Stylesheet

from wcag_fixer.analyzers import CascadeStyleOracle, DOMDocument
from wcag_fixer.validators import FocusVisibleDetector


def outline_of(html: str, selector: str = "button"):
    """Resolve outline-style of the first element matching selector."""
    document = DOMDocument(html)
    oracle = CascadeStyleOracle(document)
    return oracle.outline_style(document.select_one(selector))


class TestInlineStyle:
    """Inline style attribute resolution."""

    def test_unset_is_none(self):
        assert outline_of("<button>Go</button>") is None

    def test_inline_none(self):
        assert outline_of('<button style="outline: none">Go</button>') == "none"

    def test_inline_solid(self):
        assert outline_of('<button style="outline: 2px solid red">Go</button>') == "solid"

    def test_inline_longhand(self):
        assert outline_of('<button style="outline-style: DOTTED">Go</button>') == "dotted"

    def test_unrelated_inline_style(self):
        assert outline_of('<button style="color: red">Go</button>') is None


class TestCascade:
    """Stylesheet cascade order."""

    def test_type_selector(self):
        html = "<style>button { outline: none }</style><button>Go</button>"
        assert outline_of(html) == "none"

    def test_specificity_wins(self):
        html = (
            "<style>.ring { outline: 2px solid red } button { outline: none }</style>"
            '<button class="ring">Go</button>'
        )
        assert outline_of(html) == "solid"

    def test_source_order_wins_on_tie(self):
        html = (
            "<style>button { outline: none }</style>"
            "<style>button { outline: 1px dashed }</style>"
            "<button>Go</button>"
        )
        assert outline_of(html) == "dashed"

    def test_inline_beats_stylesheet(self):
        html = (
            "<style>#b { outline: 1px solid red }</style>"
            '<button id="b" style="outline-style: none">Go</button>'
        )
        assert outline_of(html) == "none"

    def test_important_beats_inline(self):
        html = (
            "<style>button { outline: none !important }</style>"
            '<button style="outline: 1px solid red">Go</button>'
        )
        assert outline_of(html) == "none"

    def test_longhand_after_shorthand(self):
        html = "<style>button { outline: 2px solid; outline-style: none }</style><button>Go</button>"
        assert outline_of(html) == "none"

    def test_selector_list(self):
        html = "<style>a, button { outline: 0 }</style><button>Go</button>"
        assert outline_of(html) == "none"

    def test_descendant_combinator(self):
        html = (
            "<style>nav a { outline: none }</style>"
            "<nav><a href='#'>In</a></nav><a id='out' href='#'>Out</a>"
        )
        assert outline_of(html, "nav a") == "none"
        assert outline_of(html, "#out") is None


class TestUnmodelled:
    """Rules the static cascade does not apply."""

    def test_media_blocks_ignored(self):
        html = "<style>@media screen { button { outline: none } }</style><button>Go</button>"
        assert outline_of(html) is None

    def test_focus_state_not_matched(self):
        html = "<style>button:focus { outline: 2px solid blue }</style><button>Go</button>"
        assert outline_of(html) is None

    def test_invalid_selector_ignored(self):
        html = (
            "<style>button:no-such-pseudo { outline: none } button { outline: 1px solid }</style>"
            "<button>Go</button>"
        )
        assert outline_of(html) == "solid"

    def test_non_css_style_type_ignored(self):
        html = '<style type="text/less">button { outline: none }</style><button>Go</button>'
        assert outline_of(html) is None

    def test_print_stylesheet_ignored(self):
        html = (
            '<style media="print">button { outline: 2px solid red }</style>'
            "<button>Go</button>"
        )
        assert outline_of(html) is None

    @pytest.mark.parametrize("media", ["print", "speech", "screen and (min-width: 600px)"])
    def test_non_screen_media_hides_sheet(self, media):
        html = (
            "<style>button { outline: 1px solid }</style>"
            f'<style media="{media}">button {{ outline: none }}</style>'
            "<button>Go</button>"
        )
        assert outline_of(html) == "solid"

    @pytest.mark.parametrize("media", ["", "all", "screen", "SCREEN", "only screen", "print, screen"])
    def test_screen_media_applies(self, media):
        html = f'<style media="{media}">button {{ outline: 1px dotted }}</style><button>Go</button>'
        assert outline_of(html) == "dotted"

    def test_print_stylesheet_does_not_hide_focus_issue(self):
        document = DOMDocument(
            '<html><head><style media="print">button { outline: 2px solid red }</style></head>'
            "<body><button>Go</button></body></html>"
        )
        issues = FocusVisibleDetector().detect(document, CascadeStyleOracle(document))
        assert [issue.element.name for issue in issues] == ["button"]

    def test_link_stylesheets_not_fetched(self):
        html = '<link rel="stylesheet" href="a.css"><button>Go</button>'
        assert outline_of(html) is None


class TestKeywords:
    """CSS-wide keywords."""

    def test_inherit_from_parent(self):
        html = (
            '<div style="outline-style: dotted">'
            '<button style="outline-style: inherit">Go</button></div>'
        )
        assert outline_of(html) == "dotted"

    def test_inherit_from_unset_parent(self):
        html = '<div><button style="outline: inherit">Go</button></div>'
        assert outline_of(html) is None

    @pytest.mark.parametrize("keyword", ["initial", "unset", "revert"])
    def test_reset_keywords_yield_none(self, keyword):
        html = f'<button style="outline-style: {keyword}">Go</button>'
        assert outline_of(html) == "none"


class TestOracleState:
    """Lazy stylesheet loading."""

    def test_sees_styles_added_before_first_query(self):
        document = DOMDocument("<html><head></head><body><button>Go</button></body></html>")
        oracle = CascadeStyleOracle(document)

        style = document.new_tag("style")
        style.append(Stylesheet("button { outline: none }"))
        document.head.append(style)

        assert oracle.outline_style(document.select_one("button")) == "none"

    def test_invalidate_reloads(self):
        document = DOMDocument("<html><head><style></style></head><body><button>Go</button></body></html>")
        oracle = CascadeStyleOracle(document)
        button = document.select_one("button")
        assert oracle.outline_style(button) is None

        style = document.select_one("style")
        style.append(Stylesheet("button { outline: 1px solid }"))
        assert oracle.outline_style(button) is None

        oracle.invalidate()
        assert oracle.outline_style(button) == "solid"

    def test_computed_style_mapping(self):
        document = DOMDocument('<button style="outline: 1px dashed red; color: blue">Go</button>')
        style = CascadeStyleOracle(document).computed_style(document.select_one("button"))
        assert style == {
            "outline-style": "dashed",
            "outline-width": "1px",
            "outline-color": "red",
            "color": "blue",
        }

    def test_repr(self):
        oracle = CascadeStyleOracle(DOMDocument("<p></p>"))
        assert repr(oracle) == "CascadeStyleOracle(unloaded)"
        assert oracle.rules == []
        assert repr(oracle) == "CascadeStyleOracle(0 rules)"
