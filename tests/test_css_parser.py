"""
Unit tests for the CSS helpers used by the style oracle and remediator.
"""

import pytest

from wcag_fixer.analyzers.css_parser import (
    Declaration,
    expand_declaration,
    merge_inline_style,
    parse_declarations,
    parse_stylesheet,
    specificity,
    split_top_level,
)


class TestDeclarations:
    """Tests for declaration block parsing."""

    def test_basic_declarations(self):
        declarations = parse_declarations("outline: none; color: red !important")
        assert declarations == [
            Declaration("outline", "none"),
            Declaration("color", "red", important=True),
        ]

    def test_names_lowercased_values_kept(self):
        declarations = parse_declarations("OUTLINE-Style: Dotted")
        assert declarations == [Declaration("outline-style", "Dotted")]

    def test_malformed_chunks_skipped(self):
        declarations = parse_declarations("color; : red; outline-style:;width: 1px")
        assert declarations == [Declaration("width", "1px")]

    def test_semicolon_inside_quotes(self):
        declarations = parse_declarations("content: 'a;b'; color: red")
        assert [d.name for d in declarations] == ["content", "color"]
        assert declarations[0].value == "'a;b'"

    def test_comments_removed(self):
        declarations = parse_declarations("/* x */ color: red; /* outline: none; */")
        assert declarations == [Declaration("color", "red")]

    def test_split_respects_parentheses(self):
        assert split_top_level("a, b:not(.x, .y), c", ",") == ["a", "b:not(.x, .y)", "c"]


class TestStylesheet:
    """Tests for stylesheet parsing."""

    def test_rules_in_order(self):
        rules = parse_stylesheet("a, button { outline: none } .x { color: red }")
        assert [r.selectors for r in rules] == [["a", "button"], [".x"]]
        assert [r.order for r in rules] == [0, 1]

    def test_start_order(self):
        rules = parse_stylesheet("a { color: red }", start_order=5)
        assert rules[0].order == 5

    def test_block_at_rules_skipped(self):
        css = "@media (max-width: 10px) { a { outline: none; } } button { outline: 0 }"
        rules = parse_stylesheet(css)
        assert len(rules) == 1
        assert rules[0].selectors == ["button"]

    def test_statement_at_rules_skipped(self):
        rules = parse_stylesheet('@charset "utf-8"; @import url(x.css); a { color: red }')
        assert len(rules) == 1
        assert rules[0].selectors == ["a"]

    def test_unterminated_block(self):
        rules = parse_stylesheet("a { color: red")
        assert rules[0].declarations == [Declaration("color", "red")]

    def test_empty_stylesheet(self):
        assert parse_stylesheet("  /* nothing */ ") == []


class TestSpecificity:
    """Tests for selector specificity."""

    @pytest.mark.parametrize(
        "selector,expected",
        [
            ("button", (0, 0, 1)),
            (".primary", (0, 1, 0)),
            ("#submit", (1, 0, 0)),
            ("#a .b c", (1, 1, 1)),
            ("a:focus", (0, 1, 1)),
            ("input[type=text]", (0, 1, 1)),
            ("div > p::before", (0, 0, 3)),
            ("button:not(.primary)", (0, 1, 1)),
            (":where(.x) p", (0, 0, 1)),
            ("*", (0, 0, 0)),
        ],
    )
    def test_specificity(self, selector, expected):
        assert specificity(selector) == expected


class TestOutlineShorthand:
    """Tests for outline shorthand expansion."""

    def test_full_shorthand(self):
        assert expand_declaration(Declaration("outline", "2px solid #00f")) == {
            "outline-style": "solid",
            "outline-width": "2px",
            "outline-color": "#00f",
        }

    def test_none(self):
        expanded = expand_declaration(Declaration("outline", "none"))
        assert expanded["outline-style"] == "none"

    def test_zero_is_width(self):
        expanded = expand_declaration(Declaration("outline", "0"))
        assert expanded["outline-width"] == "0"
        assert expanded["outline-style"] == "none"

    def test_color_only_resets_style(self):
        expanded = expand_declaration(Declaration("outline", "red"))
        assert expanded == {
            "outline-style": "none",
            "outline-width": "medium",
            "outline-color": "red",
        }

    def test_function_color_kept_whole(self):
        expanded = expand_declaration(Declaration("outline", "dashed rgb(0, 0, 255)"))
        assert expanded["outline-style"] == "dashed"
        assert expanded["outline-color"] == "rgb(0, 0, 255)"

    def test_wide_keyword_propagates(self):
        expanded = expand_declaration(Declaration("outline", "inherit"))
        assert set(expanded.values()) == {"inherit"}

    def test_other_properties_pass_through(self):
        assert expand_declaration(Declaration("color", "red")) == {"color": "red"}


class TestMergeInlineStyle:
    """Tests for inline style rewriting."""

    def test_into_empty(self):
        result = merge_inline_style(None, {"outline": "2px solid #00f", "outline-offset": "2px"})
        assert result == "outline: 2px solid #00f; outline-offset: 2px;"

    def test_keeps_other_declarations(self):
        result = merge_inline_style(
            "color: red; outline-style: none",
            {"outline": "2px solid #00f"},
            remove=["outline-style"],
        )
        assert result == "color: red; outline: 2px solid #00f;"

    def test_updates_in_place(self):
        result = merge_inline_style("outline: none; color: red", {"outline": "1px solid"})
        assert result == "outline: 1px solid; color: red;"

    def test_duplicates_collapsed(self):
        result = merge_inline_style("outline: none; outline: 0", {"outline": "1px solid"})
        assert result == "outline: 1px solid;"

    def test_important_preserved_on_untouched(self):
        result = merge_inline_style("color: red !important", {"outline": "1px solid"})
        assert result == "color: red !important; outline: 1px solid;"

    def test_merge_is_stable(self):
        updates = {"outline": "2px solid #00f", "outline-offset": "2px"}
        once = merge_inline_style("color: red", updates)
        assert merge_inline_style(once, updates) == once
