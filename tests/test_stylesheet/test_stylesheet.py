"""Tests for the theme stylesheet parser and model."""

import pytest

from themestyles.stylesheet import (
    Rule,
    Stylesheet,
    clear_content,
    extract_additional_styles,
    parse_stylesheet,
)
from themestyles.stylesheet.parser import parse_properties, parse_selectors

ADDITIONAL = "/* Begin Additional CSS Styles */\n.x{color:blue}\n/* End Additional CSS Styles */"


# ---------------------------------------------------------------------------
# Selector parsing
# ---------------------------------------------------------------------------


class TestSelectors:
    def test_single_selector(self):
        ss = parse_stylesheet(".a { color: red; }")
        assert ss.rules[0].selectors == [".a"]

    def test_selector_list_is_trimmed(self):
        ss = parse_stylesheet(".a , .b{color:red}")
        assert ss.rules[0].selectors == [".a", ".b"]

    def test_order_and_duplicates_kept(self):
        assert parse_selectors("p, .a,p") == ["p", ".a", "p"]

    def test_empty_tokens_kept(self):
        assert parse_selectors(".a,, .b") == [".a", "", ".b"]

    def test_pseudo_class_selector(self):
        ss = parse_stylesheet("a:hover { color: red; }")
        assert ss.rules[0].selectors == ["a:hover"]


# ---------------------------------------------------------------------------
# Property parsing
# ---------------------------------------------------------------------------


class TestProperties:
    def test_basic_properties(self):
        ss = parse_stylesheet("p { color: red; margin: 0 auto; }")
        assert ss.rules[0].properties == {"color": "red", "margin": "0 auto"}

    def test_last_semicolon_optional(self):
        assert parse_properties("color: red; margin: 0") == {"color": "red", "margin": "0"}

    def test_insertion_order_kept(self):
        props = parse_properties("z-index: 1; color: red; a: b")
        assert list(props) == ["z-index", "color", "a"]

    def test_repeated_property_becomes_list(self):
        ss = parse_stylesheet(".a { color: red; color: blue; }")
        assert ss.rules[0].properties["color"] == ["red", "blue"]

    def test_three_values_accumulate_in_order(self):
        props = parse_properties("background: #fff; background: url(a.png); background: none")
        assert props["background"] == ["#fff", "url(a.png)", "none"]

    def test_declaration_without_colon_dropped(self):
        props = parse_properties("color red; margin: 0")
        assert props == {"margin": "0"}

    def test_declaration_with_extra_colon_dropped(self):
        props = parse_properties("background: url(http://x/a.png); color: red")
        assert props == {"color": "red"}

    def test_empty_segments_ignored(self):
        assert parse_properties(" ; ;color: red;;") == {"color": "red"}

    def test_rule_with_only_malformed_declarations_kept(self):
        ss = parse_stylesheet(".a { nonsense }")
        assert len(ss) == 1
        assert ss.rules[0].properties == {}


# ---------------------------------------------------------------------------
# Multiple rules / comments
# ---------------------------------------------------------------------------


class TestRules:
    def test_source_order(self):
        ss = parse_stylesheet("h1 { a: 1; }\nh2 { a: 2; }\nh3 { a: 3; }")
        assert [r.selectors[0] for r in ss] == ["h1", "h2", "h3"]

    def test_comments_removed(self):
        ss = parse_stylesheet("/* header */\np { color: red; } /* note */ h1 { margin: 0; }")
        assert [r.selectors for r in ss] == [["p"], ["h1"]]

    def test_comment_inside_block_removed(self):
        ss = parse_stylesheet("p { color: red; /* old */ margin: 0; }")
        assert ss.rules[0].properties == {"color": "red", "margin": "0"}

    def test_empty_block_not_matched(self):
        ss = parse_stylesheet("p {}")
        assert ss.rules == []

    def test_unbalanced_text_dropped(self):
        ss = parse_stylesheet("p { color: red")
        assert ss.rules == []

    def test_additional_block_not_parsed(self):
        ss = parse_stylesheet("p { color: red; }\n" + ADDITIONAL + "\nh1 { margin: 0; }")
        assert [r.selectors for r in ss] == [["p"], ["h1"]]

    def test_fresh_stylesheet_per_call(self):
        first = parse_stylesheet(".a { color: red; }")
        second = parse_stylesheet(".a { color: red; }")
        assert first == second
        assert first.rules[0].properties is not second.rules[0].properties


class TestEmptyStylesheet:
    def test_empty_string(self):
        assert parse_stylesheet("").rules == []

    def test_whitespace_only(self):
        assert parse_stylesheet("   \n\t  ").rules == []

    def test_not_css(self):
        assert parse_stylesheet("hello world").rules == []


# ---------------------------------------------------------------------------
# Additional CSS Styles
# ---------------------------------------------------------------------------


class TestAdditionalStyles:
    def test_extracts_block_with_markers(self):
        source = "p { color: red; }\n" + ADDITIONAL + "\n"
        assert extract_additional_styles(source) == ADDITIONAL

    def test_absent_block(self):
        assert extract_additional_styles("p { color: red; }") == ""

    def test_clear_content_removes_block_and_comments(self):
        source = "/* c */p { color: red; }" + ADDITIONAL
        assert clear_content(source) == "p { color: red; }"

    def test_comment_with_slash_is_kept(self):
        assert clear_content("/* a/b */") == "/* a/b */"


# ---------------------------------------------------------------------------
# Model
# ---------------------------------------------------------------------------


class TestFindBySelector:
    @pytest.fixture
    def stylesheet(self):
        return parse_stylesheet(
            "#art-main { a: 1; }\n.art-post, .art-sheet { a: 2; }\n.art-post { a: 3; }"
        )

    def test_exact_match_returns_first(self, stylesheet):
        rule = stylesheet.find_by_selector(".art-post")
        assert rule.properties == {"a": "3"}

    def test_exact_match_uses_joined_selectors(self, stylesheet):
        rule = stylesheet.find_by_selector(".art-post, .art-sheet")
        assert rule.properties == {"a": "2"}

    def test_substring_match(self, stylesheet):
        rule = stylesheet.find_by_selector("art-sheet", exact=False)
        assert rule.properties == {"a": "2"}

    def test_match_all(self, stylesheet):
        rules = stylesheet.find_by_selector(".art-post", exact=False, match_all=True)
        assert [r.properties["a"] for r in rules] == ["2", "3"]

    def test_no_match(self, stylesheet):
        assert stylesheet.find_by_selector(".missing") is None
        assert stylesheet.find_by_selector(".missing", match_all=True) is None


class TestRuleModel:
    def test_values_normalizes(self):
        rule = Rule(selectors=["p"], properties={"a": "1", "b": ["2", "3"]})
        assert rule.values("a") == ["1"]
        assert rule.values("b") == ["2", "3"]
        assert rule.values("c") == []

    def test_is_empty(self):
        assert Rule(selectors=[], properties={"a": "1"}).is_empty()
        assert Rule(selectors=["p"], properties={}).is_empty()
        assert not Rule(selectors=["p"], properties={"a": "1"}).is_empty()

    def test_replace_rule_returns_new_stylesheet(self):
        original = Stylesheet(rules=[Rule(["a"], {"x": "1"}), Rule(["b"], {"x": "2"})])
        updated = original.replace_rule(1, Rule(["c"], {"x": "3"}))
        assert [r.selectors for r in updated] == [["a"], ["c"]]
        assert [r.selectors for r in original] == [["a"], ["b"]]

    def test_index_of_unknown_rule(self):
        with pytest.raises(ValueError):
            Stylesheet().index_of(Rule(["a"], {"x": "1"}))
