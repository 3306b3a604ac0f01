"""Tests for base-style matching."""

import cssselect2
import pytest

from stylecascade.cascade import match_base
from stylecascade.model import Declaration, DeclarationBlock, StyleRule


INLINE = DeclarationBlock((Declaration("color", "red"),))


def _matcher(*selectors):
    accepted = set(selectors)
    return lambda element, selector_text: selector_text in accepted


def _inline(element):
    return INLINE


class TestMatchBase:
    def test_inline_block_first(self):
        rule = StyleRule("#a", DeclarationBlock((Declaration("color", "blue"),)))
        blocks = match_base([rule], object(), matches=_matcher("#a"), inline_style=_inline)
        assert blocks == [INLINE, rule.declarations]

    def test_non_matching_rules_dropped(self):
        rules = [StyleRule("div"), StyleRule("span"), StyleRule(".x")]
        blocks = match_base(rules, object(), matches=_matcher("div", ".x"), inline_style=_inline)
        assert len(blocks) == 3

    def test_order_preserved(self):
        a = StyleRule("a", DeclarationBlock((Declaration("margin", "1px"),)))
        b = StyleRule("b", DeclarationBlock((Declaration("margin", "2px"),)))
        blocks = match_base([b, a], object(), matches=_matcher("a", "b"), inline_style=_inline)
        assert blocks[1:] == [b.declarations, a.declarations]

    def test_selector_passed_verbatim(self):
        seen = []

        def matches(element, selector_text):
            seen.append(selector_text)
            return False

        match_base([StyleRule("div::before")], object(), matches=matches, inline_style=_inline)
        assert seen == ["div::before"]

    def test_inline_always_present(self):
        assert match_base([], object(), matches=_matcher(), inline_style=_inline) == [INLINE]


class TestSelectorErrors:
    def test_error_from_matches_propagates(self):
        def matches(element, selector_text):
            raise cssselect2.SelectorError(f"bad selector {selector_text!r}")

        with pytest.raises(cssselect2.SelectorError, match="div"):
            match_base([StyleRule("div")], object(), matches=matches, inline_style=_inline)

    def test_invalid_selector_with_default_matcher(self):
        with pytest.raises(cssselect2.SelectorError):
            match_base([StyleRule("div[[")], object(), inline_style=_inline)
