"""Tests for reading declaration blocks."""

from xml.etree import ElementTree

import cssselect2

from stylecascade.model import Declaration, DeclarationBlock
from stylecascade.parser import inline_declarations, parse_declarations


class TestParseDeclarations:
    def test_basic(self):
        block = parse_declarations("color: red; margin: 0 auto")
        assert list(block) == [Declaration("color", "red"), Declaration("margin", "0 auto")]

    def test_names_lower_cased(self):
        assert parse_declarations("COLOR: Red").get("color") == Declaration("color", "Red")

    def test_custom_properties_keep_case(self):
        assert parse_declarations("--Main-Color: red").get("--Main-Color") is not None

    def test_important(self):
        assert parse_declarations("color: red ! important").get("color").important is True

    def test_repeated_property_folded(self):
        block = parse_declarations("color: red !important; color: blue")
        assert list(block) == [Declaration("color", "red", True)]

    def test_string_values_serialised(self):
        assert parse_declarations('content: "x"').get("content").value == '"x"'

    def test_invalid_declarations_skipped(self):
        block = parse_declarations("color red; margin: 0")
        assert [d.name for d in block] == ["margin"]


class TestInlineDeclarations:
    def _element(self, markup: str) -> cssselect2.ElementWrapper:
        root = ElementTree.fromstring(markup)
        return cssselect2.ElementWrapper.from_html_root(root)

    def test_reads_style_attribute(self):
        element = self._element('<div style="color: red; padding: 1px"/>')
        assert [d.name for d in inline_declarations(element)] == ["color", "padding"]

    def test_missing_style_attribute(self):
        assert inline_declarations(self._element("<div/>")) == DeclarationBlock()

    def test_accepts_bare_etree_element(self):
        element = ElementTree.fromstring('<div style="color: red"/>')
        assert inline_declarations(element).get("color").value == "red"
