"""Document wrapper: an element tree plus the style sheets it carries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable
from xml.etree import ElementTree

import cssselect2

from stylecascade.model.rules import StyleSheet
from stylecascade.parser.errors import ParseError
from stylecascade.parser.stylesheet import parse_stylesheet

__all__ = ["Document"]


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1].lower()


def _embedded_style_sheets(root: ElementTree.Element) -> list[StyleSheet]:
    """Return one StyleSheet per ``<style>`` element, in document order."""
    sheets: list[StyleSheet] = []
    for node in root.iter():
        if _local_name(node.tag) != "style":
            continue
        css_type = node.get("type", "text/css").strip().lower()
        if css_type not in ("", "text/css"):
            continue
        source = "".join(node.itertext())
        sheets.append(parse_stylesheet(source, media=node.get("media", "").strip()))
    return sheets


@dataclass(frozen=True)
class Document:
    """A parsed document: its root element and style sheets in document order."""

    root: cssselect2.ElementWrapper | None
    style_sheets: tuple[StyleSheet, ...] = ()

    @classmethod
    def from_string(cls, markup: str, *, extra_css: Iterable[str] = ()) -> Document:
        """Parse well-formed (X)HTML *markup*.

        ``<style>`` elements become style sheets in document order; each
        string in *extra_css* is appended as a further sheet.
        """
        try:
            root = ElementTree.fromstring(markup)
        except ElementTree.ParseError as e:
            line, column = getattr(e, "position", (None, None))
            raise ParseError(str(e), line=line, column=column) from e

        sheets = _embedded_style_sheets(root)
        sheets.extend(parse_stylesheet(css) for css in extra_css)
        return cls(
            root=cssselect2.ElementWrapper.from_html_root(root),
            style_sheets=tuple(sheets),
        )

    @classmethod
    def from_path(cls, path: str | Path, *, extra_css: Iterable[str] = ()) -> Document:
        return cls.from_string(Path(path).read_text(encoding="utf-8"), extra_css=extra_css)

    def query(self, selector_text: str) -> cssselect2.ElementWrapper | None:
        """Return the first element matching *selector_text*, or None."""
        if self.root is None:
            return None
        return self.root.query(selector_text)
