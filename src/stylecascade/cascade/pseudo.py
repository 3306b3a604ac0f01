"""Pseudo-element extraction: bucket matching rules by pseudo-element name."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from stylecascade.model.rules import DeclarationBlock, StyleRule
from stylecascade.selector import matches as default_matches

__all__ = [
    "PSEUDO_ELEMENTS",
    "PseudoElementMatch",
    "scan_pseudo_elements",
    "base_selector",
    "split_pseudo_elements",
]

PSEUDO_ELEMENTS = (
    "before",
    "after",
    "first-letter",
    "first-line",
    "selection",
    "backdrop",
    "placeholder",
    "marker",
    "spelling-error",
    "grammar-error",
)

# A token must end at an identifier boundary: ":placeholder-shown" is a
# pseudo-class, not ":placeholder".
_PSEUDO_ELEMENT_RE = re.compile(
    r"::?(" + "|".join(re.escape(name) for name in PSEUDO_ELEMENTS) + r")(?![\w-])",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class PseudoElementMatch:
    """One pseudo-element token found in a selector, with its span."""

    name: str  # lower-case, without colons
    start: int
    end: int

    @property
    def key(self) -> str:
        return f"::{self.name}"


def scan_pseudo_elements(selector_text: str) -> list[PseudoElementMatch]:
    """Return every pseudo-element token in *selector_text*, left to right."""
    return [
        PseudoElementMatch(name=m.group(1).lower(), start=m.start(), end=m.end())
        for m in _PSEUDO_ELEMENT_RE.finditer(selector_text)
    ]


def base_selector(
    selector_text: str, found: list[PseudoElementMatch], *, strip_all: bool = False
) -> str:
    """Remove pseudo-element spans from *selector_text*.

    Only the last occurrence is removed unless *strip_all* is set.  The
    spans are cut out as-is; an empty result is ``*``.
    """
    spans = found if strip_all else found[-1:]
    text = selector_text
    for match in reversed(spans):
        text = text[: match.start] + text[match.end:]
    return text.strip() or "*"


def split_pseudo_elements(
    rules: Iterable[StyleRule],
    element: Any,
    *,
    matches: Callable[[Any, str], bool] = default_matches,
    strip_all: bool = False,
) -> dict[str, list[DeclarationBlock]] | None:
    """Group the declaration blocks of pseudo-element rules matching *element*.

    Keys are ``"::name"``.  Each group keeps the order of *rules*.  Returns
    None when no rule contributed to any group.
    """
    groups: dict[str, list[DeclarationBlock]] = {}
    for rule in rules:
        found = scan_pseudo_elements(rule.selector_text)
        if not found:
            continue
        if not matches(element, base_selector(rule.selector_text, found, strip_all=strip_all)):
            continue
        for key in dict.fromkeys(m.key for m in found):
            groups.setdefault(key, []).append(rule.declarations)
    return groups or None
