"""Base-style matching: the declaration blocks that apply to an element itself."""

from __future__ import annotations

from typing import Any, Callable, Iterable

from stylecascade.model.rules import DeclarationBlock, StyleRule
from stylecascade.parser.declarations import inline_declarations
from stylecascade.selector import matches as default_matches

__all__ = ["match_base"]


def match_base(
    rules: Iterable[StyleRule],
    element: Any,
    *,
    matches: Callable[[Any, str], bool] = default_matches,
    inline_style: Callable[[Any], DeclarationBlock] = inline_declarations,
) -> list[DeclarationBlock]:
    """Return *element*'s inline block followed by the blocks of matching rules.

    *rules* must already be in priority order; it is preserved.
    """
    blocks = [inline_style(element)]
    blocks.extend(rule.declarations for rule in rules if matches(element, rule.selector_text))
    return blocks
