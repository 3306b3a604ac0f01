"""Cascade resolution entry points.

Pipeline: collect -> sort by specificity -> match (base) / split (pseudo) ->
resolve.  Nothing is retained between calls.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from stylecascade.cascade.collector import collect_style_rules
from stylecascade.cascade.matcher import match_base
from stylecascade.cascade.pseudo import (
    PSEUDO_ELEMENTS,
    base_selector,
    scan_pseudo_elements,
    split_pseudo_elements,
)
from stylecascade.cascade.resolver import resolve_declarations
from stylecascade.cascade.sorter import sort_by_specificity
from stylecascade.conditions.base import ConditionEvaluator
from stylecascade.conditions.environment import Environment
from stylecascade.model.resolved import ResolvedStyleMap
from stylecascade.model.rules import DeclarationBlock, StyleRule, StyleSheet
from stylecascade.parser.declarations import inline_declarations
from stylecascade.selector import matches as default_matches

__all__ = [
    "PSEUDO_ELEMENTS",
    "base_selector",
    "collect_style_rules",
    "get_document_style_rules",
    "get_element_styles",
    "get_pseudo_element_styles",
    "match_base",
    "resolve_declarations",
    "scan_pseudo_elements",
    "sort_by_specificity",
    "split_pseudo_elements",
]


def get_document_style_rules(
    document: Any, environment: ConditionEvaluator | None = None
) -> list[StyleRule]:
    """Return every applicable style rule of *document*, most specific first.

    *document* is anything with a ``style_sheets`` sequence, or the sequence
    itself.  Sheets whose own media list does not hold are skipped.
    """
    evaluator = environment or Environment()
    sheets: Iterable[StyleSheet] = getattr(document, "style_sheets", document)

    rules: list[StyleRule] = []
    for sheet in sheets:
        if sheet.media and not evaluator.evaluate_media(sheet.media):
            continue
        rules.extend(collect_style_rules(sheet, evaluator))
    return sort_by_specificity(rules)


def get_element_styles(
    element: Any,
    rules: Iterable[StyleRule],
    *,
    matches: Callable[[Any, str], bool] = default_matches,
    inline_style: Callable[[Any], DeclarationBlock] = inline_declarations,
) -> ResolvedStyleMap | None:
    """Resolve the styles that apply to *element* itself, inline style first.

    Returns None when neither a rule nor the inline style declares anything.
    """
    return resolve_declarations(
        match_base(rules, element, matches=matches, inline_style=inline_style)
    )


def get_pseudo_element_styles(
    element: Any,
    rules: Iterable[StyleRule],
    *,
    matches: Callable[[Any, str], bool] = default_matches,
    strip_all: bool = False,
) -> dict[str, ResolvedStyleMap] | None:
    """Resolve styles per pseudo-element of *element*.

    Returns None when no pseudo-element rule applies.
    """
    groups = split_pseudo_elements(rules, element, matches=matches, strip_all=strip_all)
    if groups is None:
        return None
    resolved: dict[str, ResolvedStyleMap] = {}
    for name, blocks in groups.items():
        style = resolve_declarations(blocks)
        if style is not None:
            resolved[name] = style
    return resolved
