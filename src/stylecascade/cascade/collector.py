"""Flatten a style sheet's rule tree into its applicable style rules."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from stylecascade.conditions.base import ConditionEvaluator
from stylecascade.model.rules import (
    MediaGroup,
    OtherRule,
    Rule,
    StyleRule,
    StyleSheet,
    SupportsGroup,
)

__all__ = ["collect_style_rules"]

logger = logging.getLogger(__name__)


def _walk(rules: Sequence[Rule], evaluator: ConditionEvaluator) -> Iterator[StyleRule]:
    # Last declared first: ties in specificity keep this order downstream.
    for rule in reversed(rules):
        match rule:
            case StyleRule():
                yield rule
            case MediaGroup(media_text=media_text, rules=nested):
                if evaluator.evaluate_media(media_text):
                    yield from _walk(nested, evaluator)
                else:
                    logger.debug("Skipping @media %s", media_text)
            case SupportsGroup(condition_text=condition_text, rules=nested):
                if evaluator.evaluate_supports(condition_text):
                    yield from _walk(nested, evaluator)
                else:
                    logger.debug("Skipping @supports %s", condition_text)
            case OtherRule():
                pass


def collect_style_rules(sheet: StyleSheet, evaluator: ConditionEvaluator) -> list[StyleRule]:
    """Return the style rules of *sheet* whose enclosing conditions hold.

    Discovery order is reverse declaration order at every nesting level.
    """
    return list(_walk(sheet.rules, evaluator))
