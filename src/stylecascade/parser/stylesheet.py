"""Build a frozen rule tree from CSS source using tinycss2.

Only the structure the cascade needs is kept: style rules, ``@media`` and
``@supports`` groups.  Every other at-rule becomes an :class:`OtherRule`.
"""

from __future__ import annotations

import logging
from typing import Sequence

import cssselect2
import tinycss2
import tinycss2.ast

from stylecascade.model.rules import (
    MediaGroup,
    OtherRule,
    Rule,
    StyleRule,
    StyleSheet,
    SupportsGroup,
)
from stylecascade.parser.declarations import parse_declarations
from stylecascade.selector import compile_selector

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)


def _prelude_text(rule: tinycss2.ast.Node) -> str:
    return tinycss2.serialize(rule.prelude).strip()


def _build_style_rule(rule: tinycss2.ast.QualifiedRule) -> StyleRule | None:
    selector_text = _prelude_text(rule)
    try:
        compile_selector(selector_text)
    except cssselect2.SelectorError as exc:
        logger.warning(
            "Invalid or unsupported selector %r ignored at %d:%d: %s",
            selector_text, rule.source_line, rule.source_column, exc,
        )
        return None
    return StyleRule(selector_text=selector_text, declarations=parse_declarations(rule.content))


def _build_rules(nodes: Sequence[tinycss2.ast.Node]) -> tuple[Rule, ...]:
    rules: list[Rule] = []
    for node in nodes:
        if node.type == "error":
            logger.warning(
                "Parse error at %d:%d: %s", node.source_line, node.source_column, node.message
            )
            continue

        if node.type == "qualified-rule":
            style_rule = _build_style_rule(node)
            if style_rule is not None:
                rules.append(style_rule)

        elif node.type == "at-rule":
            keyword = node.lower_at_keyword
            if keyword in ("media", "supports") and node.content is None:
                logger.warning(
                    "@%s rule without a block ignored at %d:%d",
                    keyword, node.source_line, node.source_column,
                )
                continue
            if keyword == "media":
                content = tinycss2.parse_rule_list(
                    node.content, skip_comments=True, skip_whitespace=True
                )
                rules.append(MediaGroup(media_text=_prelude_text(node), rules=_build_rules(content)))
            elif keyword == "supports":
                content = tinycss2.parse_rule_list(
                    node.content, skip_comments=True, skip_whitespace=True
                )
                rules.append(
                    SupportsGroup(condition_text=_prelude_text(node), rules=_build_rules(content))
                )
            else:
                rules.append(OtherRule(at_keyword=keyword))

    return tuple(rules)


def parse_stylesheet(source: str, *, media: str = "", href: str = "") -> StyleSheet:
    """Parse CSS *source* into a :class:`StyleSheet`.

    Rules keep their source order.  Parse errors and invalid selectors are
    logged and dropped; this function does not raise for bad CSS.
    """
    nodes = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    return StyleSheet(rules=_build_rules(nodes), media=media, href=href)
