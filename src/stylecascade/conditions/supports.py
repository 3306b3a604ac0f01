"""``@supports`` condition evaluation.

Condition text is tokenised with tinycss2, whose component values already
nest parentheses and functions, and evaluated recursively:

    SupportsCondition = 'not' InParens
                      | InParens ( 'and' InParens )*
                      | InParens ( 'or' InParens )*
    InParens          = '(' SupportsCondition ')' | '(' Declaration ')'
                      | 'selector(' ComplexSelector ')'
"""

from __future__ import annotations

from typing import Sequence

import cssselect2
import tinycss2
import tinycss2.ast

from stylecascade.parser.errors import ConditionError
from stylecascade.selector import compile_selector

__all__ = ["KNOWN_PROPERTIES", "evaluate_supports_condition"]

KNOWN_PROPERTIES = frozenset({
    "align-content", "align-items", "align-self", "animation", "appearance",
    "aspect-ratio", "backdrop-filter", "background", "background-clip",
    "background-color", "background-image", "background-position",
    "background-repeat", "background-size", "border", "border-bottom",
    "border-collapse", "border-color", "border-left", "border-radius",
    "border-right", "border-style", "border-top", "border-width", "bottom",
    "box-shadow", "box-sizing", "caret-color", "clear", "clip-path", "color",
    "column-count", "column-gap", "columns", "contain", "content", "cursor",
    "direction", "display", "filter", "flex", "flex-basis", "flex-direction",
    "flex-flow", "flex-grow", "flex-shrink", "flex-wrap", "float", "font",
    "font-family", "font-size", "font-style", "font-variant", "font-weight",
    "gap", "grid", "grid-area", "grid-column", "grid-row",
    "grid-template-areas", "grid-template-columns", "grid-template-rows",
    "height", "hyphens", "inset", "isolation", "justify-content",
    "justify-items", "justify-self", "left", "letter-spacing", "line-height",
    "list-style", "list-style-type", "margin", "margin-bottom", "margin-left",
    "margin-right", "margin-top", "mask", "max-height", "max-width",
    "min-height", "min-width", "mix-blend-mode", "object-fit",
    "object-position", "opacity", "order", "outline", "outline-offset",
    "overflow", "overflow-wrap", "overflow-x", "overflow-y", "padding",
    "padding-bottom", "padding-left", "padding-right", "padding-top",
    "place-items", "pointer-events", "position", "quotes", "resize", "right",
    "row-gap", "scroll-behavior", "tab-size", "table-layout", "text-align",
    "text-decoration", "text-indent", "text-overflow", "text-shadow",
    "text-transform", "top", "touch-action", "transform", "transform-origin",
    "transition", "user-select", "vertical-align", "visibility",
    "white-space", "width", "will-change", "word-break", "word-spacing",
    "writing-mode", "z-index",
})


def _significant(tokens: Sequence[tinycss2.ast.Node]) -> list[tinycss2.ast.Node]:
    return [t for t in tokens if t.type not in ("whitespace", "comment")]


def _keyword(token: tinycss2.ast.Node) -> str | None:
    return token.lower_value if token.type == "ident" else None


def _declaration_supported(tokens: list[tinycss2.ast.Node], properties: frozenset[str]) -> bool:
    name_token = tokens[0]
    value = tinycss2.serialize(tokens[2:]).strip()
    if not value:
        return False
    name = name_token.value
    if name.startswith("--"):
        return True
    return name.lower() in properties


def _in_parens(token: tinycss2.ast.Node, properties: frozenset[str]) -> bool:
    if token.type == "() block":
        inner = _significant(token.content)
        if (
            len(inner) >= 2
            and inner[0].type == "ident"
            and inner[1].type == "literal"
            and inner[1].value == ":"
        ):
            return _declaration_supported(inner, properties)
        return _condition(inner, properties)

    if token.type == "function" and token.lower_name == "selector":
        try:
            compile_selector(tinycss2.serialize(token.arguments).strip())
        except cssselect2.SelectorError:
            return False
        return True

    if token.type == "function":
        # Unknown functions such as font-tech() are well-formed but unsupported.
        return False

    text = tinycss2.serialize([token])
    raise ConditionError(f"Expected a parenthesised condition, got {text!r}", text)


def _condition(tokens: list[tinycss2.ast.Node], properties: frozenset[str]) -> bool:
    if not tokens:
        raise ConditionError("Empty supports condition", "")

    if _keyword(tokens[0]) == "not":
        if len(tokens) != 2:
            raise ConditionError(
                "'not' takes exactly one parenthesised condition", tinycss2.serialize(tokens)
            )
        return not _in_parens(tokens[1], properties)

    operands = tokens[0::2]
    operators = {_keyword(t) for t in tokens[1::2]}
    if len(tokens) % 2 == 0 or len(operators) > 1 or not operators <= {"and", "or"}:
        text = tinycss2.serialize(tokens)
        raise ConditionError(f"Cannot mix or omit 'and'/'or' in {text!r}", text)

    results = [_in_parens(operand, properties) for operand in operands]
    if operators == {"or"}:
        return any(results)
    return all(results)


def evaluate_supports_condition(text: str, properties: frozenset[str] = KNOWN_PROPERTIES) -> bool:
    """Evaluate ``@supports`` condition *text*.

    Raises ConditionError when the condition is malformed.
    """
    tokens = _significant(tinycss2.parse_component_value_list(text, skip_comments=True))
    return _condition(tokens, properties)
