"""Three-way selector specificity comparison."""

from __future__ import annotations

import cssselect2

from stylecascade.selector.matching import compile_selector

__all__ = ["specificity", "compare_specificity"]

Specificity = tuple[int, int, int]

_LOWEST: Specificity = (0, 0, 0)


def specificity(selector_text: str) -> Specificity:
    """Return the (ids, classes, types) weight of *selector_text*.

    For a selector list the highest weight among its selectors is used.
    Selectors that cannot be parsed weigh ``(0, 0, 0)``.
    """
    try:
        compiled = compile_selector(selector_text)
    except cssselect2.SelectorError:
        return _LOWEST
    return max((tuple(c.specificity) for c in compiled), default=_LOWEST)  # type: ignore[return-value]


def compare_specificity(selector_a: str, selector_b: str) -> int:
    """Return 1 if *selector_a* is more specific than *selector_b*, -1 if less, else 0."""
    a = specificity(selector_a)
    b = specificity(selector_b)
    return (a > b) - (a < b)
