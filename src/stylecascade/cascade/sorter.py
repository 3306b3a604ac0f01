"""Order style rules by selector specificity."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable

from stylecascade.model.rules import StyleRule
from stylecascade.selector import compare_specificity

__all__ = ["sort_by_specificity"]

Comparator = Callable[[str, str], int]


def sort_by_specificity(
    rules: Iterable[StyleRule], compare: Comparator = compare_specificity
) -> list[StyleRule]:
    """Return a new list of *rules*, most specific selector first.

    The sort is stable, so rules of equal specificity keep their input order.
    """
    return sorted(rules, key=cmp_to_key(lambda a, b: compare(b.selector_text, a.selector_text)))
