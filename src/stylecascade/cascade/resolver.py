"""Merge prioritised declaration blocks into one resolved style map."""

from __future__ import annotations

from typing import Iterable

from stylecascade.model.resolved import ResolvedStyleMap
from stylecascade.model.rules import DeclarationBlock

__all__ = ["resolve_declarations"]


def resolve_declarations(blocks: Iterable[DeclarationBlock]) -> ResolvedStyleMap | None:
    """Resolve *blocks*, given highest priority first.

    A declaration takes effect when its property has no value yet, or when it
    is important and the current value is not.  The first important
    declaration for a property therefore wins over everything after it.

    Returns None when no block declares anything.
    """
    values: dict[str, str] = {}
    important: set[str] = set()

    for block in blocks:
        for decl in block:
            if decl.name not in values or (decl.important and decl.name not in important):
                values[decl.name] = decl.value
            if decl.important:
                important.add(decl.name)

    if not values:
        return None
    return ResolvedStyleMap(values, important)
