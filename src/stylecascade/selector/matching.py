"""Selector matching primitive backed by cssselect2."""

from __future__ import annotations

from functools import lru_cache

import cssselect2

__all__ = ["compile_selector", "matches"]


@lru_cache(maxsize=1024)
def compile_selector(selector_text: str) -> tuple[cssselect2.compiler.CompiledSelector, ...]:
    """Compile a selector list.  Raises ``cssselect2.SelectorError`` when invalid."""
    return tuple(cssselect2.compile_selector_list(selector_text))


def matches(element: cssselect2.ElementWrapper, selector_text: str) -> bool:
    """Return True if *element* matches any selector in *selector_text*.

    Selectors that carry a pseudo-element address a sub-part of the element,
    never the element itself, so they do not match.
    """
    return any(
        compiled.test(element)
        for compiled in compile_selector(selector_text)
        if compiled.pseudo_element is None
    )
