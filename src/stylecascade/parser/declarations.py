"""Declaration block reader built on tinycss2."""

from __future__ import annotations

from typing import Sequence, Union

import tinycss2
import tinycss2.ast

from stylecascade.model.rules import Declaration, DeclarationBlock

__all__ = ["parse_declarations", "inline_declarations"]

DeclarationSource = Union[str, Sequence[tinycss2.ast.Node]]


def _property_name(decl: tinycss2.ast.Declaration) -> str:
    # Custom properties are case-sensitive.
    if decl.name.startswith("--"):
        return decl.name
    return decl.lower_name


def parse_declarations(source: DeclarationSource) -> DeclarationBlock:
    """Parse the contents of a ``{ ... }`` block (or a ``style`` attribute).

    Invalid declarations and nested rules are skipped.
    """
    items = tinycss2.parse_blocks_contents(source, skip_comments=True, skip_whitespace=True)
    declarations = [
        Declaration(
            name=_property_name(item),
            value=tinycss2.serialize(item.value).strip(),
            important=item.important,
        )
        for item in items
        if item.type == "declaration"
    ]
    return DeclarationBlock.from_declarations(declarations)


def inline_declarations(element: object) -> DeclarationBlock:
    """Return the declaration block of *element*'s ``style`` attribute."""
    etree_element = getattr(element, "etree_element", element)
    style = etree_element.get("style") if hasattr(etree_element, "get") else None
    if not style:
        return DeclarationBlock()
    return parse_declarations(style)
