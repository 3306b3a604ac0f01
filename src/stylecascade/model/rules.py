"""Style-sheet rule tree: declarations, style rules and conditional groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` pair, optionally marked ``!important``."""

    name: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class DeclarationBlock:
    """An ordered view over one rule's (or one inline style's) declarations.

    Property names are unique within a block.  Use :meth:`from_declarations`
    to build a block from raw parser output that may repeat a name.
    """

    declarations: tuple[Declaration, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for decl in self.declarations:
            if decl.name in seen:
                raise ValueError(f"Duplicate property in declaration block: {decl.name!r}")
            seen.add(decl.name)

    @classmethod
    def from_declarations(cls, declarations: Iterable[Declaration]) -> DeclarationBlock:
        """Fold repeated property names into one declaration each.

        A later declaration replaces an earlier one for the same name, except
        that a normal declaration never replaces an important one.
        """
        folded: dict[str, Declaration] = {}
        for decl in declarations:
            current = folded.get(decl.name)
            if current is not None and current.important and not decl.important:
                continue
            folded.pop(decl.name, None)
            folded[decl.name] = decl
        return cls(tuple(folded.values()))

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self.declarations)

    def __len__(self) -> int:
        return len(self.declarations)

    def get(self, name: str) -> Declaration | None:
        """Return the declaration for *name*, or None."""
        for decl in self.declarations:
            if decl.name == name:
                return decl
        return None


@dataclass(frozen=True)
class StyleRule:
    """A selector paired with the declarations it applies."""

    selector_text: str
    declarations: DeclarationBlock = DeclarationBlock()


@dataclass(frozen=True)
class MediaGroup:
    """An ``@media`` block: nested rules that apply while *media_text* holds."""

    media_text: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class SupportsGroup:
    """An ``@supports`` block: nested rules that apply while *condition_text* holds."""

    condition_text: str
    rules: tuple[Rule, ...] = ()


@dataclass(frozen=True)
class OtherRule:
    """Any other at-rule (``@font-face``, ``@keyframes``, ``@page`` ...)."""

    at_keyword: str


Rule = Union[StyleRule, MediaGroup, SupportsGroup, OtherRule]


@dataclass(frozen=True)
class StyleSheet:
    """The root of one style sheet's rule tree.

    ``media`` is the media list of the sheet's owner (e.g. the ``media``
    attribute of a ``<style>`` element); an empty string means all media.
    """

    rules: tuple[Rule, ...] = ()
    media: str = ""
    href: str = ""
