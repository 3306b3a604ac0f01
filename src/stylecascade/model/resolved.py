"""Resolved style map: the read-only result of the cascade."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Iterator


class ResolvedStyleMap(Mapping):  # type: ignore[type-arg]
    """Property name -> resolved value.

    Values are the literal declaration text, never carrying an ``!important``
    marker.  Which properties were fixed by an important declaration is kept
    separately in :attr:`important`.
    """

    __slots__ = ("_values", "_important")

    def __init__(self, values: Mapping[str, str] | None = None, important: Iterable[str] = ()):
        self._values: dict[str, str] = dict(values or {})
        self._important = frozenset(name for name in important if name in self._values)

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResolvedStyleMap({self._values!r}, important={sorted(self._important)!r})"

    @property
    def important(self) -> frozenset[str]:
        """Names of properties whose value came from an important declaration."""
        return self._important

    def is_important(self, name: str) -> bool:
        """Whether *name* was set by an important declaration."""
        return name in self._important

    def to_dict(self) -> dict[str, str]:
        """Return a plain dict copy of the values."""
        return dict(self._values)
