"""Media query evaluation.

Each entry of a comma-separated media query list is parsed with a Lark
grammar (``media.lark``) and evaluated against an :class:`EnvironmentConfig`.
Evaluation is three-valued: features the environment does not know, or
values of the wrong type, are *unknown*; an entry counts only when it is
definitely true.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Optional

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from stylecascade.config import EnvironmentConfig
from stylecascade.parser.errors import ConditionError

__all__ = ["parse_media_query", "evaluate_media_query_list", "MEDIA_TYPES"]

logger = logging.getLogger(__name__)

GRAMMAR_PATH = Path(__file__).parent / "media.lark"

MEDIA_TYPES = frozenset({"all", "screen", "print", "speech"})

Truth = Optional[bool]

# Lengths in CSS px; "em" and "rem" are resolved against the config font size.
_LENGTH_UNITS: dict[str, float] = {
    "px": 1.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "q": 96.0 / 101.6,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
}

# Resolutions in dpi.
_RESOLUTION_UNITS: dict[str, float] = {
    "dpi": 1.0,
    "dpcm": 2.54,
    "dppx": 96.0,
    "x": 96.0,
}

# Range features: name -> (value kind, reader).
_RANGE_FEATURES: dict[str, tuple[str, Callable[[EnvironmentConfig], float]]] = {
    "width": ("length", lambda c: c.width),
    "height": ("length", lambda c: c.height),
    "device-width": ("length", lambda c: c.width),
    "device-height": ("length", lambda c: c.height),
    "aspect-ratio": ("ratio", lambda c: c.width / c.height if c.height else 0.0),
    "device-aspect-ratio": ("ratio", lambda c: c.width / c.height if c.height else 0.0),
    "resolution": ("resolution", lambda c: c.resolution),
    "color": ("integer", lambda c: float(c.color_bits)),
    "monochrome": ("integer", lambda c: float(c.monochrome_bits)),
    "grid": ("integer", lambda c: 1.0 if c.grid else 0.0),
}

# Discrete features: name -> reader returning a keyword.
_DISCRETE_FEATURES: dict[str, Callable[[EnvironmentConfig], str]] = {
    "orientation": lambda c: "portrait" if c.height >= c.width else "landscape",
    "hover": lambda c: c.hover,
    "any-hover": lambda c: c.hover,
    "pointer": lambda c: c.pointer,
    "any-pointer": lambda c: c.pointer,
    "prefers-color-scheme": lambda c: c.color_scheme,
    "prefers-reduced-motion": lambda c: c.reduced_motion,
    "scripting": lambda c: c.scripting,
}

_FALSY_KEYWORDS = frozenset({"none", "no-preference"})


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def _all(values: Iterable[Truth]) -> Truth:
    values = list(values)
    if any(v is False for v in values):
        return False
    if any(v is None for v in values):
        return None
    return True


def _any(values: Iterable[Truth]) -> Truth:
    values = list(values)
    if any(v is True for v in values):
        return True
    if any(v is None for v in values):
        return None
    return False


def _not(value: Truth) -> Truth:
    return None if value is None else not value


def _split_numeric(raw: str) -> tuple[float, str]:
    """Split ``"600px"`` into ``(600.0, "px")``."""
    idx = len(raw)
    while idx and (raw[idx - 1].isalpha() or raw[idx - 1] == "%"):
        idx -= 1
    return float(raw[:idx]), raw[idx:].lower()


def _to_number(kind: str, token: Token, config: EnvironmentConfig) -> float | None:
    """Convert a feature value token to the unit its feature is read in."""
    if token.type != "NUMERIC":
        return None
    raw = str(token)
    if "/" in raw:
        if kind != "ratio":
            return None
        num, den = (float(part) for part in raw.split("/"))
        return num / den if den else None
    number, unit = _split_numeric(raw)
    if kind == "length":
        if unit in ("em", "rem"):
            return number * config.font_size
        if unit in _LENGTH_UNITS:
            return number * _LENGTH_UNITS[unit]
        if not unit and number == 0:
            return 0.0
        return None
    if kind == "resolution":
        return number * _RESOLUTION_UNITS[unit] if unit in _RESOLUTION_UNITS else None
    if unit:
        return None
    if kind == "integer" and not number.is_integer():
        return None
    return number


def _compare(left: float, op: str, right: float) -> bool:
    if op == "<":
        return left < right
    if op == "<=":
        return left <= right
    if op == ">":
        return left > right
    if op == ">=":
        return left >= right
    return left == right


_FLIPPED = {"<": ">", "<=": ">=", ">": "<", ">=": "<=", "=": "="}


class _MediaQueryEvaluator(Transformer):  # type: ignore[type-arg]
    """Reduce a media query parse tree to a three-valued truth."""

    def __init__(self, config: EnvironmentConfig):
        super().__init__()
        self.config = config

    # ---- features ----

    def boolean_feature(self, items: list[Token]) -> Truth:
        name = str(items[0]).lower()
        if name in _RANGE_FEATURES:
            return _RANGE_FEATURES[name][1](self.config) != 0
        if name in _DISCRETE_FEATURES:
            return _DISCRETE_FEATURES[name](self.config) not in _FALSY_KEYWORDS
        return None

    def plain_feature(self, items: list[Token]) -> Truth:
        name, value = str(items[0]).lower(), items[1]
        op = "="
        if name.startswith("min-"):
            name, op = name[4:], ">="
        elif name.startswith("max-"):
            name, op = name[4:], "<="

        if name in _DISCRETE_FEATURES:
            if op != "=" or value.type != "IDENT":
                return None
            return _DISCRETE_FEATURES[name](self.config) == str(value).lower()
        return self._range(name, op, value)

    def range_feature(self, items: list[Token]) -> Truth:
        name, op, value = str(items[0]).lower(), str(items[1]), items[2]
        return self._range(name, op, value)

    def reversed_range_feature(self, items: list[Token]) -> Truth:
        value, op, name = items[0], str(items[1]), str(items[2]).lower()
        return self._range(name, _FLIPPED[op], value)

    def interval_feature(self, items: list[Token]) -> Truth:
        low, low_op, name, high_op, high = items
        name = str(name).lower()
        return _all([
            self._range(name, _FLIPPED[str(low_op)], low),
            self._range(name, str(high_op), high),
        ])

    def _range(self, name: str, op: str, value: Token) -> Truth:
        if name not in _RANGE_FEATURES:
            return None
        kind, reader = _RANGE_FEATURES[name]
        expected = _to_number(kind, value, self.config)
        if expected is None:
            return None
        return _compare(reader(self.config), op, expected)

    # ---- conditions ----

    def not_condition(self, items: list[Truth]) -> Truth:
        return _not(items[0])

    def and_condition(self, items: list[Truth]) -> Truth:
        return _all(items)

    def or_condition(self, items: list[Truth]) -> Truth:
        return _any(items)

    # ---- queries ----

    def _type_matches(self, token: Token) -> bool:
        media_type = str(token).lower()
        if media_type not in MEDIA_TYPES:
            return False
        return media_type == "all" or media_type == self.config.media_type.lower()

    def type_query(self, items: list[object]) -> Truth:
        return _all([self._type_matches(items[0]), *items[1:]])  # type: ignore[arg-type, list-item]

    def negated_type_query(self, items: list[object]) -> Truth:
        return _not(_all([self._type_matches(items[0]), *items[1:]]))  # type: ignore[arg-type, list-item]

    def condition_query(self, items: list[Truth]) -> Truth:
        return items[0]

    def start(self, items: list[Truth]) -> Truth:
        return items[0]


def parse_media_query(text: str):
    """Parse a single media query (no top-level commas) into a Lark tree.

    Raises ConditionError when *text* is not a valid media query.
    """
    try:
        return _parser().parse(text)
    except LarkError as e:
        column = getattr(e, "column", None)
        raise ConditionError(f"Invalid media query {text!r}: {e}", text, column=column) from e


def evaluate_media_query_list(text: str, config: EnvironmentConfig) -> bool:
    """Return True if any query in the comma-separated list *text* holds.

    An empty list matches all media.  Entries that fail to parse count as
    false without affecting the others.
    """
    if not text.strip():
        return True
    for query in text.split(","):
        try:
            tree = parse_media_query(query)
        except ConditionError as exc:
            logger.debug("Ignoring media query: %s", exc)
            continue
        if _MediaQueryEvaluator(config).transform(tree) is True:
            return True
    return False
