"""stylecascade model layer -- public type re-exports."""

from stylecascade.model.resolved import ResolvedStyleMap
from stylecascade.model.rules import (
    Declaration,
    DeclarationBlock,
    MediaGroup,
    OtherRule,
    Rule,
    StyleRule,
    StyleSheet,
    SupportsGroup,
)

__all__ = [
    # declarations
    "Declaration",
    "DeclarationBlock",
    # rule tree
    "Rule",
    "StyleRule",
    "MediaGroup",
    "SupportsGroup",
    "OtherRule",
    "StyleSheet",
    # results
    "ResolvedStyleMap",
]
