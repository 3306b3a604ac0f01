"""Protocol for the condition evaluators the rule collector consults."""

from __future__ import annotations

from typing import Protocol


class ConditionEvaluator(Protocol):
    """Decides whether ``@media`` and ``@supports`` conditions currently hold.

    Implementations never raise: a condition they cannot evaluate is false.
    """

    def evaluate_media(self, media_text: str) -> bool: ...

    def evaluate_supports(self, condition_text: str) -> bool: ...
