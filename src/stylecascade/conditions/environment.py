"""Condition evaluator for a configured rendering environment."""

from __future__ import annotations

import logging

from stylecascade.conditions.media import evaluate_media_query_list
from stylecascade.conditions.supports import KNOWN_PROPERTIES, evaluate_supports_condition
from stylecascade.config import EnvironmentConfig
from stylecascade.parser.errors import ParseError

__all__ = ["Environment"]

logger = logging.getLogger(__name__)


class Environment:
    """Evaluate ``@media`` and ``@supports`` conditions against an :class:`EnvironmentConfig`."""

    def __init__(self, config: EnvironmentConfig | None = None):
        self.config = config or EnvironmentConfig()
        self.supported_properties = (
            self.config.supported_properties
            if self.config.supported_properties is not None
            else KNOWN_PROPERTIES
        )

    def evaluate_media(self, media_text: str) -> bool:
        return evaluate_media_query_list(media_text, self.config)

    def evaluate_supports(self, condition_text: str) -> bool:
        try:
            return evaluate_supports_condition(condition_text, self.supported_properties)
        except ParseError as exc:
            logger.debug("Ignoring @supports %r: %s", condition_text, exc)
            return False
