"""Media and feature-support condition evaluation.

    Environment(config).evaluate_media("screen and (min-width: 600px)")
    Environment(config).evaluate_supports("(display: grid) and (not (float: left))")
"""

from stylecascade.conditions.base import ConditionEvaluator
from stylecascade.conditions.environment import Environment
from stylecascade.conditions.media import evaluate_media_query_list, parse_media_query
from stylecascade.conditions.supports import KNOWN_PROPERTIES, evaluate_supports_condition

__all__ = [
    "ConditionEvaluator",
    "Environment",
    "KNOWN_PROPERTIES",
    "evaluate_media_query_list",
    "evaluate_supports_condition",
    "parse_media_query",
]
