"""Tests for media query parsing and evaluation."""

import pytest

from stylecascade.conditions import evaluate_media_query_list, parse_media_query
from stylecascade.config import EnvironmentConfig
from stylecascade.parser import ConditionError


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

SCREEN = EnvironmentConfig()  # 1024x768 screen, 96dpi


def _holds(text: str, config: EnvironmentConfig = SCREEN) -> bool:
    return evaluate_media_query_list(text, config)


# ---------------------------------------------------------------------------
# Media types
# ---------------------------------------------------------------------------


class TestMediaTypes:
    @pytest.mark.parametrize("text", ["screen", "all", "only screen", "not print", "SCREEN"])
    def test_true(self, text):
        assert _holds(text) is True

    @pytest.mark.parametrize("text", ["print", "not screen", "speech", "tv"])
    def test_false(self, text):
        assert _holds(text) is False

    def test_print_environment(self):
        assert _holds("print", EnvironmentConfig(media_type="print")) is True

    def test_empty_list_matches_all(self):
        assert _holds("") is True
        assert _holds("   ") is True


# ---------------------------------------------------------------------------
# Features
# ---------------------------------------------------------------------------


class TestRangeFeatures:
    @pytest.mark.parametrize(
        "text",
        [
            "(min-width: 600px)",
            "(max-width: 1024px)",
            "(width: 1024px)",
            "(width >= 600px)",
            "(600px < width)",
            "(500px <= width <= 1200px)",
            "(min-width: 40em)",
            "(max-height: 10in)",
            "(aspect-ratio: 4/3)",
            "(min-aspect-ratio: 1/1)",
            "(min-resolution: 1dppx)",
            "(resolution: 96dpi)",
            "(min-color: 8)",
        ],
    )
    def test_true(self, text):
        assert _holds(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "(min-width: 1200px)",
            "(max-width: 60em)",
            "(width < 600px)",
            "(400px <= width <= 700px)",
            "(min-aspect-ratio: 16/9)",
            "(min-resolution: 2dppx)",
            "(monochrome)",
            "(width: 600)",
            "(width: 600dpi)",
        ],
    )
    def test_false(self, text):
        assert _holds(text) is False

    def test_zero_length_needs_no_unit(self):
        assert _holds("(min-width: 0)") is True


class TestDiscreteFeatures:
    def test_orientation(self):
        assert _holds("(orientation: landscape)") is True
        assert _holds("(orientation: portrait)", EnvironmentConfig(width=400, height=800)) is True

    def test_color_scheme(self):
        assert _holds("(prefers-color-scheme: dark)") is False
        assert _holds("(prefers-color-scheme: dark)", EnvironmentConfig(color_scheme="dark")) is True

    def test_boolean_context(self):
        assert _holds("(hover)") is True
        assert _holds("(color)") is True
        assert _holds("(prefers-reduced-motion)") is False
        assert _holds("(hover)", EnvironmentConfig(hover="none")) is False

    def test_range_syntax_on_discrete_feature_is_unknown(self):
        assert _holds("(min-orientation: landscape)") is False


class TestUnknownFeatures:
    def test_unknown_feature_is_false(self):
        assert _holds("(made-up-feature)") is False

    def test_negated_unknown_stays_false(self):
        assert _holds("not (made-up-feature)") is False


# ---------------------------------------------------------------------------
# Combinations
# ---------------------------------------------------------------------------


class TestCombinations:
    def test_type_and_feature(self):
        assert _holds("screen and (min-width: 600px)") is True
        assert _holds("print and (min-width: 600px)") is False

    def test_and_chain(self):
        assert _holds("screen and (min-width: 600px) and (orientation: portrait)") is False

    def test_or_condition(self):
        assert _holds("(max-width: 100px) or (hover)") is True

    def test_not_condition(self):
        assert _holds("not (max-width: 100px)") is True

    def test_nested_parentheses(self):
        assert _holds("((min-width: 600px) and (hover))") is True

    def test_comma_list_any_entry(self):
        assert _holds("print, (min-width: 100px)") is True

    def test_negated_type_with_feature(self):
        assert _holds("not screen and (max-width: 100px)") is True

    def test_case_insensitive(self):
        assert _holds("SCREEN AND (MIN-WIDTH: 600PX)") is True


# ---------------------------------------------------------------------------
# Malformed input
# ---------------------------------------------------------------------------


class TestMalformed:
    @pytest.mark.parametrize("text", ["screen and", "(min-width 600px)", "screen or (hover)", "(", "@@"])
    def test_parse_error(self, text):
        with pytest.raises(ConditionError):
            parse_media_query(text)

    def test_malformed_query_is_false(self):
        assert _holds("screen and") is False

    def test_malformed_entry_does_not_poison_list(self):
        assert _holds("screen and, screen") is True

    def test_error_carries_condition_text(self):
        with pytest.raises(ConditionError) as info:
            parse_media_query("screen and")
        assert info.value.condition == "screen and"
