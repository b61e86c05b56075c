"""Tests for app.validation module."""

import pytest
from pydantic import ValidationError

from app import validation
from app.errors import ConfigurationError
from app.validation import Difficulty, require_reference_text


class TestConfigModel:
    """Test TestConfig validation."""

    def test_timed(self):
        cfg = validation.TestConfig.timed(30, Difficulty.HARD)
        assert cfg.mode is validation.TestMode.TIME
        assert cfg.time_limit_seconds == 30
        assert cfg.word_count is None
        assert cfg.difficulty is Difficulty.HARD

    def test_words(self):
        cfg = validation.TestConfig.words(50)
        assert cfg.mode is validation.TestMode.WORDS
        assert cfg.word_count == 50
        assert cfg.time_limit_seconds is None

    def test_string_values_coerced(self):
        cfg = validation.TestConfig(difficulty="expert", mode="words", word_count=10)
        assert cfg.difficulty is Difficulty.EXPERT
        assert cfg.mode is validation.TestMode.WORDS

    def test_time_mode_requires_limit(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="time")

    def test_words_mode_requires_count(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="words")

    def test_time_mode_rejects_word_count(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="time", time_limit_seconds=60, word_count=10)

    def test_words_mode_rejects_time_limit(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="words", word_count=10, time_limit_seconds=60)

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_bounds_rejected(self, value):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="time", time_limit_seconds=value)
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="words", word_count=value)

    def test_unknown_difficulty_rejected(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(difficulty="insane", mode="time", time_limit_seconds=60)

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            validation.TestConfig(mode="time", time_limit_seconds=60, language="en")

    def test_frozen(self):
        cfg = validation.TestConfig.timed(60)
        with pytest.raises(ValidationError):
            cfg.time_limit_seconds = 10

    def test_build_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            validation.TestConfig.build(mode="words")

    def test_offered_options_are_valid(self):
        for seconds in validation.TIME_LIMITS:
            validation.TestConfig.timed(seconds)
        for count in validation.WORD_COUNTS:
            validation.TestConfig.words(count)


class TestRequireReferenceText:
    """Test require_reference_text."""

    def test_accepts_text(self):
        assert require_reference_text("a") == "a"

    @pytest.mark.parametrize("value", ["", None, 5])
    def test_rejects_empty_or_non_string(self, value):
        with pytest.raises(ConfigurationError):
            require_reference_text(value)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            require_reference_text("")
