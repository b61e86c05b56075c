"""Test configuration with Pydantic validation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from app.errors import ConfigurationError

TIME_LIMITS = (15, 30, 60, 120)
WORD_COUNTS = (10, 25, 50, 100)


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


class TestMode(str, Enum):
    """How a test decides it is over."""

    TIME = "time"
    WORDS = "words"


class TestConfig(BaseModel):
    """Settings for one typing test attempt."""

    difficulty: Difficulty = Field(
        default=Difficulty.MEDIUM, description="Vocabulary the text is drawn from"
    )
    mode: TestMode = Field(..., description="Duration or word-count bound")
    time_limit_seconds: Optional[int] = Field(
        default=None, gt=0, description="Time budget, required in time mode (s)"
    )
    word_count: Optional[int] = Field(
        default=None, gt=0, description="Number of words, required in words mode"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @model_validator(mode="after")
    def check_mode_fields(self):
        """Each mode needs its own bound and only that one."""
        if self.mode is TestMode.TIME:
            if self.time_limit_seconds is None:
                raise ValueError("time_limit_seconds is required in time mode")
            if self.word_count is not None:
                raise ValueError("word_count is only valid in words mode")
        else:
            if self.word_count is None:
                raise ValueError("word_count is required in words mode")
            if self.time_limit_seconds is not None:
                raise ValueError("time_limit_seconds is only valid in time mode")
        return self

    @classmethod
    def build(cls, **values) -> "TestConfig":
        """Validate `values`, raising ConfigurationError instead of pydantic's error."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(str(e)) from e

    @classmethod
    def timed(cls, seconds: int = 60, difficulty=Difficulty.MEDIUM) -> "TestConfig":
        return cls.build(difficulty=difficulty, mode=TestMode.TIME, time_limit_seconds=seconds)

    @classmethod
    def words(cls, count: int = 25, difficulty=Difficulty.MEDIUM) -> "TestConfig":
        return cls.build(difficulty=difficulty, mode=TestMode.WORDS, word_count=count)


def require_reference_text(text) -> str:
    if not isinstance(text, str) or len(text) < 1:
        raise ConfigurationError("reference text must be a non-empty string")
    return text


__all__ = [
    "Difficulty",
    "TestMode",
    "TestConfig",
    "TIME_LIMITS",
    "WORD_COUNTS",
    "require_reference_text",
]
