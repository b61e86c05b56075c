from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class CharState(str, Enum):
    PENDING = "pending"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    EXTRA = "extra"


class LifecycleState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


@dataclass(frozen=True)
class CharacterStatus:
    char: str
    state: CharState = CharState.PENDING


@dataclass(frozen=True)
class TypingStats:
    wpm: int = 0
    raw_wpm: int = 0
    accuracy: float = 0.0
    errors: int = 0
    correct_chars: int = 0
    incorrect_chars: int = 0
    total_chars: int = 0
    time_taken: int = 0


@dataclass(frozen=True)
class TestResult:
    """Stats frozen at the moment a test finished, plus what produced them."""

    stats: TypingStats
    difficulty: str
    mode: str
    timestamp: float

    @property
    def wpm(self) -> int:
        return self.stats.wpm


def pending_statuses(text: str) -> list[CharacterStatus]:
    return [CharacterStatus(ch) for ch in text]
