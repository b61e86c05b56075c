from __future__ import annotations
import math
from typing import List, Sequence

from app.state import CharState, CharacterStatus, TypingStats

# Shortest elapsed time the rates are computed over. Anything below is
# treated as this much so the first keystrokes don't produce huge spikes.
MIN_ELAPSED_SECONDS = 0.5
CHARS_PER_WORD = 5.0


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def classify(reference: str, typed: str) -> List[CharacterStatus]:
    """
    Full status sequence for `typed` against `reference`.
    One entry per reference char, then one `extra` entry per overtyped char.
    """
    out: List[CharacterStatus] = []
    for i, ch in enumerate(reference):
        if i < len(typed):
            state = CharState.CORRECT if typed[i] == ch else CharState.INCORRECT
        else:
            state = CharState.PENDING
        out.append(CharacterStatus(ch, state))
    for ch in typed[len(reference):]:
        out.append(CharacterStatus(ch, CharState.EXTRA))
    return out


def word_index(reference: str, typed_len: int) -> int:
    """Index of the word holding the first position not yet fully typed."""
    words = reference.split(" ")
    boundary = 0
    for i, w in enumerate(words):
        boundary += len(w) + 1
        if typed_len < boundary:
            return i
    return len(words) - 1


def compute_stats(
    statuses: Sequence[CharacterStatus],
    typed: str,
    elapsed_seconds: float,
    reference_len: int,
) -> TypingStats:
    typed_len = len(typed)
    correct = incorrect = 0
    for i, st in enumerate(statuses[:reference_len]):
        if i >= typed_len:
            break
        if st.state is CharState.CORRECT:
            correct += 1
        elif st.state is CharState.INCORRECT:
            incorrect += 1
    incorrect += sum(1 for st in statuses if st.state is CharState.EXTRA)

    accuracy = round_half_up(100.0 * correct / typed_len, 2) if typed_len else 0.0

    minutes = max(elapsed_seconds, MIN_ELAPSED_SECONDS) / 60.0
    raw_wpm = int(round_half_up(typed_len / CHARS_PER_WORD / minutes))
    wpm = int(round_half_up(correct / CHARS_PER_WORD / minutes))

    return TypingStats(
        wpm=wpm,
        raw_wpm=raw_wpm,
        accuracy=accuracy,
        errors=incorrect,
        correct_chars=correct,
        incorrect_chars=incorrect,
        total_chars=reference_len,
        time_taken=int(round_half_up(elapsed_seconds)),
    )


def empty_stats(reference_len: int) -> TypingStats:
    return TypingStats(total_chars=reference_len)


# (min wpm, min accuracy, label), best first
RATINGS = (
    (80, 95.0, "Outstanding!"),
    (60, 90.0, "Excellent!"),
    (40, 85.0, "Good!"),
    (25, 80.0, "Keep Practicing!"),
)


def performance_rating(wpm: float, accuracy: float) -> str:
    for min_wpm, min_acc, label in RATINGS:
        if wpm >= min_wpm and accuracy >= min_acc:
            return label
    return "Keep Going!"


def smooth(values: List[float], factor: float = 0.25) -> List[float]:
    out, last = [], None
    for v in values:
        last = v if last is None else last + factor * (v - last)
        out.append(last)
    return out
