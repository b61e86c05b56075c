# services/typing_engine.py
from __future__ import annotations
import logging
import time
from typing import Callable, List, Optional, Tuple

from PySide6.QtCore import QObject, Signal

from app.calculation import classify, compute_stats, empty_stats, word_index
from app.state import (
    CharacterStatus,
    LifecycleState,
    TestResult,
    TypingStats,
    pending_statuses,
)
from app.timer import HighResTimer
from app.validation import TestConfig, TestMode, require_reference_text
from core.chrono import PeriodicTask

log = logging.getLogger(__name__)

BACKSPACE = "<BACKSPACE>"

TICK_MS = 100
STATS_MS = 800


class TypingEngine(QObject):
    """
    Owns one typing test attempt: the typed buffer, per-character statuses,
    lifecycle and elapsed time. Statuses are re-derived in full on every
    input event.

    Lifecycle: not_started -> running on the first accepted input,
    running -> finished when the time limit passes (time mode) or the buffer
    reaches the text length (words mode). finished only leaves through
    restart() or new_test().
    """

    statusesChanged = Signal(object)   # list[CharacterStatus]
    statsChanged = Signal(object)      # TypingStats
    lifecycleChanged = Signal(str)
    elapsedChanged = Signal(float)
    completed = Signal(object)         # TestResult

    def __init__(
        self,
        reference_text: str,
        config: TestConfig,
        timer=None,
        on_complete: Optional[Callable[[TestResult], None]] = None,
        tick_ms: int = TICK_MS,
        stats_ms: int = STATS_MS,
        parent=None,
    ):
        super().__init__(parent)
        self.on_complete = on_complete
        self._timer = timer if timer is not None else HighResTimer()
        self._attempt = 0

        self._tick_task = PeriodicTask(tick_ms, self._on_tick_timer, parent=self)
        self._stats_task = PeriodicTask(stats_ms, self._on_stats_timer, parent=self)

        self._text = ""
        self._config = config
        self._typed = ""
        self._statuses: List[CharacterStatus] = []
        self._word_index = 0
        self._state = LifecycleState.NOT_STARTED
        self._elapsed = 0.0
        self._live = empty_stats(0)
        self._result: Optional[TestResult] = None
        self._history: List[Tuple[float, int]] = []

        self.configure(reference_text, config)

    # ---------------- Lifecycle ----------------
    def configure(self, reference_text: str, config: TestConfig):
        require_reference_text(reference_text)
        self._reset(reference_text, config)

    def restart(self):
        """Same text, fresh attempt."""
        self._reset(self._text, self._config)

    def new_test(self, reference_text: str, config: Optional[TestConfig] = None):
        require_reference_text(reference_text)
        self._reset(reference_text, config or self._config)

    def _reset(self, text: str, config: TestConfig):
        # invalidate before anything else so no queued tick touches the new attempt
        self._attempt += 1
        self._tick_task.stop()
        self._stats_task.stop()
        self._timer.invalidate()

        self._text = text
        self._config = config
        self._typed = ""
        self._statuses = pending_statuses(text)
        self._word_index = 0
        self._state = LifecycleState.NOT_STARTED
        self._elapsed = 0.0
        self._live = empty_stats(len(text))
        self._result = None
        self._history.clear()
        log.info(
            "Test ready: %d chars, mode=%s, difficulty=%s",
            len(text), config.mode.value, config.difficulty.value,
        )

        self.lifecycleChanged.emit(self._state.value)
        self.statusesChanged.emit(self.character_statuses())
        self.elapsedChanged.emit(0.0)
        self.statsChanged.emit(self._live)

    def _start(self):
        self._state = LifecycleState.RUNNING
        self._timer.start()
        self._tick_task.start(self._attempt)
        self._stats_task.start(self._attempt)
        log.info("Test started")
        self.lifecycleChanged.emit(self._state.value)

    def _finish(self):
        if self._state is not LifecycleState.RUNNING:
            return
        self._attempt += 1
        self._tick_task.stop()
        self._stats_task.stop()

        self._elapsed = max(self._elapsed, self._timer.elapsed_sec())
        self._state = LifecycleState.FINISHED
        stats = self.query_stats()
        self._live = stats
        self._result = TestResult(
            stats=stats,
            difficulty=self._config.difficulty.value,
            mode=self._config.mode.value,
            timestamp=time.time(),
        )
        log.info(
            "Test finished: %d WPM, %.2f%% accuracy, %.1f s",
            stats.wpm, stats.accuracy, self._elapsed,
        )

        self.lifecycleChanged.emit(self._state.value)
        self.statsChanged.emit(stats)
        self.completed.emit(self._result)
        if self.on_complete:
            try:
                self.on_complete(self._result)
            except Exception:
                log.exception("Error in test complete callback")

    # ---------------- Input ----------------
    def apply_character_event(self, key) -> bool:
        """
        Apply one key: a printable character (space included) or BACKSPACE.
        Returns False when the key was ignored.
        """
        if self._state is LifecycleState.FINISHED:
            log.debug("Ignoring key after finish")
            return False
        if key == BACKSPACE:
            if not self._typed:
                return False
            value = self._typed[:-1]
        elif isinstance(key, str) and len(key) == 1 and key.isprintable():
            value = self._typed + key
        else:
            log.debug("Ignoring key payload %r", key)
            return False
        self._accept(value)
        return True

    def apply_full_replace(self, value) -> bool:
        """Replace the whole typed buffer, e.g. on paste."""
        if self._state is LifecycleState.FINISHED:
            log.debug("Ignoring input after finish")
            return False
        if not isinstance(value, str):
            log.debug("Ignoring input payload %r", value)
            return False
        self._accept(value)
        return True

    handle_character_event = apply_character_event
    handle_full_input = apply_full_replace

    def _accept(self, value: str):
        if self._state is LifecycleState.NOT_STARTED:
            self._start()

        self._typed = value
        self._statuses = classify(self._text, value)
        self._word_index = word_index(self._text, len(value))
        self._elapsed = max(self._elapsed, self._timer.elapsed_sec())
        self.statusesChanged.emit(self.character_statuses())

        if self._config.mode is TestMode.WORDS and len(value) >= len(self._text):
            self._finish()

    # ---------------- Timers ----------------
    def tick(self):
        if self._state is not LifecycleState.RUNNING:
            return
        self._elapsed = max(self._elapsed, self._timer.elapsed_sec())
        self.elapsedChanged.emit(self._elapsed)
        limit = self._config.time_limit_seconds
        if self._config.mode is TestMode.TIME and self._elapsed >= limit:
            self._finish()

    def refresh_live_stats(self) -> TypingStats:
        """Recompute the displayed snapshot and record a WPM history sample."""
        if self._state is LifecycleState.RUNNING:
            self._live = self.query_stats()
            self._history.append((self._elapsed, self._live.wpm))
            self.statsChanged.emit(self._live)
        return self._live

    def _on_tick_timer(self, token: int):
        if token != self._attempt:
            return
        self.tick()

    def _on_stats_timer(self, token: int):
        if token != self._attempt:
            return
        self.refresh_live_stats()

    # ---------------- Queries ----------------
    def query_stats(self) -> TypingStats:
        return compute_stats(self._statuses, self._typed, self._elapsed, len(self._text))

    def live_stats(self) -> TypingStats:
        return self._live

    def character_statuses(self) -> List[CharacterStatus]:
        return list(self._statuses)

    def current_word_index(self) -> int:
        return self._word_index

    def lifecycle_state(self) -> LifecycleState:
        return self._state

    def elapsed_time(self) -> float:
        return self._elapsed

    def input_buffer(self) -> str:
        return self._typed

    def reference_text(self) -> str:
        return self._text

    def config(self) -> TestConfig:
        return self._config

    def result(self) -> Optional[TestResult]:
        return self._result

    def wpm_history(self) -> List[Tuple[float, int]]:
        return list(self._history)

    def timers_active(self) -> bool:
        return self._tick_task.is_active() or self._stats_task.is_active()
