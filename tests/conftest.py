"""Shared test fixtures for Typepace tests."""

import os

# widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from app import validation
from services.typing_engine import TypingEngine


class ManualTimer:
    """Stand-in for HighResTimer whose time only moves when told to."""

    def __init__(self):
        self.now = 0.0
        self._started_at = None

    def start(self):
        self._started_at = self.now

    def invalidate(self):
        self._started_at = None

    def is_started(self) -> bool:
        return self._started_at is not None

    def elapsed_sec(self) -> float:
        if self._started_at is None:
            return 0.0
        return self.now - self._started_at

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture(scope="session", autouse=True)
def qt_app(qapp):
    """Timers and widgets need an application instance to exist."""
    return qapp


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def completed():
    return []


@pytest.fixture
def make_engine(timer, completed):
    """Build an engine on the manual timer that records completions."""
    engines = []

    def _make(text="the cat sat", config=None, on_complete=None):
        config = config or validation.TestConfig.timed(60)
        engine = TypingEngine(
            text, config, timer=timer, on_complete=on_complete or completed.append
        )
        engines.append(engine)
        return engine

    yield _make

    # stop the periodic tasks and release the QObjects before the next test
    for engine in engines:
        engine.restart()
        engine.deleteLater()


@pytest.fixture
def type_text(timer):
    """Type `text` one key at a time, advancing the timer `step` seconds before each key."""

    def _type(engine, text, step=0.0):
        for ch in text:
            timer.advance(step)
            engine.apply_character_event(ch)

    return _type
