# core/chrono.py
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal


class PeriodicTask(QObject):
    """
    A QTimer that calls `callback(token)` every `interval_ms` while active.
    `token` is whatever was passed to start(); the owner compares it with its
    current one and drops calls from an earlier attempt.
    """

    started = Signal()
    stopped = Signal()

    def __init__(self, interval_ms: int, callback: Callable[[int], None], parent=None):
        super().__init__(parent)
        self._callback = callback
        self._token: Optional[int] = None

        self._tick = QTimer(self)
        self._tick.setInterval(interval_ms)
        self._tick.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._tick.interval()

    @property
    def token(self) -> Optional[int]:
        return self._token

    def is_active(self) -> bool:
        return self._token is not None

    def start(self, token: int):
        self._token = token
        self._tick.start()
        self.started.emit()

    def stop(self):
        if self._token is None:
            return
        self._token = None
        self._tick.stop()
        self.stopped.emit()

    def fire(self):
        """Run one tick now, as the timer would."""
        self._on_timeout()

    def _on_timeout(self):
        token = self._token
        if token is None:
            return
        self._callback(token)
