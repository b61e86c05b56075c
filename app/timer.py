from PySide6.QtCore import QElapsedTimer


class HighResTimer:
    """Monotonic stopwatch the engine reads elapsed test time from."""

    def __init__(self):
        self.t = QElapsedTimer()

    def start(self):
        self.t.start()

    def elapsed_sec(self) -> float:
        if not self.t.isValid():
            return 0.0
        return max(0.0, self.t.elapsed() / 1000.0)

    def invalidate(self):
        self.t.invalidate()
