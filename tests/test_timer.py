"""Tests for HighResTimer."""

from app.timer import HighResTimer


class TestHighResTimer:
    """Test the QElapsedTimer-backed clock."""

    def test_zero_before_start(self):
        assert HighResTimer().elapsed_sec() == 0.0

    def test_counts_after_start(self):
        clock = HighResTimer()
        clock.start()
        first = clock.elapsed_sec()
        assert first >= 0.0
        assert clock.elapsed_sec() >= first

    def test_invalidate_resets_to_zero(self):
        clock = HighResTimer()
        clock.start()
        clock.invalidate()
        assert clock.elapsed_sec() == 0.0
