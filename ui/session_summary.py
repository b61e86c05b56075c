# ui/session_summary.py
from __future__ import annotations
from typing import Sequence, Tuple

import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton

from app.calculation import performance_rating, smooth
from app.state import TestResult
from utils.graph_helper import setup_wpm_plot, update_curve

RATING_COLORS = {
    "Outstanding!": "#eab308",
    "Excellent!": "#22c55e",
    "Good!": "#3b82f6",
    "Keep Practicing!": "#f97316",
    "Keep Going!": "#6b7280",
}


class SessionSummary(QDialog):
    """Final stats, a rating, and the WPM samples taken while the test ran."""

    def __init__(
        self,
        result: TestResult,
        history: Sequence[Tuple[float, int]] = (),
        parent=None,
    ):
        super().__init__(parent)
        self.setWindowTitle("Test Complete")
        self.resize(720, 460)
        stats = result.stats

        root = QVBoxLayout(self)

        rating = performance_rating(stats.wpm, stats.accuracy)
        lbl_rating = QLabel(rating, self)
        lbl_rating.setAlignment(Qt.AlignCenter)
        lbl_rating.setStyleSheet(
            f"font-size: 32px; font-weight: bold; color: {RATING_COLORS[rating]};"
        )
        root.addWidget(lbl_rating)

        row = QHBoxLayout()
        for text in (
            f"WPM: {stats.wpm}",
            f"Raw: {stats.raw_wpm}",
            f"Accuracy: {stats.accuracy:.2f}%",
            f"Errors: {stats.errors}",
            f"Time: {stats.time_taken}s",
        ):
            row.addWidget(QLabel(text, self))
        root.addLayout(row)

        root.addWidget(QLabel(
            f"{stats.correct_chars} correct / {stats.incorrect_chars} incorrect"
            f" of {stats.total_chars} chars  ·  {result.difficulty}, {result.mode} mode",
            self,
        ))

        plot = pg.PlotWidget()
        curve = setup_wpm_plot(plot, "#c8c8ff")
        if history:
            times = [float(t) for t, _ in history]
            wpms = [float(w) for _, w in history]
            update_curve(curve, times, smooth(wpms))
        root.addWidget(plot, stretch=1)

        btn = QPushButton("OK", self)
        btn.clicked.connect(self.accept)
        root.addWidget(btn)
