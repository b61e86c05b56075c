# ui/widgets/session_dialog.py
from __future__ import annotations
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QComboBox, QMessageBox
)

from app.errors import ConfigurationError
from app.validation import Difficulty, TestConfig, TestMode, TIME_LIMITS, WORD_COUNTS


class SessionDialog(QDialog):
    def __init__(self, current: TestConfig | None = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Test Settings")
        self.setFixedSize(340, 260)
        self._config: TestConfig | None = None

        layout = QVBoxLayout(self)
        layout.setSpacing(14)

        layout.addWidget(QLabel("Difficulty:", self))
        self.cmb_difficulty = QComboBox(self)
        for d in Difficulty:
            self.cmb_difficulty.addItem(d.value.capitalize(), d.value)
        layout.addWidget(self.cmb_difficulty)

        layout.addWidget(QLabel("Mode:", self))
        self.cmb_mode = QComboBox(self)
        self.cmb_mode.addItem("Time", TestMode.TIME.value)
        self.cmb_mode.addItem("Words", TestMode.WORDS.value)
        self.cmb_mode.currentIndexChanged.connect(self._fill_amounts)
        layout.addWidget(self.cmb_mode)

        self.lbl_amount = QLabel("", self)
        layout.addWidget(self.lbl_amount)
        self.cmb_amount = QComboBox(self)
        layout.addWidget(self.cmb_amount)

        row = QHBoxLayout()
        btn_start = QPushButton("Start", self)
        btn_start.clicked.connect(self._on_accept)
        btn_cancel = QPushButton("Cancel", self)
        btn_cancel.clicked.connect(self.reject)
        row.addWidget(btn_start)
        row.addWidget(btn_cancel)

        layout.addStretch(1)
        layout.addLayout(row)

        if current is not None:
            self.cmb_difficulty.setCurrentIndex(self.cmb_difficulty.findData(current.difficulty.value))
            self.cmb_mode.setCurrentIndex(self.cmb_mode.findData(current.mode.value))
        self._fill_amounts()
        if current is not None:
            amount = current.time_limit_seconds or current.word_count
            idx = self.cmb_amount.findData(amount)
            if idx >= 0:
                self.cmb_amount.setCurrentIndex(idx)

    def _fill_amounts(self):
        self.cmb_amount.clear()
        if self.cmb_mode.currentData() == TestMode.TIME.value:
            self.lbl_amount.setText("Time limit:")
            for s in TIME_LIMITS:
                self.cmb_amount.addItem(f"{s} s", s)
        else:
            self.lbl_amount.setText("Word count:")
            for n in WORD_COUNTS:
                self.cmb_amount.addItem(f"{n} words", n)

    def _on_accept(self):
        mode = self.cmb_mode.currentData()
        amount = self.cmb_amount.currentData()
        bound = {"time_limit_seconds": amount} if mode == TestMode.TIME.value else {"word_count": amount}
        try:
            self._config = TestConfig.build(
                difficulty=self.cmb_difficulty.currentData(), mode=mode, **bound
            )
        except ConfigurationError as e:
            QMessageBox.warning(self, "Test Settings", str(e))
            return
        self.accept()

    @property
    def config(self) -> TestConfig | None:
        return self._config
