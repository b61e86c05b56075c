# ui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel
)
from PySide6.QtCore import Qt, QTimer, Slot

from app.state import LifecycleState, TestResult
from app.validation import TestConfig, TestMode
from services.text_provider import TextProvider
from services.typing_engine import TypingEngine
from ui.session_summary import SessionSummary
from ui.test_ui import TestUI
from ui.widgets import SessionDialog

log = logging.getLogger(__name__)

DEFAULT_CONFIG = TestConfig.timed(60)


class MainWindow(QMainWindow):
    def __init__(self, config: TestConfig = DEFAULT_CONFIG, seed=None):
        super().__init__()
        self.setWindowTitle("Typepace")
        self.resize(1200, 720)
        self.provider = TextProvider(seed)

        self.engine = TypingEngine(self.provider.for_config(config), config, parent=self)
        self.engine.completed.connect(self._on_test_finished)
        self.engine.lifecycleChanged.connect(self._on_lifecycle_changed)

        root = QWidget(self)
        root_v = QVBoxLayout(root)
        root_v.setContentsMargins(16, 40, 16, 16)
        root_v.setSpacing(24)
        self._build_top_bar(root_v)

        self.test = TestUI(self.engine, self)
        test_h = QHBoxLayout()
        test_h.addStretch(1)
        test_h.addWidget(self.test, 1)
        test_h.addStretch(1)
        root_v.addLayout(test_h, 1)
        self.setCentralWidget(root)

        # keep keyboard focus on the typing area
        self.setFocusPolicy(Qt.NoFocus)
        self.test.setFocus()
        self._update_config_label()

    # ---------------- Top Bar ----------------
    def _build_top_bar(self, parent_layout):
        bar = QWidget(self)
        bar.setObjectName("TopBar")
        h = QHBoxLayout(bar)
        h.setContentsMargins(14, 16, 14, 16)
        h.setSpacing(10)

        self.btnSettings = QPushButton("Settings…", bar)
        self.btnSettings.clicked.connect(self._open_settings)
        self.btnRestart = QPushButton("Restart", bar)
        self.btnRestart.clicked.connect(self._restart)
        self.btnNew = QPushButton("New text", bar)
        self.btnNew.clicked.connect(self._new_test)
        for button in (self.btnSettings, self.btnRestart, self.btnNew):
            button.setObjectName("TopBtn")
            button.setFocusPolicy(Qt.NoFocus)
            h.addWidget(button)

        h.addStretch(1)
        self.lblConfig = QLabel("", bar)
        self.lblConfig.setObjectName("lblConfig")
        h.addWidget(self.lblConfig)

        parent_layout.addWidget(bar)

    def _update_config_label(self):
        cfg = self.engine.config()
        if cfg.mode is TestMode.TIME:
            bound = f"{cfg.time_limit_seconds} s"
        else:
            bound = f"{cfg.word_count} words"
        self.lblConfig.setText(f"{cfg.difficulty.value.capitalize()} · {bound}")

    # ---------------- Controls ----------------
    @Slot(str)
    def _on_lifecycle_changed(self, state: str):
        # settings can't change under a running test
        self.btnSettings.setEnabled(state != LifecycleState.RUNNING.value)

    def _open_settings(self):
        dlg = SessionDialog(self.engine.config(), self)
        if not dlg.exec() or dlg.config is None:
            self.test.setFocus()
            return
        cfg = dlg.config
        log.info("Settings changed: %s", cfg.model_dump(mode="json"))
        self.engine.new_test(self.provider.for_config(cfg), cfg)
        self._update_config_label()
        self.test.setFocus()

    def _restart(self):
        self.engine.restart()
        self.setWindowTitle("Typepace")
        self.test.setFocus()

    def _new_test(self):
        cfg = self.engine.config()
        self.engine.new_test(self.provider.for_config(cfg), cfg)
        self.setWindowTitle("Typepace")
        self.test.setFocus()

    # ---------------- Result ----------------
    @Slot(object)
    def _on_test_finished(self, result: TestResult):
        self.setWindowTitle(f"Typepace — {result.wpm} WPM")
        # open after the key event that finished the test has returned
        QTimer.singleShot(0, lambda: self._show_summary(result))

    def _show_summary(self, result: TestResult):
        dlg = SessionSummary(result, self.engine.wpm_history(), parent=self)
        dlg.exec()
        self.test.setFocus()
