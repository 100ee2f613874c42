"""Settings window (Qt) for cyclecomplete."""
import logging
from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QGroupBox, QLabel, QCheckBox, QLineEdit, QPushButton,
    QFormLayout, QStatusBar,
)

from cyclecomplete.tokenizer import DEFAULT_WORD_SEPARATORS

logger = logging.getLogger(__name__)


class SettingsWindow(QMainWindow):
    """Settings window for separators, hotkeys and logging."""

    def __init__(self, config, editor=None, parent=None):
        super().__init__(parent)
        self.config = config
        self.editor = editor

        self.setWindowTitle("cyclecomplete — Settings")
        self.setMinimumWidth(420)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        # === Words ===
        words_group = QGroupBox("Words")
        words_layout = QFormLayout(words_group)

        self._separators_input = QLineEdit(config.word_separators)
        self._separators_input.setPlaceholderText(DEFAULT_WORD_SEPARATORS)
        words_layout.addRow("Word separators:", self._separators_input)

        restore_btn = QPushButton("Restore defaults")
        restore_btn.clicked.connect(self._restore_separators)
        words_layout.addRow(restore_btn)

        layout.addWidget(words_group)

        # === Hotkeys ===
        hotkey_group = QGroupBox("Hotkeys")
        hotkey_layout = QFormLayout(hotkey_group)

        self._hotkey_next = QLineEdit(config.hotkey_next)
        hotkey_layout.addRow("Next match:", self._hotkey_next)

        self._hotkey_previous = QLineEdit(config.hotkey_previous)
        hotkey_layout.addRow("Previous match:", self._hotkey_previous)

        layout.addWidget(hotkey_group)

        # === Behaviour ===
        adv_group = QGroupBox("Behaviour")
        adv_layout = QFormLayout(adv_group)

        self._reset_cb = QCheckBox("Reset completion when the cursor moves")
        self._reset_cb.setChecked(config.reset_on_cursor_move)
        adv_layout.addRow(self._reset_cb)

        self._debug_cb = QCheckBox("Enable debug logging")
        self._debug_cb.setChecked(config.debug_logging)
        adv_layout.addRow(self._debug_cb)

        layout.addWidget(adv_group)

        # === Status ===
        self._status_label = QLabel()
        layout.addWidget(self._status_label)

        # === Buttons ===
        btn_row = QHBoxLayout()
        save_btn = QPushButton("Save")
        save_btn.clicked.connect(self._save)
        btn_row.addWidget(save_btn)

        close_btn = QPushButton("Close")
        close_btn.clicked.connect(self.close)
        btn_row.addWidget(close_btn)

        layout.addLayout(btn_row)

        self._statusbar = QStatusBar()
        self.setStatusBar(self._statusbar)

        self.refresh()

    def refresh(self):
        """Refresh displayed session status."""
        if self.editor is None:
            self._status_label.setText("No editor attached")
            return
        session = self.editor.autocomplete.session
        if session.needle:
            self._status_label.setText(
                f"Needle: {session.needle!r} | Matches: {len(session.matches)} | "
                f"Phase: {session.phase.value}")
        else:
            self._status_label.setText("No completion in progress")

    def _restore_separators(self):
        self._separators_input.setText(DEFAULT_WORD_SEPARATORS)

    def _save(self):
        debug = self._debug_cb.isChecked()
        self.config.update({
            "word_separators": self._separators_input.text(),
            "hotkey_next": self._hotkey_next.text(),
            "hotkey_previous": self._hotkey_previous.text(),
            "reset_on_cursor_move": self._reset_cb.isChecked(),
            "debug_logging": debug,
        })
        logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)
        logger.debug("Settings saved")
        if self.editor is not None:
            self.editor.rebind_shortcuts()
        self._statusbar.showMessage("Settings saved.", 3000)
        self.refresh()
