"""
Qt window for the charset password generator.

Layout (top to bottom):
- password field with regenerate (R) and copy (C) buttons
- strength and entropy readout
- length slider
- one toggle button per charset
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .config import DEFAULT_CONFIG, GeneratorConfig, setup_logging
from .errors import PasswordGenError
from .session import PasswordSession

logger = logging.getLogger(__name__)

DARK_COLOR = "#262626"
WHITE_COLOR = "#ffffff"
LIME_COLOR = "#04ff4a"

VERTICAL_WIDGET_SPACING = 20
HORIZONTAL_WIDGET_SPACING = 15


class GeneratorWindow(QWidget):
    """
    Main window: every widget reads from and writes to one PasswordSession.
    """

    def __init__(
        self,
        session: PasswordSession | None = None,
        config: GeneratorConfig | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.config = config or (session.config if session else DEFAULT_CONFIG)
        self.session = session or PasswordSession(self.config)

        self.setWindowTitle(self.config.window_title)
        self.resize(410, 223)

        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)
        self._copied_password: str | None = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(15, 15, 15, 15)
        layout.addLayout(self._build_password_row())
        layout.addSpacing(35)
        layout.addLayout(self._build_readout_row())
        layout.addSpacing(VERTICAL_WIDGET_SPACING)
        layout.addLayout(self._build_slider_row())
        layout.addSpacing(VERTICAL_WIDGET_SPACING)
        layout.addLayout(self._build_charset_row())
        layout.addWidget(self._build_status_label())

        self._apply_base_style()
        self._refresh()

    # -- rows --

    def _build_password_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(HORIZONTAL_WIDGET_SPACING)

        self.password_field = QLineEdit()
        self.password_field.setPlaceholderText("Your password")
        font = self.password_field.font()
        font.setPointSize(16)
        self.password_field.setFont(font)
        self.password_field.setFixedHeight(35)

        self.regenerate_button = QPushButton("R")
        self.regenerate_button.setToolTip("Generate a new password")
        self.regenerate_button.setFixedSize(35, 35)
        self.regenerate_button.clicked.connect(self.on_regenerate_clicked)

        self.copy_button = QPushButton("C")
        self.copy_button.setToolTip("Copy to clipboard")
        self.copy_button.setFixedSize(35, 35)
        self.copy_button.clicked.connect(self.copy_to_clipboard)

        row.addWidget(self.password_field, 1)
        row.addWidget(self.regenerate_button)
        row.addWidget(self.copy_button)
        return row

    def _build_readout_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        self.strength_label = QLabel()
        self.entropy_label = QLabel()
        row.addWidget(self.strength_label)
        row.addStretch()
        row.addWidget(self.entropy_label)
        return row

    def _build_slider_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(HORIZONTAL_WIDGET_SPACING)

        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(self.config.min_length, self.config.max_length)
        self.length_slider.setSingleStep(1)
        self.length_slider.setValue(self.session.length)

        self.length_value_label = QLabel(str(self.session.length))
        self.length_value_label.setFixedWidth(32)
        self.length_value_label.setAlignment(Qt.AlignCenter)

        self.length_slider.valueChanged.connect(self.on_length_changed)

        row.addWidget(self.length_slider, 1)
        row.addWidget(self.length_value_label)
        return row

    def _build_charset_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(HORIZONTAL_WIDGET_SPACING)

        # Position in this list == registry index.
        self.charset_buttons: list[QPushButton] = []
        for index, entry in enumerate(self.session.registry):
            button = QPushButton(entry.label)
            button.setCheckable(True)
            button.setFixedSize(70, 35)
            button.clicked.connect(
                lambda _checked=False, i=index: self.on_charset_clicked(i)
            )
            self.charset_buttons.append(button)
            row.addWidget(button)

        return row

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    # -- actions --

    def on_regenerate_clicked(self) -> None:
        try:
            self.session.regenerate()
        except PasswordGenError as exc:
            self._show_error(f"Error while generating password:\n{exc}")
            return
        self._refresh()

    def on_charset_clicked(self, index: int) -> None:
        try:
            self.session.toggle(index)
        except PasswordGenError as exc:
            self._show_error(f"Error while generating password:\n{exc}")
        self._refresh()

    def on_length_changed(self, value: int) -> None:
        length = self.session.set_length(value)
        self.length_value_label.setText(str(length))

    def copy_to_clipboard(self) -> None:
        password = self.password_field.text()
        if not password:
            self._show_error("No password to copy. Generate one first.")
            return

        QGuiApplication.clipboard().setText(password)
        self._copied_password = password

        if self.config.clipboard_clear_ms > 0:
            self._clipboard_timer.start(self.config.clipboard_clear_ms)
            self.status_label.setText("Copied (auto-clear in a few seconds).")
        else:
            self.status_label.setText("Copied to clipboard.")

    def _on_clipboard_timeout(self) -> None:
        """
        Clear clipboard if it still holds the password we placed.
        """
        if self._copied_password is None:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._copied_password:
            cb.clear()
            self.status_label.setText("Clipboard cleared.")

        self._copied_password = None

    # -- rendering --

    def _refresh(self) -> None:
        snap = self.session.snapshot()

        if self.password_field.text() != snap.password:
            self.password_field.setText(snap.password)
        self.strength_label.setText(f"Strength: {snap.strength}")
        self.entropy_label.setText(f"Entropy: {snap.entropy_bits:.2f} bit")

        for button, (_label, enabled) in zip(self.charset_buttons, snap.charsets):
            button.setChecked(enabled)
            color = LIME_COLOR if enabled else WHITE_COLOR
            button.setStyleSheet(f"color: {color}; border: 1px solid {color};")

    def _show_error(self, message: str) -> None:
        logger.warning("%s", message)
        self.status_label.setText(message)
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.exec()

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            f"""
            QWidget {{
                color: {WHITE_COLOR};
                background-color: {DARK_COLOR};
            }}
            QLineEdit {{
                border: 1px solid {WHITE_COLOR};
                padding: 2px 6px;
            }}
            QPushButton {{
                border: 1px solid {WHITE_COLOR};
                font-size: 16pt;
            }}
            QSlider::sub-page:horizontal {{
                background: {LIME_COLOR};
            }}
            """
        )


def main() -> None:
    setup_logging()
    app = QApplication(sys.argv)
    window = GeneratorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
