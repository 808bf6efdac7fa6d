from __future__ import annotations

from PyQt6.QtCore import QSize, Qt
from PyQt6.QtWidgets import (
    QCheckBox,
    QDialog,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from ticktoro.core.app_state import AppState
from ticktoro.core.assets import load_icon
from ticktoro.core.timer import MAX_MINUTES, MIN_MINUTES


class SettingsDialog(QDialog):
    """Modal editor for the session length and the finish sound."""

    def __init__(self, app_state: AppState, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.app_state = app_state
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMaximumWidth(300)

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        heading = QLabel("Settings")
        heading.setObjectName("Heading")
        header.addWidget(heading)
        header.addStretch()
        self.close_btn = QPushButton()
        self.close_btn.setObjectName("CloseButton")
        close_icon = load_icon("close.svg")
        if close_icon is not None:
            self.close_btn.setIcon(close_icon)
            self.close_btn.setIconSize(QSize(15, 15))
        else:
            self.close_btn.setText("x")
        self.close_btn.setCursor(Qt.CursorShape.PointingHandCursor)
        header.addWidget(self.close_btn)
        layout.addLayout(header)
        layout.addSpacing(20)

        minutes_row = QHBoxLayout()
        minutes_row.addWidget(QLabel("Minutes for focus:"))
        minutes_row.addSpacing(10)
        self.minutes_spin = QSpinBox()
        self.minutes_spin.setRange(MIN_MINUTES, MAX_MINUTES)
        self.minutes_spin.setSuffix(" min")
        self.minutes_spin.setValue(app_state.timer.configured_minutes)
        minutes_row.addWidget(self.minutes_spin)
        layout.addLayout(minutes_row)

        self.sound_check = QCheckBox("Play sound when a session ends")
        self.sound_check.setChecked(app_state.sound_enabled)
        layout.addWidget(self.sound_check)

        self.close_btn.clicked.connect(self.accept)
        self.minutes_spin.valueChanged.connect(self._on_minutes_changed)
        self.sound_check.toggled.connect(self.app_state.set_sound_enabled)
        self.app_state.duration_changed.connect(self._sync_minutes)

    def _on_minutes_changed(self, minutes: int) -> None:
        try:
            self.app_state.set_focus_minutes(minutes)
        except RuntimeError:
            self._sync_minutes(self.app_state.timer.configured_minutes)

    def _sync_minutes(self, minutes: int) -> None:
        if self.minutes_spin.value() == minutes:
            return
        self.minutes_spin.blockSignals(True)
        self.minutes_spin.setValue(minutes)
        self.minutes_spin.blockSignals(False)
