from __future__ import annotations

import logging
import time

from PyQt6.QtCore import QRectF, QSize, QTimer, Qt
from PyQt6.QtGui import QAction, QColor, QKeySequence, QPainter, QPen
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ticktoro.core.app_state import AppState
from ticktoro.core.assets import load_icon
from ticktoro.core.timer import StatusLabel, TimerSnapshot, TimerState
from ticktoro.ui.settings_dialog import SettingsDialog
from ticktoro.ui.styles import FOCUS_PALETTE, Palette, apply_theme, palette_for


logger = logging.getLogger(__name__)

FRAME_INTERVAL_MS = 33
EXPIRED_RESET_DELAY_MS = 900


class DialWidget(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(260, 260)
        self._progress = 0.0
        self._text = "25\n00"
        self._palette = FOCUS_PALETTE

    def set_state(self, progress: float, text: str, palette: Palette) -> None:
        self._progress = progress
        self._text = text
        self._palette = palette
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        side = min(self.width(), self.height()) - 16
        circle = QRectF((self.width() - side) / 2, (self.height() - side) / 2, side, side)

        painter.setPen(QPen(QColor(self._palette.secondary), 8))
        painter.drawEllipse(circle)
        painter.setPen(QPen(QColor(self._palette.primary), 8, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
        span = int(-360 * 16 * self._progress)
        painter.drawArc(circle, 90 * 16, span)

        font = painter.font()
        font.setPixelSize(int(side * 0.3))
        painter.setFont(font)
        painter.setPen(QColor("#471515"))
        painter.drawText(circle, Qt.AlignmentFlag.AlignCenter, self._text)


class StatusBadge(QFrame):
    """Pill with the brain/cup icon and the current status text."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("StatusBadge")
        self.setFixedHeight(38)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(12, 0, 20, 0)
        layout.setSpacing(2)
        self.icon_label = QLabel()
        self.text_label = QLabel()
        self.text_label.setObjectName("StatusText")
        layout.addWidget(self.icon_label)
        layout.addWidget(self.text_label)

    def set_status(self, label: StatusLabel | None) -> None:
        if label is None:
            self.hide()
            return
        icon = load_icon("cup.svg" if label == StatusLabel.PAUSED else "brain.svg")
        if icon is not None:
            self.icon_label.setPixmap(icon.pixmap(QSize(15, 15)))
        self.text_label.setText(label.value)
        self.show()


class MainWindow(QMainWindow):
    def __init__(self, app_state: AppState) -> None:
        super().__init__()
        self.setWindowTitle("Ticktoro")
        self.setFixedSize(600, 500)

        self.app_state = app_state
        self._palette: Palette | None = None

        self._build_ui()
        self._connect_signals()

        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._on_frame)
        self.frame_timer.start()

        self._render(self.app_state.snapshot)

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root_layout = QVBoxLayout(central)
        root_layout.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        root_layout.addSpacing(40)

        badge_row = QHBoxLayout()
        badge_row.addStretch()
        self.badge = StatusBadge()
        badge_row.addWidget(self.badge)
        badge_row.addStretch()
        root_layout.addLayout(badge_row)

        self.dial = DialWidget()
        root_layout.addWidget(self.dial, 1)
        root_layout.addSpacing(30)

        controls = QHBoxLayout()
        controls.addStretch()
        self.settings_btn = self._icon_button("dots.svg", "...", QSize(20, 20))
        self.play_btn = self._icon_button("play.svg", "Start", QSize(20, 20))
        self.play_btn.setObjectName("PrimaryButton")
        self.stop_btn = self._icon_button("stop.svg", "Stop", QSize(30, 30))
        self.stop_btn.setObjectName("StopButton")
        controls.addWidget(self.settings_btn)
        controls.addWidget(self.play_btn)
        controls.addWidget(self.stop_btn)
        controls.addStretch()
        root_layout.addLayout(controls)
        root_layout.addSpacing(30)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.toggle_session)
        self.addAction(space_action)

    def _icon_button(self, icon_name: str, fallback_text: str, icon_size: QSize) -> QPushButton:
        button = QPushButton()
        icon = load_icon(icon_name)
        if icon is not None:
            button.setIcon(icon)
            button.setIconSize(icon_size)
        else:
            button.setText(fallback_text)
        button.setCursor(Qt.CursorShape.PointingHandCursor)
        return button

    def _connect_signals(self) -> None:
        self.settings_btn.clicked.connect(self.open_settings)
        self.play_btn.clicked.connect(self.toggle_session)
        self.stop_btn.clicked.connect(self.stop_session)
        self.app_state.state_changed.connect(self._render)
        self.app_state.session_expired.connect(self._on_session_expired)

    def toggle_session(self) -> None:
        try:
            self.app_state.toggle(time.monotonic())
        except RuntimeError:
            return

    def stop_session(self) -> None:
        self.app_state.stop()

    def open_settings(self) -> None:
        if self.app_state.timer.state != TimerState.IDLE:
            return
        dialog = SettingsDialog(self.app_state, self)
        apply_theme(dialog, self._palette or FOCUS_PALETTE)
        dialog.exec()

    def _on_frame(self) -> None:
        self.app_state.advance(time.monotonic())

    def _on_session_expired(self) -> None:
        logger.info("Focus session finished")
        if self.app_state.sound_enabled:
            QApplication.beep()
        QTimer.singleShot(EXPIRED_RESET_DELAY_MS, self._reset_after_expiry)

    def _reset_after_expiry(self) -> None:
        if self.app_state.timer.state == TimerState.EXPIRED:
            self.app_state.stop()

    def _render(self, snapshot: TimerSnapshot) -> None:
        palette = palette_for(snapshot.status_label)
        if palette != self._palette:
            self._palette = palette
            apply_theme(self, palette)

        self.badge.set_status(snapshot.status_label)
        self.dial.set_state(snapshot.progress, self.app_state.display_text(), palette)

        running = snapshot.state == TimerState.RUNNING
        play_icon = load_icon("pause.svg" if running else "play.svg")
        if play_icon is not None:
            self.play_btn.setIcon(play_icon)
        else:
            self.play_btn.setText("Pause" if running else "Start")
        self.play_btn.setToolTip("Pause" if running else "Start")

        idle = snapshot.state == TimerState.IDLE
        self.settings_btn.setEnabled(idle)
        self.settings_btn.setCursor(Qt.CursorShape.PointingHandCursor if idle else Qt.CursorShape.ForbiddenCursor)
        self.stop_btn.setVisible(not idle)

    def closeEvent(self, event) -> None:  # noqa: N802
        if self.app_state.timer.is_active():
            answer = QMessageBox.question(
                self,
                "Exit",
                "A focus session is active. Exit anyway?",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            )
            if answer == QMessageBox.StandardButton.Yes:
                self.app_state.stop()
                event.accept()
            else:
                event.ignore()
            return
        event.accept()
