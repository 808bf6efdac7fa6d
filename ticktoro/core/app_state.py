from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from ticktoro.core.errors import InvalidDuration
from ticktoro.core.timer import DEFAULT_MINUTES, SessionTimer, TimerSnapshot, TimerState
from ticktoro.data.storage import Storage


logger = logging.getLogger(__name__)


def format_stacked_time(seconds: int) -> str:
    """Formats seconds as minutes over seconds, e.g. ``"25\\n00"``."""
    seconds = max(0, int(seconds))
    return f"{seconds // 60:02d}\n{seconds % 60:02d}"


class AppState(QObject):
    state_changed = pyqtSignal(object)
    duration_changed = pyqtSignal(int)
    session_expired = pyqtSignal()
    settings_changed = pyqtSignal(str, object)

    def __init__(self, timer: SessionTimer | None = None) -> None:
        super().__init__()
        self.timer = timer if timer is not None else SessionTimer()
        self.sound_enabled: bool = True
        self._storage: Storage | None = None
        self._last_snapshot: TimerSnapshot = self.timer.snapshot()

    @property
    def snapshot(self) -> TimerSnapshot:
        return self._last_snapshot

    def load_from_storage(self, storage: Storage) -> None:
        self._storage = storage
        minutes = storage.get_focus_minutes()
        try:
            self.timer.set_duration(minutes)
        except InvalidDuration:
            logger.warning("Ignoring stored session length %r, using %d min", minutes, DEFAULT_MINUTES)
            self.timer.set_duration(DEFAULT_MINUTES)
        self.sound_enabled = storage.get_sound_enabled()
        self.duration_changed.emit(self.timer.configured_minutes)
        self.settings_changed.emit("sound_enabled", self.sound_enabled)
        self._publish()

    def set_focus_minutes(self, minutes: int) -> None:
        self.timer.set_duration(minutes)
        if self._storage:
            self._storage.set_focus_minutes(minutes)
        self.duration_changed.emit(minutes)
        self.settings_changed.emit("focus_minutes", minutes)
        self._publish()

    def set_sound_enabled(self, enabled: bool) -> None:
        self.sound_enabled = bool(enabled)
        if self._storage:
            self._storage.set_sound_enabled(self.sound_enabled)
        self.settings_changed.emit("sound_enabled", self.sound_enabled)

    def start(self, now: float | None = None) -> None:
        self.timer.start(now)
        self._publish()

    def pause(self) -> None:
        self.timer.pause()
        self._publish()

    def resume(self, now: float | None = None) -> None:
        self.timer.resume(now)
        self._publish()

    def stop(self) -> None:
        self.timer.stop()
        self._publish()

    def toggle(self, now: float | None = None) -> None:
        state = self.timer.state
        if state == TimerState.RUNNING:
            self.pause()
        elif state == TimerState.PAUSED:
            self.resume(now)
        else:
            if state == TimerState.EXPIRED:
                self.timer.stop()
            self.start(now)

    def advance(self, now: float | None = None) -> TimerSnapshot:
        previous = self._last_snapshot.state
        snapshot = self.timer.advance(now)
        if snapshot != self._last_snapshot:
            self._last_snapshot = snapshot
            self.state_changed.emit(snapshot)
        if previous == TimerState.RUNNING and snapshot.state == TimerState.EXPIRED:
            self.session_expired.emit()
        return snapshot

    def display_text(self) -> str:
        return format_stacked_time(self._last_snapshot.display_seconds)

    def _publish(self) -> None:
        self._last_snapshot = self.timer.snapshot()
        self.state_changed.emit(self._last_snapshot)
