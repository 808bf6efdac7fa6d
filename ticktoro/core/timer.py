from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum

from ticktoro.core.errors import InvalidDuration, InvalidTransition


logger = logging.getLogger(__name__)

DEFAULT_MINUTES = 25
MIN_MINUTES = 1
MAX_MINUTES = 60


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    EXPIRED = "expired"


class StatusLabel(str, Enum):
    FOCUS = "Focus"
    PAUSED = "Paused"


@dataclass(frozen=True)
class TimerSnapshot:
    state: TimerState
    total_seconds: int
    remaining_seconds: int | None
    display_seconds: int
    progress: float
    status_label: StatusLabel | None
    is_active: bool


class SessionTimer:
    """Single-session countdown driven by monotonic timestamps from the host.

    The host calls :meth:`advance` once per rendered frame. Only whole elapsed
    seconds are consumed; ``_last_tick`` moves forward by exactly the consumed
    amount so the sub-second remainder carries over to the next frame.
    """

    def __init__(self, duration_seconds: int = DEFAULT_MINUTES * 60) -> None:
        if isinstance(duration_seconds, bool) or not isinstance(duration_seconds, int) or duration_seconds <= 0:
            raise InvalidDuration(duration_seconds, "seconds", 1)
        self._configured_duration = duration_seconds
        self._state = TimerState.IDLE
        self._remaining_seconds: int | None = None
        self._last_tick: float | None = None

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def configured_duration(self) -> int:
        return self._configured_duration

    @property
    def configured_minutes(self) -> int:
        return self._configured_duration // 60

    @property
    def remaining_seconds(self) -> int | None:
        return self._remaining_seconds

    @property
    def last_tick_instant(self) -> float | None:
        return self._last_tick

    def is_active(self) -> bool:
        return self._state in {TimerState.RUNNING, TimerState.PAUSED}

    def display_seconds(self) -> int:
        if self.is_active() and self._remaining_seconds is not None:
            return self._remaining_seconds
        return self._configured_duration

    def status_label(self) -> StatusLabel | None:
        if self._state == TimerState.RUNNING:
            return StatusLabel.FOCUS
        if self._state == TimerState.PAUSED:
            return StatusLabel.PAUSED
        return None

    def set_duration(self, minutes: int) -> None:
        if isinstance(minutes, bool) or not isinstance(minutes, int) or not MIN_MINUTES <= minutes <= MAX_MINUTES:
            raise InvalidDuration(minutes, "minutes", MIN_MINUTES, MAX_MINUTES)
        self._require(TimerState.IDLE, "change duration")
        self._configured_duration = minutes * 60
        logger.info("Session length set to %d min", minutes)

    def start(self, now: float | None = None) -> None:
        self._require(TimerState.IDLE, "start")
        if now is None:
            now = time.monotonic()
        self._remaining_seconds = self._configured_duration
        self._last_tick = now
        self._state = TimerState.RUNNING
        logger.info("Session started: %d s", self._configured_duration)

    def pause(self) -> None:
        self._require(TimerState.RUNNING, "pause")
        self._last_tick = None
        self._state = TimerState.PAUSED
        logger.info("Session paused with %s s left", self._remaining_seconds)

    def resume(self, now: float | None = None) -> None:
        self._require(TimerState.PAUSED, "resume")
        if now is None:
            now = time.monotonic()
        self._last_tick = now
        self._state = TimerState.RUNNING
        logger.info("Session resumed with %s s left", self._remaining_seconds)

    def stop(self) -> None:
        if self._state == TimerState.IDLE:
            return
        previous = self._state
        self._remaining_seconds = None
        self._last_tick = None
        self._state = TimerState.IDLE
        logger.info("Session stopped from %s", previous.value)

    def advance(self, now: float | None = None) -> TimerSnapshot:
        if self._state != TimerState.RUNNING or self._last_tick is None or self._remaining_seconds is None:
            return self.snapshot()
        if now is None:
            now = time.monotonic()

        whole_seconds = int(max(0.0, now - self._last_tick))
        if whole_seconds == 0:
            return self.snapshot()

        consumed = min(whole_seconds, self._remaining_seconds)
        self._remaining_seconds -= consumed
        self._last_tick += whole_seconds
        logger.debug("Consumed %d s, %d s left", consumed, self._remaining_seconds)

        if self._remaining_seconds == 0:
            self._last_tick = None
            self._state = TimerState.EXPIRED
            logger.info("Session expired")
        return self.snapshot()

    def snapshot(self) -> TimerSnapshot:
        total = self._configured_duration
        display = self.display_seconds()
        if self._state == TimerState.EXPIRED:
            progress = 1.0
        elif self.is_active():
            progress = (total - display) / total
        else:
            progress = 0.0
        return TimerSnapshot(
            state=self._state,
            total_seconds=total,
            remaining_seconds=self._remaining_seconds,
            display_seconds=display,
            progress=max(0.0, min(1.0, progress)),
            status_label=self.status_label(),
            is_active=self.is_active(),
        )

    def _require(self, expected: TimerState, command: str) -> None:
        if self._state != expected:
            logger.warning("Rejected %s while %s", command, self._state.value)
            raise InvalidTransition(command, self._state.value)
