import pytest

from ticktoro.core.app_state import AppState, format_stacked_time
from ticktoro.core.errors import InvalidDuration
from ticktoro.core.timer import DEFAULT_MINUTES, SessionTimer, TimerState
from ticktoro.data.storage import Storage


def _storage(tmp_path) -> Storage:
    storage = Storage(tmp_path / "ticktoro.db")
    storage.init_db()
    return storage


def test_focus_minutes_persist_across_reload(tmp_path) -> None:
    storage = _storage(tmp_path)
    state = AppState()
    state.load_from_storage(storage)
    state.set_focus_minutes(40)

    again = AppState()
    again.load_from_storage(storage)

    assert again.timer.configured_minutes == 40
    assert again.display_text() == "40\n00"


def test_invalid_stored_minutes_fall_back_to_default(tmp_path) -> None:
    storage = _storage(tmp_path)
    storage.set_setting("focus_minutes", 500)

    state = AppState()
    state.load_from_storage(storage)

    assert state.timer.configured_minutes == DEFAULT_MINUTES


def test_rejected_minutes_are_not_persisted(tmp_path) -> None:
    storage = _storage(tmp_path)
    state = AppState()
    state.load_from_storage(storage)

    with pytest.raises(InvalidDuration):
        state.set_focus_minutes(0)

    assert storage.get_focus_minutes() == DEFAULT_MINUTES


def test_sound_setting_round_trip(tmp_path) -> None:
    storage = _storage(tmp_path)
    state = AppState()
    state.load_from_storage(storage)
    changes = []
    state.settings_changed.connect(lambda key, value: changes.append((key, value)))

    state.set_sound_enabled(False)

    assert storage.get_sound_enabled() is False
    assert changes == [("sound_enabled", False)]
    assert state.sound_enabled is False


def test_toggle_walks_start_pause_resume() -> None:
    state = AppState(SessionTimer(duration_seconds=60))

    state.toggle(now=0.0)
    assert state.timer.state == TimerState.RUNNING
    state.advance(10.0)
    state.toggle(now=10.5)
    assert state.timer.state == TimerState.PAUSED
    state.toggle(now=200.0)
    assert state.timer.state == TimerState.RUNNING
    state.advance(203.0)

    assert state.timer.remaining_seconds == 47
    assert state.display_text() == "00\n47"


def test_state_changed_only_emits_on_visible_change() -> None:
    state = AppState(SessionTimer(duration_seconds=60))
    snapshots = []
    state.state_changed.connect(snapshots.append)

    state.start(now=0.0)
    state.advance(0.2)
    state.advance(0.6)
    state.advance(1.1)

    assert [s.display_seconds for s in snapshots] == [60, 59]


def test_session_expired_fires_once() -> None:
    state = AppState(SessionTimer(duration_seconds=2))
    expired = []
    state.session_expired.connect(lambda: expired.append(True))

    state.start(now=0.0)
    state.advance(1.0)
    state.advance(2.0)
    state.advance(3.0)

    assert expired == [True]
    assert state.snapshot.state == TimerState.EXPIRED


def test_toggle_after_expiry_starts_fresh_session() -> None:
    state = AppState(SessionTimer(duration_seconds=2))
    state.start(now=0.0)
    state.advance(5.0)

    state.toggle(now=6.0)

    assert state.timer.state == TimerState.RUNNING
    assert state.timer.remaining_seconds == 2


def test_stop_resets_display_to_configured_length() -> None:
    state = AppState(SessionTimer(duration_seconds=90))
    state.start(now=0.0)
    state.advance(30.0)

    state.stop()

    assert state.snapshot.state == TimerState.IDLE
    assert state.display_text() == "01\n30"


def test_format_stacked_time_pads_both_parts() -> None:
    assert format_stacked_time(0) == "00\n00"
    assert format_stacked_time(65) == "01\n05"
    assert format_stacked_time(3600) == "60\n00"


def test_duration_changed_carries_new_minutes(tmp_path) -> None:
    storage = _storage(tmp_path)
    state = AppState()
    minutes = []
    state.duration_changed.connect(minutes.append)

    state.load_from_storage(storage)
    state.set_focus_minutes(15)

    assert minutes == [DEFAULT_MINUTES, 15]


def test_rejected_minutes_do_not_emit_duration_changed() -> None:
    state = AppState(SessionTimer(duration_seconds=60))
    minutes = []
    state.duration_changed.connect(minutes.append)
    state.start(now=0.0)

    with pytest.raises(RuntimeError):
        state.set_focus_minutes(10)

    assert minutes == []
    assert state.timer.configured_duration == 60


def test_minutes_locked_until_expired_session_is_reset() -> None:
    state = AppState(SessionTimer(duration_seconds=1))
    state.start(now=0.0)
    state.advance(1.0)
    assert state.timer.state == TimerState.EXPIRED

    with pytest.raises(RuntimeError):
        state.set_focus_minutes(10)

    state.stop()
    state.set_focus_minutes(10)

    assert state.timer.configured_minutes == 10
