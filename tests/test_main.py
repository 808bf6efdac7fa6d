import logging
from pathlib import Path

from ticktoro.main import configure_logging, default_db_path


def test_default_db_path_in_working_directory(monkeypatch, tmp_path) -> None:
    monkeypatch.delenv("TICKTORO_DB", raising=False)
    monkeypatch.chdir(tmp_path)

    assert default_db_path() == tmp_path / "ticktoro.db"


def test_db_path_override_from_environment(monkeypatch, tmp_path) -> None:
    target = tmp_path / "prefs" / "custom.db"
    monkeypatch.setenv("TICKTORO_DB", str(target))

    assert default_db_path() == Path(target)


def test_log_level_from_environment(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    monkeypatch.setenv("TICKTORO_LOG_LEVEL", "debug")
    configure_logging()
    monkeypatch.setenv("TICKTORO_LOG_LEVEL", "nonsense")
    configure_logging()
    monkeypatch.delenv("TICKTORO_LOG_LEVEL")
    configure_logging()

    assert [call["level"] for call in calls] == [logging.DEBUG, logging.INFO, logging.INFO]
    assert all(call["force"] is True for call in calls)
