from __future__ import annotations

"""SQLite settings store for user preferences."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

from ticktoro.core.timer import DEFAULT_MINUTES


logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

SCHEMA = """
CREATE TABLE IF NOT EXISTS schema_version(version INTEGER NOT NULL);
CREATE TABLE IF NOT EXISTS settings(key TEXT PRIMARY KEY, value TEXT);
"""


class Storage:
    """Key/value preferences kept as JSON in a single SQLite file."""
    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Creates the tables on first launch and stamps the schema version."""
        with self._transaction() as conn:
            conn.executescript(SCHEMA)
            if conn.execute("SELECT 1 FROM schema_version").fetchone() is None:
                conn.execute("INSERT INTO schema_version(version) VALUES (?)", (SCHEMA_VERSION,))
        logger.debug("Settings database ready at %s", self.db_path)

    def get_setting(self, key: str, default: Any = None) -> Any:
        with self._transaction() as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        if not row:
            return default
        raw = row["value"]
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            return raw

    def set_setting(self, key: str, value: Any) -> None:
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO settings(key, value) VALUES(?, ?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                (key, json.dumps(value)),
            )

    def get_focus_minutes(self) -> Any:
        return self.get_setting("focus_minutes", DEFAULT_MINUTES)

    def set_focus_minutes(self, minutes: int) -> None:
        self.set_setting("focus_minutes", int(minutes))

    def get_sound_enabled(self) -> bool:
        value = self.get_setting("sound_enabled", True)
        if not isinstance(value, bool):
            logger.warning("Ignoring stored sound_enabled %r, using True", value)
            return True
        return value

    def set_sound_enabled(self, enabled: bool) -> None:
        self.set_setting("sound_enabled", bool(enabled))
