from __future__ import annotations

"""Ticktoro entry point.

Sets up logging, opens the settings database, loads the application state
and runs the main window.
"""

import logging
import os
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from ticktoro.core.app_state import AppState
from ticktoro.data.storage import Storage
from ticktoro.ui.main_window import MainWindow


def default_db_path() -> Path:
    """Returns the settings database path, honouring ``TICKTORO_DB``."""
    override = os.environ.get("TICKTORO_DB")
    if override:
        return Path(override).expanduser()
    return Path.cwd() / "ticktoro.db"


def configure_logging() -> None:
    level_name = os.environ.get("TICKTORO_LOG_LEVEL", "INFO")
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def main() -> int:
    """Builds the application dependencies and runs the Qt event loop."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Ticktoro")

    storage = Storage(default_db_path())
    storage.init_db()

    app_state = AppState()
    app_state.load_from_storage(storage)

    window = MainWindow(app_state=app_state)
    window.show()
    logging.getLogger(__name__).info("Ticktoro started with %d min sessions", app_state.timer.configured_minutes)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
