from __future__ import annotations

"""Lookup of bundled SVG icons with an in-memory cache."""

import logging
from pathlib import Path

from PyQt6.QtGui import QIcon


logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).resolve().parents[1] / "assets"
_ICON_CACHE: dict[str, QIcon | None] = {}


def get_asset_path(relative: str) -> Path:
    """Resolves a path relative to the bundled ``assets/`` directory."""
    return ASSETS_DIR / relative


def load_icon(relative: str) -> QIcon | None:
    """Loads a `QIcon` once and caches it; returns `None` for missing or unreadable files."""
    if relative in _ICON_CACHE:
        return _ICON_CACHE[relative]

    path = get_asset_path(relative)
    if not path.exists():
        logger.warning("Missing icon %s", path)
        _ICON_CACHE[relative] = None
        return None

    icon = QIcon(str(path))
    if icon.isNull():
        logger.warning("Unreadable icon %s", path)
        _ICON_CACHE[relative] = None
        return None

    _ICON_CACHE[relative] = icon
    return icon
