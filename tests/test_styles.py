from ticktoro.core.timer import StatusLabel
from ticktoro.ui.styles import FOCUS_PALETTE, PAUSED_PALETTE, build_stylesheet, palette_for


def test_paused_sessions_use_cool_palette() -> None:
    assert palette_for(StatusLabel.PAUSED) == PAUSED_PALETTE
    assert palette_for(StatusLabel.FOCUS) == FOCUS_PALETTE
    assert palette_for(None) == FOCUS_PALETTE


def test_stylesheet_carries_palette_colours() -> None:
    qss = build_stylesheet(PAUSED_PALETTE)

    assert PAUSED_PALETTE.primary in qss
    assert PAUSED_PALETTE.background in qss
    assert "{" in qss and "{{" not in qss
