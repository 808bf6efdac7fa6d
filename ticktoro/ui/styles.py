from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtWidgets import QWidget

from ticktoro.core.timer import StatusLabel


INK = "#471515"


@dataclass(frozen=True)
class Palette:
    primary: str
    secondary: str
    background: str


FOCUS_PALETTE = Palette(primary="#ff7c7c", secondary="#ffd9d9", background="#fff3f2")
PAUSED_PALETTE = Palette(primary="#8ccaff", secondary="#d9eeff", background="#f2f9ff")


def palette_for(label: StatusLabel | None) -> Palette:
    """Paused sessions use the cool palette; everything else stays warm."""
    if label == StatusLabel.PAUSED:
        return PAUSED_PALETTE
    return FOCUS_PALETTE


THEME_QSS = """
QWidget {{
    background: {background};
    color: {ink};
    font-size: 14px;
}}

QLabel, QCheckBox {{
    background: transparent;
}}

QLabel#TimerLabel {{
    font-size: 100px;
    font-weight: 500;
    color: {ink};
}}

QFrame#StatusBadge {{
    background: {secondary};
    border: 1.5px solid {ink};
    border-radius: 20px;
}}

QLabel#StatusText {{
    font-size: 15px;
    color: {ink};
}}

QPushButton {{
    border: none;
    background: {secondary};
    border-radius: 20px;
    min-width: 60px;
    min-height: 50px;
}}

QPushButton#PrimaryButton {{
    background: {primary};
}}

QPushButton#StopButton {{
    min-width: 55px;
    min-height: 45px;
}}

QPushButton:disabled {{
    background: {background};
}}

QDialog {{
    background: {background};
    border: 1.5px solid #ffffff;
    border-radius: 8px;
}}

QLabel#Heading {{
    font-size: 20px;
    font-weight: 700;
    color: {ink};
}}

QPushButton#CloseButton {{
    background: #ffffff;
    border-radius: 10px;
    min-width: 20px;
    min-height: 20px;
}}

QSpinBox {{
    background: #ffffff;
    border: none;
    border-radius: 8px;
    padding: 4px 8px;
    font-size: 18px;
}}

QCheckBox::indicator {{
    width: 18px;
    height: 18px;
    border-radius: 9px;
    background: #ffffff;
}}

QCheckBox::indicator:checked {{
    background: {primary};
}}
"""


def build_stylesheet(palette: Palette) -> str:
    return THEME_QSS.format(
        primary=palette.primary,
        secondary=palette.secondary,
        background=palette.background,
        ink=INK,
    )


def apply_theme(widget: QWidget, palette: Palette = FOCUS_PALETTE) -> None:
    widget.setStyleSheet(build_stylesheet(palette))
