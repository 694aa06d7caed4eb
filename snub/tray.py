"""Tray icon, tooltip and menu contents derived from microphone state."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from snub.types import (
    MENU_QUIT,
    MENU_SETTINGS,
    MENU_SHOW_WINDOW,
    MENU_TOGGLE_MIC,
    TOOLTIP_ACTIVE,
    TOOLTIP_MUTED,
)

ICON_DIR = Path("icons")
ICON_ACTIVE = "tray-icon.png"
ICON_MUTED = "tray-icon-muted.png"


@dataclass(frozen=True)
class MenuItem:
    """One entry of the tray menu."""

    id: str
    text: str
    enabled: bool = True


def build_menu(is_muted: bool) -> list[MenuItem]:
    """Return the tray menu entries for the given state, in display order."""
    return [
        MenuItem(MENU_TOGGLE_MIC, "Unmute Mic" if is_muted else "Mute Mic"),
        MenuItem(MENU_SHOW_WINDOW, "Show Window"),
        MenuItem(MENU_SETTINGS, "Settings"),
        MenuItem(MENU_QUIT, "Quit"),
    ]


def tooltip_for(is_muted: bool) -> str:
    return TOOLTIP_MUTED if is_muted else TOOLTIP_ACTIVE


def icon_file(is_muted: bool) -> Path:
    return ICON_DIR / (ICON_MUTED if is_muted else ICON_ACTIVE)


@dataclass
class TrayState:
    """What the tray currently shows."""

    is_muted: bool = False
    icon: Path = field(init=False)
    tooltip: str = field(init=False)
    menu: list[MenuItem] = field(init=False)

    def __post_init__(self) -> None:
        self.update(self.is_muted)

    def update(self, is_muted: bool) -> None:
        """Refresh icon, tooltip and menu to match the microphone state."""
        self.is_muted = is_muted
        self.icon = icon_file(is_muted)
        self.tooltip = tooltip_for(is_muted)
        self.menu = build_menu(is_muted)