"""Shared constants and plain data types for microphone control."""

from __future__ import annotations

from dataclasses import asdict, dataclass

DEFAULT_UNMUTED_VOLUME = "50"
MUTED_VOLUME = "0"
TRAY_ID = "main"
MAIN_WINDOW_ID = "main"
SETTINGS_WINDOW_ID = "settings"

MENU_TOGGLE_MIC = "toggle_microphone"
MENU_SHOW_WINDOW = "show_window"
MENU_SETTINGS = "settings"
MENU_QUIT = "quit"

TOOLTIP_MUTED = "Microphone: Muted (Click to unmute)"
TOOLTIP_ACTIVE = "Microphone: Active (Click to mute)"

STATE_CHANGED_EVENT = "microphone-state-changed"


@dataclass(frozen=True)
class MicrophoneState:
    """Whether the system microphone is currently muted."""

    is_muted: bool

    @classmethod
    def muted(cls) -> MicrophoneState:
        return cls(is_muted=True)

    @classmethod
    def unmuted(cls) -> MicrophoneState:
        return cls(is_muted=False)

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)


@dataclass
class Settings:
    """User-adjustable application settings."""

    telemetry_enabled: bool = False

    @classmethod
    def with_telemetry(cls, telemetry_enabled: bool) -> Settings:
        return cls(telemetry_enabled=telemetry_enabled)

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)