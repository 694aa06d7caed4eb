"""Microphone commands with tray updates, sound cues and change notifications."""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable

from snub import audio, sound
from snub.errors import MicrophoneError, log_error
from snub.tray import TrayState
from snub.types import MicrophoneState, Settings

StateListener = Callable[[MicrophoneState], None]


class MicrophoneController:
    """Runs microphone commands and keeps the tray and listeners in step."""

    def __init__(self, tray: TrayState | None = None) -> None:
        self.tray = tray if tray is not None else TrayState()
        self._listeners: list[StateListener] = []
        self._settings = Settings()
        self._settings_lock = threading.Lock()

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener for state changes; return a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit_state_change(self, state: MicrophoneState) -> None:
        """Tell every listener about a new state; a failing listener is logged."""
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                log_error("Failed to emit microphone state event", exc)

    def get_microphone_state(self) -> MicrophoneState:
        return audio.get_microphone_state()

    def toggle_microphone(self) -> MicrophoneState:
        """Flip the mute state, play a cue and publish the result."""
        current = audio.get_microphone_state()
        new_state = audio.set_microphone_mute(not current.is_muted)
        self._announce(new_state)
        return new_state

    def set_microphone_mute(self, mute: bool) -> MicrophoneState:
        """Set the mute state, play a cue and publish the result."""
        new_state = audio.set_microphone_mute(mute)
        self._announce(new_state)
        return new_state

    def get_settings(self) -> Settings:
        with self._settings_lock:
            return replace(self._settings)

    def set_telemetry_enabled(self, enabled: bool) -> None:
        with self._settings_lock:
            self._settings.telemetry_enabled = enabled
            print(f"Telemetry {'enabled' if enabled else 'disabled'}")

    def _announce(self, state: MicrophoneState) -> None:
        self._play_cue(state.is_muted)
        try:
            self.tray.update(state.is_muted)
        except Exception as exc:
            log_error("Failed to update tray state", exc)
        self.emit_state_change(state)

    @staticmethod
    def _play_cue(is_muted: bool) -> None:
        if is_muted:
            try:
                sound.play_mute_sound()
            except MicrophoneError as exc:
                log_error("Failed to play mute sound", exc)
        else:
            try:
                sound.play_unmute_sound()
            except MicrophoneError as exc:
                log_error("Failed to play unmute sound", exc)