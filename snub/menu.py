"""Dispatch of tray menu selections."""

from __future__ import annotations

from typing import Callable

from snub import audio
from snub.commands import MicrophoneController
from snub.errors import MicrophoneError, log_error
from snub.types import (
    MAIN_WINDOW_ID,
    MENU_QUIT,
    MENU_SETTINGS,
    MENU_SHOW_WINDOW,
    MENU_TOGGLE_MIC,
    SETTINGS_WINDOW_ID,
)


def handle_menu_event(
    controller: MicrophoneController,
    event_id: str,
    show_window: Callable[[str], object],
    quit_app: Callable[[int], object],
) -> None:
    """Act on a menu item id; unknown ids are ignored."""
    if event_id == MENU_TOGGLE_MIC:
        _toggle_microphone(controller)
    elif event_id == MENU_SHOW_WINDOW:
        show_window(MAIN_WINDOW_ID)
    elif event_id == MENU_SETTINGS:
        show_window(SETTINGS_WINDOW_ID)
    elif event_id == MENU_QUIT:
        quit_app(0)


def _toggle_microphone(controller: MicrophoneController) -> None:
    try:
        current = audio.get_microphone_state()
    except MicrophoneError as exc:
        log_error("Failed to get microphone state", exc)
        return
    try:
        new_state = audio.set_microphone_mute(not current.is_muted)
    except MicrophoneError as exc:
        log_error("Failed to set microphone mute", exc)
        return
    try:
        controller.tray.update(new_state.is_muted)
    except Exception as exc:
        log_error("Failed to update tray state", exc)
    controller.emit_state_change(new_state)