"""Command-line entry point: one-shot commands or an interactive tray menu."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from snub import audio
from snub.commands import MicrophoneController
from snub.errors import MicrophoneError, log_error
from snub.menu import handle_menu_event
from snub.tray import MenuItem, TrayState
from snub.types import MicrophoneState

ACTIONS = ("status", "toggle", "mute", "unmute")


class _QuitRequested(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def initial_microphone_state() -> MicrophoneState:
    """Read the current state, falling back to unmuted when it cannot be read."""
    try:
        return audio.get_microphone_state()
    except MicrophoneError as exc:
        log_error("Failed to get initial microphone state", exc)
        return MicrophoneState.unmuted()


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="snub", description="Quickly mute and unmute the system microphone."
    )
    parser.add_argument(
        "action",
        nargs="?",
        choices=ACTIONS,
        help="run one command and exit; without it an interactive tray menu starts",
    )
    return parser.parse_args(argv)


def _resolve_item(text: str, menu: list[MenuItem]) -> str | None:
    if text.isdigit():
        number = int(text)
        if 1 <= number <= len(menu):
            return menu[number - 1].id
        return None
    return next((item.id for item in menu if item.id == text), None)


def _print_tray(tray: TrayState) -> None:
    print(tray.tooltip)
    for number, item in enumerate(tray.menu, start=1):
        print(f"  {number}. {item.text}")


def _run_menu() -> int:
    state = initial_microphone_state()
    controller = MicrophoneController(TrayState(state.is_muted))

    def show_window(window_id: str) -> None:
        print(f"Showing window: {window_id}")

    def quit_app(code: int) -> None:
        raise _QuitRequested(code)

    while True:
        _print_tray(controller.tray)
        try:
            line = input("> ").strip()
        except EOFError:
            return 0
        if not line:
            continue
        event_id = _resolve_item(line, controller.tray.menu)
        if event_id is None:
            print(f"Unknown menu item: {line}", file=sys.stderr)
            continue
        try:
            handle_menu_event(controller, event_id, show_window, quit_app)
        except _QuitRequested as request:
            return request.code


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.action is None:
        return _run_menu()

    controller = MicrophoneController()
    actions = {
        "status": controller.get_microphone_state,
        "toggle": controller.toggle_microphone,
        "mute": lambda: controller.set_microphone_mute(True),
        "unmute": lambda: controller.set_microphone_mute(False),
    }
    try:
        state = actions[args.action]()
    except MicrophoneError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(json.dumps(state.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())