"""Short audible feedback using the built-in system sounds."""

from __future__ import annotations

import subprocess
import sys

from snub.errors import CommandFailedError

SOUND_DIR = "/System/Library/Sounds"
MUTE_SOUNDS = ("Tink", "Pop", "Morse")
UNMUTE_SOUNDS = ("Tink", "Pop", "Morse")


def system_sound_path(name: str) -> str:
    """Return the file path of a named system sound."""
    return f"{SOUND_DIR}/{name}.aiff"


def play_system_sound(name: str) -> None:
    """Play a named system sound, waiting until it finishes."""
    try:
        result = subprocess.run(["afplay", system_sound_path(name)], capture_output=True)
    except OSError as exc:
        raise CommandFailedError(f"Failed to play sound: {exc}") from exc
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise CommandFailedError(f"afplay failed: {stderr}")


def _play_first(names: tuple[str, ...]) -> str | None:
    if sys.platform != "darwin":
        return None
    for name in names:
        try:
            play_system_sound(name)
        except CommandFailedError:
            continue
        return name
    return None


def play_mute_sound() -> str | None:
    """Play the mute cue; return the sound played, or None if none could be."""
    return _play_first(MUTE_SOUNDS)


def play_unmute_sound() -> str | None:
    """Play the unmute cue; return the sound played, or None if none could be."""
    return _play_first(UNMUTE_SOUNDS)