"""System microphone volume control through AppleScript."""

from __future__ import annotations

import subprocess
import sys

from snub.errors import CommandFailedError, UnsupportedPlatformError, VolumeParseError
from snub.types import DEFAULT_UNMUTED_VOLUME, MUTED_VOLUME, MicrophoneState

_UNSUPPORTED = "Microphone control is only supported on macOS"


def _require_macos() -> None:
    if sys.platform != "darwin":
        raise UnsupportedPlatformError(_UNSUPPORTED)


def run_osascript(script: str) -> str:
    """Run an AppleScript snippet and return its trimmed standard output."""
    try:
        result = subprocess.run(["osascript", "-e", script], capture_output=True)
    except OSError as exc:
        raise CommandFailedError(f"Failed to execute osascript: {exc}") from exc
    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace")
        raise CommandFailedError(f"osascript failed: {stderr}")
    return result.stdout.decode("utf-8", errors="replace").strip()


def get_microphone_state() -> MicrophoneState:
    """Read the input volume; a volume of zero counts as muted."""
    _require_macos()
    volume_text = run_osascript("input volume of (get volume settings)")
    try:
        volume = float(volume_text)
    except ValueError:
        raise VolumeParseError(
            f"Failed to parse volume level: '{volume_text}'"
        ) from None
    return MicrophoneState(is_muted=volume == 0.0)


def set_microphone_mute(mute: bool) -> MicrophoneState:
    """Mute the microphone or restore it to the default input volume."""
    _require_macos()
    level = MUTED_VOLUME if mute else DEFAULT_UNMUTED_VOLUME
    run_osascript(f"set volume input volume {level}")
    return MicrophoneState(is_muted=mute)