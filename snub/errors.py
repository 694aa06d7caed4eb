"""Error types for microphone operations and an error logger."""

from __future__ import annotations

import sys


class MicrophoneError(Exception):
    """Base class for failures while controlling the microphone."""

    prefix = "Microphone error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class CommandFailedError(MicrophoneError):
    """An external command could not be run or exited unsuccessfully."""

    prefix = "Command failed"


class VolumeParseError(MicrophoneError):
    """Command output could not be understood."""

    prefix = "Parse error"


class UnsupportedPlatformError(MicrophoneError):
    """The running system does not support the requested operation."""

    prefix = "System error"


def log_error(context: str, error: object) -> None:
    """Write an error with its context to standard error."""
    print(f"{context}: {error}", file=sys.stderr)