"""Quick microphone mute toggle for macOS: audio control, sound cues, tray menu model and CLI."""

__version__ = "1.1.0"