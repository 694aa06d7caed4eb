import subprocess
import sys

import pytest

from snub import sound
from snub.errors import CommandFailedError


class FakeRun:
    def __init__(self, failing=(), raises=None):
        self.failing = set(failing)
        self.raises = raises
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if self.raises is not None:
            raise self.raises
        code = 1 if args[1] in self.failing else 0
        return subprocess.CompletedProcess(args, code, b"", b"bad file" if code else b"")


def test_system_sound_path():
    assert sound.system_sound_path("Tink") == "/System/Library/Sounds/Tink.aiff"


def test_play_system_sound_invokes_afplay(monkeypatch):
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    result = sound.play_system_sound("Pop")
    assert result is None
    assert fake.calls == [["afplay", "/System/Library/Sounds/Pop.aiff"]]


def test_play_system_sound_failure(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(failing={sound.system_sound_path("Pop")}))
    with pytest.raises(CommandFailedError) as info:
        sound.play_system_sound("Pop")
    assert info.value.message == "afplay failed: bad file"


def test_play_system_sound_missing_binary(monkeypatch):
    monkeypatch.setattr(subprocess, "run", FakeRun(raises=FileNotFoundError("afplay")))
    with pytest.raises(CommandFailedError) as info:
        sound.play_system_sound("Pop")
    assert info.value.message.startswith("Failed to play sound: ")


def test_no_sound_off_macos(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    assert sound.play_mute_sound() is None
    assert sound.play_unmute_sound() is None
    assert fake.calls == []


@pytest.mark.parametrize("play", [sound.play_mute_sound, sound.play_unmute_sound])
def test_first_sound_used_when_available(monkeypatch, play):
    monkeypatch.setattr(sys, "platform", "darwin")
    fake = FakeRun()
    monkeypatch.setattr(subprocess, "run", fake)
    assert play() == "Tink"
    assert len(fake.calls) == 1


def test_falls_back_to_next_sound(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    fake = FakeRun(failing={sound.system_sound_path("Tink")})
    monkeypatch.setattr(subprocess, "run", fake)
    assert sound.play_mute_sound() == "Pop"
    assert [call[1] for call in fake.calls] == [
        sound.system_sound_path("Tink"),
        sound.system_sound_path("Pop"),
    ]


def test_all_sounds_failing_is_silent(monkeypatch):
    monkeypatch.setattr(sys, "platform", "darwin")
    fake = FakeRun(failing={sound.system_sound_path(n) for n in sound.UNMUTE_SOUNDS})
    monkeypatch.setattr(subprocess, "run", fake)
    assert sound.play_unmute_sound() is None
    assert [call[1] for call in fake.calls] == [
        sound.system_sound_path(n) for n in sound.UNMUTE_SOUNDS
    ]