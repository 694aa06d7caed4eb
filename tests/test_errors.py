import pytest

from snub.errors import (
    CommandFailedError,
    MicrophoneError,
    UnsupportedPlatformError,
    VolumeParseError,
    log_error,
)


def test_command_failed_message():
    assert str(CommandFailedError("osascript failed: x")) == "Command failed: osascript failed: x"


def test_parse_error_message():
    assert str(VolumeParseError("bad")) == "Parse error: bad"


def test_system_error_message():
    err = UnsupportedPlatformError("Microphone control is only supported on macOS")
    assert str(err) == "System error: Microphone control is only supported on macOS"


def test_message_attribute_keeps_raw_text():
    assert CommandFailedError("raw").message == "raw"


@pytest.mark.parametrize(
    "cls", [CommandFailedError, VolumeParseError, UnsupportedPlatformError]
)
def test_all_errors_are_microphone_errors(cls):
    err = cls("detail")
    assert isinstance(err, MicrophoneError)
    assert err.message == "detail"
    assert str(err).endswith(": detail")


def test_log_error_writes_to_stderr(capsys):
    log_error("Failed to update tray state", CommandFailedError("boom"))
    captured = capsys.readouterr()
    assert captured.err == "Failed to update tray state: Command failed: boom\n"
    assert captured.out == ""