# snub

A small macOS utility for muting and unmuting the microphone quickly.

snub reads and sets the system input volume by running `osascript`. An input
volume of 0 counts as muted. Muting sets the input volume to 0. Unmuting sets
it to 50.

Microphone control works only on macOS. On other platforms, reading or
changing the microphone raises `UnsupportedPlatformError`.

## Installation

```
pip install .
```

snub needs Python 3.10 or later. It has no third-party dependencies.

## Command line

### One-shot commands

```
snub status
snub toggle
snub mute
snub unmute
```

Each command prints the resulting state as JSON, for example
`{"is_muted": true}`, and exits with status 0. If the microphone cannot be
read or set, snub prints the error to standard error and exits with status 1.

`toggle`, `mute` and `unmute` also play a short system sound through
`afplay`. snub tries `Tink`, `Pop` and `Morse` from `/System/Library/Sounds`
in that order and stops at the first one that plays. If none of them plays,
the command still succeeds.

### Interactive menu

```
snub
```

When run with no arguments, snub reads the current microphone state and
prints a text menu. If the state cannot be read, snub logs the error and
assumes the microphone is unmuted. The menu shows the tooltip, then these
items:

1. **Mute Mic** / **Unmute Mic**
2. **Show Window**
3. **Settings**
4. **Quit**

To choose an item, enter its number or its id (`toggle_microphone`,
`show_window`, `settings`, `quit`).

- Toggling from this menu updates the menu text and tooltip. It does not play
  a sound.
- **Show Window** prints `Showing window: main`.
- **Settings** prints `Showing window: settings`.
- **Quit**, or end of input, exits with status 0.

## Library use

```python
from snub.commands import MicrophoneController
from snub.tray import TrayState

controller = MicrophoneController(TrayState())
unsubscribe = controller.subscribe(lambda state: print("muted:", state.is_muted))

state = controller.toggle_microphone()
controller.set_microphone_mute(False)
print(controller.get_settings().to_dict())   # {'telemetry_enabled': False}
controller.set_telemetry_enabled(True)       # prints "Telemetry enabled"
unsubscribe()
```

`toggle_microphone()` and `set_microphone_mute()` play the sound cue. They
then update the controller's `TrayState` (icon path, tooltip and menu) and
notify every subscribed listener. If a listener raises, snub logs the error
to standard error and notifies the remaining listeners.

Lower-level helpers:

- `snub.audio`: `get_microphone_state()`, `set_microphone_mute(mute)`,
  `run_osascript(script)`
- `snub.sound`: `play_mute_sound()`, `play_unmute_sound()` (each returns the
  name of the sound played, or `None`), `play_system_sound(name)`,
  `system_sound_path(name)`
- `snub.tray`: `build_menu(is_muted)`, `tooltip_for(is_muted)`,
  `icon_file(is_muted)`, `MenuItem`, `TrayState`
- `snub.menu`: `handle_menu_event(controller, event_id, show_window, quit_app)`
- `snub.types`: `MicrophoneState`, `Settings`, and the menu id and tooltip
  constants
- `snub.errors`: `log_error(context, error)`

Errors derive from `snub.errors.MicrophoneError`:

- `CommandFailedError`: `osascript` or `afplay` could not run, or it failed.
- `VolumeParseError`: the input volume reported by the system was not a number.
- `UnsupportedPlatformError`: not running on macOS.

## What snub does not do

- It has no graphical tray icon and no windows. `TrayState` only describes
  what a tray would show. `icon_file()` returns a path under `icons/`, and no
  image files come with the package.
- "Show Window" and "Settings" only print which window would be shown.
- Settings are held in memory for the life of one `MicrophoneController`.
  They are not saved.

## Tests

```
pip install .[test]
pytest
```