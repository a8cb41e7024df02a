# orchestrion

Gesture controllers for playing music one gesture at a time. Each controller
turns some kind of input into a stream of note-on and note-off events that a
sequencer can follow:

- **Computer keyboard** – the digit keys `1`–`0` map to fixed note numbers
  (`orchestrion.keyboard`: `ComputerKeyboard`,
  `ComputerKeyboardGestureController`). Held keys do not retrigger.
- **MIDI device** – note-on and note-off events are forwarded, with the
  velocity compressed onto the range 0.2–1 so that soft playing still sounds
  (`orchestrion.midi`: `MidiEvent`, `MidiOpcode`,
  `MidiDeviceGestureController`, `compress_velocity`).
- **Touchpad** – each finger becomes a note; fingers on the left half play
  downwards from just below middle C, fingers on the right half upwards from
  middle C (`orchestrion.touchpad`: `Touchpad`;
  `orchestrion.touchpad_processor`: `TouchpadProcessor`;
  `orchestrion.touchpad_controller`: `TouchpadGestureController`).
- **Swipe** – a vertical swipe on either half of the touchpad plays note 59
  (left) or 60 (right), with a velocity equal to the swipe's amplitude
  (`orchestrion.swipe`: `SwipeGestureController`).

`orchestrion.selector.GestureControllerSelector` creates and closes
controllers according to the current selection. When nothing is stored, it
picks the MIDI device controller if the selected device of a
`MidiDeviceService` is available, and the computer keyboard otherwise.
`orchestrion.configuration.GestureControllerConfiguration` stores the
selection as a list of integer `GestureControllerType` values in a settings
mapping.

## Installation

```
pip install .
```

## Events

Controllers publish through `Channel` and `Notification` objects from
`orchestrion.signals`. Connect a callable to be told about each event:

```python
from orchestrion.keyboard import ComputerKeyboard, ComputerKeyboardGestureController

keyboard = ComputerKeyboard()
controller = ComputerKeyboardGestureController(keyboard)

controller.note_on.connect(lambda note, velocity: print("on", note, velocity))
controller.note_off.connect(lambda note: print("off", note))

keyboard.on_key_pressed("6")   # on 60 None
keyboard.on_key_released("6")  # off 60

controller.close()
```

## Touchpad input

Raw scans, as `TouchpadScan` values holding `TouchpadContact` entries, go
into a `TouchpadProcessor`. It gives each finger a stable identifier and
publishes lists of `Contact` values on `contact_changed`. A raw contact that
shows up again more than 20 ms (in scan time) after it was last seen gets a
new identifier, and when no scan has arrived for 150 ms an empty contact
list is sent and all identifiers are forgotten. The processor runs a
background thread, so use it as a context manager or call `close()` when
done. `scan_to_contacts` does the identifier assignment on its own.

## Wallpaper

`orchestrion.wallpaper.processed_wallpaper_path` lays a white layer of the
given opacity over an image and saves the result as `wallpaper.jpg` in a
user data directory, returning the path of the new file.

## What this package does not do

- It does not read input from the operating system. Key presses must be fed
  to `ComputerKeyboard.on_key_pressed` / `on_key_released`, MIDI events to
  `MidiDeviceService.event_received` or
  `MidiDeviceGestureController.on_midi_event`, and touchpad scans to
  `TouchpadProcessor.process`. `create_operating_system_touchpad` returns a
  `DummyOperatingSystemTouchpad`, whose `is_available()` is always `False`.
- It does not play sound or follow a score; it only produces note events.
- It does not save settings to disk; `GestureControllerConfiguration` writes
  to whatever mapping it is given (a plain dict by default).
- It has no command-line program or user interface.

## Running the tests

```
pip install .[test]
pytest
```