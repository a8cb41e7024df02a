"""Shared value types for gesture controllers and device menus."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List


class GestureControllerType(enum.IntEnum):
    """Kinds of gesture controller that can drive the sequencer."""

    MIDI_DEVICE = 0
    TOUCHPAD = 1
    SWIPE = 2
    COMPUTER_KEYBOARD = 3


@dataclass(frozen=True)
class Contact:
    """A finger on the touchpad, with a stable unique id and normalised position."""

    uid: int
    x: float
    y: float


@dataclass
class TouchpadContact:
    """A raw contact as reported by the operating system."""

    number: int = -1
    x: float = 0.0
    y: float = 0.0


@dataclass
class TouchpadScan:
    """One touchpad scan: its time in milliseconds and the contacts it saw."""

    scan_time: int
    contacts: List[TouchpadContact] = field(default_factory=list)


class DeviceType(enum.Enum):
    """Device categories that can be chosen from the Audio/MIDI menu."""

    MIDI_CONTROLLER = "midi_controller"
    MIDI_SYNTHESIZER = "midi_synthesizer"
    PLAYBACK_DEVICE = "playback_device"


_CHOOSE_DEVICES_SUBMENU: Dict[DeviceType, str] = {
    DeviceType.MIDI_CONTROLLER: "chooseMidiControllerSubmenu",
    DeviceType.MIDI_SYNTHESIZER: "chooseMidiSynthesizerSubmenu",
    DeviceType.PLAYBACK_DEVICE: "choosePlaybackDeviceSubmenu",
}


def choose_devices_submenu(device_type: DeviceType) -> str:
    """Return the action id of the submenu that lists devices of ``device_type``."""
    try:
        return _CHOOSE_DEVICES_SUBMENU[device_type]
    except KeyError:
        raise KeyError(f"no device submenu for {device_type!r}") from None