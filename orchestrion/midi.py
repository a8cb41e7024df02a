"""MIDI input device as a gesture controller."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import List, Optional

from .signals import Channel

MIN_VELOCITY = 0.2


class MidiOpcode(enum.IntEnum):
    """Channel voice message opcodes (the high nibble of the status byte)."""

    NOTE_OFF = 0x8
    NOTE_ON = 0x9
    POLY_PRESSURE = 0xA
    CONTROL_CHANGE = 0xB
    PROGRAM_CHANGE = 0xC
    CHANNEL_PRESSURE = 0xD
    PITCH_BEND = 0xE


@dataclass(frozen=True)
class MidiEvent:
    """A channel voice event.

    ``velocity`` is 7-bit for MIDI 1.0 events and 16-bit when ``midi2`` is set.
    """

    opcode: MidiOpcode
    note: int = 0
    velocity: int = 0
    channel: int = 0
    midi2: bool = False

    @property
    def is_channel_voice_20(self) -> bool:
        return self.midi2

    def to_midi10(self) -> List["MidiEvent"]:
        """Return the equivalent MIDI 1.0 events."""
        if not self.midi2:
            return [self]
        return [
            MidiEvent(
                opcode=self.opcode,
                note=self.note,
                velocity=self.velocity >> 9,
                channel=self.channel,
            )
        ]


def compress_velocity(velocity: float) -> float:
    """Map a normalised velocity onto [MIN_VELOCITY, 1] to even out playing."""
    return MIN_VELOCITY + (1 - MIN_VELOCITY) * velocity


class MidiDeviceGestureController:
    """Turns incoming MIDI note events into note on/off signals."""

    def __init__(self, event_received: Optional[Channel] = None) -> None:
        self.note_on = Channel()
        self.note_off = Channel()
        self._event_received = event_received
        if event_received is not None:
            event_received.connect(self._on_port_event)

    @staticmethod
    def is_functional() -> bool:
        """A MIDI device controller can always be created."""
        return True

    def close(self) -> None:
        """Stop listening to the MIDI input port."""
        if self._event_received is not None:
            self._event_received.disconnect(self._on_port_event)
            self._event_received = None

    def _on_port_event(self, tick: int, event: MidiEvent) -> None:
        self.on_midi_event(event)

    def on_midi_event(self, event: MidiEvent) -> None:
        """Handle one MIDI event, emitting note on/off as appropriate."""
        if event.is_channel_voice_20:
            for midi10_event in event.to_midi10():
                self.on_midi_event(midi10_event)
            return
        if event.opcode == MidiOpcode.NOTE_ON:
            self.note_on.send(event.note, compress_velocity(event.velocity / 128.0))
        elif event.opcode == MidiOpcode.NOTE_OFF:
            self.note_off.send(event.note)