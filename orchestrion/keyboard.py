"""Computer keyboard as a gesture controller."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Set

from .signals import Channel


class ComputerKeyboard:
    """Broadcasts key presses and releases on its ``key_pressed``/``key_released`` channels."""

    def __init__(self) -> None:
        self.key_pressed = Channel()
        self.key_released = Channel()

    def on_key_pressed(self, letter: str) -> None:
        """Report that ``letter`` went down."""
        self.key_pressed.send(letter)

    def on_key_released(self, letter: str) -> None:
        """Report that ``letter`` went up."""
        self.key_released.send(letter)


class ComputerKeyboardGestureController:
    """Turns number-row key presses into note on/off events."""

    NOTE_MAP: Mapping[str, int] = MappingProxyType(
        {
            "1": 0,
            "2": 1,
            "3": 3,
            "4": 4,
            "5": 5,
            "6": 60,
            "7": 61,
            "8": 62,
            "9": 63,
            "0": 64,
        }
    )

    def __init__(self, keyboard: ComputerKeyboard) -> None:
        self.note_on = Channel()
        self.note_off = Channel()
        self._keyboard = keyboard
        self._pressed: Set[str] = set()
        keyboard.key_pressed.connect(self._key_pressed)
        keyboard.key_released.connect(self._key_released)

    @staticmethod
    def is_functional() -> bool:
        """A computer keyboard is always available."""
        return True

    def close(self) -> None:
        """Stop listening to the keyboard."""
        self._keyboard.key_pressed.disconnect(self._key_pressed)
        self._keyboard.key_released.disconnect(self._key_released)

    def _key_pressed(self, letter: str) -> None:
        letter = letter.lower()
        note = self.NOTE_MAP.get(letter)
        if note is None or letter in self._pressed:
            # Unmapped key, or an auto-repeat while the key is held.
            return
        self._pressed.add(letter)
        velocity: Optional[float] = None
        self.note_on.send(note, velocity)

    def _key_released(self, letter: str) -> None:
        letter = letter.lower()
        note = self.NOTE_MAP.get(letter)
        if note is None:
            return
        self._pressed.discard(letter)
        self.note_off.send(note)