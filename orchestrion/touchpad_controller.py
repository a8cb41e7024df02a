"""Touchpad as a gesture controller: each finger plays a key."""

from __future__ import annotations

from typing import Dict, Protocol, Sequence

from .signals import Channel
from .types import Contact

MIDDLE_C = 60


class _ContactSource(Protocol):
    contact_changed: Channel


class TouchpadGestureController:
    """Maps fingers on the touchpad to notes.

    Fingers on the left half play downward from just below middle C, fingers
    on the right half upward from middle C. Velocity comes from how high the
    highest finger of the same hand is.
    """

    def __init__(self, touchpad: _ContactSource) -> None:
        self.note_on = Channel()
        self.note_off = Channel()
        self._touchpad = touchpad
        self._pressed_keys: Dict[int, int] = {}
        self._connected = True
        touchpad.contact_changed.connect(self.on_contacts)

    @staticmethod
    def is_functional() -> bool:
        """The touchpad controller is not usable yet."""
        return False

    @property
    def contact_changed(self) -> Channel:
        """The touchpad's contact channel."""
        return self._touchpad.contact_changed

    def close(self) -> None:
        """Stop listening to the touchpad."""
        if self._connected:
            self._touchpad.contact_changed.disconnect(self.on_contacts)
            self._connected = False

    def on_contacts(self, contacts: Sequence[Contact]) -> None:
        """Emit note on for new fingers and note off for lifted ones."""
        used_keys = list(self._pressed_keys.values())

        for contact in contacts:
            if contact.uid in self._pressed_keys:
                continue
            is_left = contact.x < 0.5
            # Use the highest finger of the same hand: when playing legato it is
            # hard to hit the touchpad at the same height with different fingers.
            y = min((c.y for c in contacts if (c.x < 0.5) == is_left), default=1.0)
            y = min(y, 1.0)
            step = -1 if is_left else 1
            key = MIDDLE_C - 1 if is_left else MIDDLE_C
            while key in used_keys:
                key += step
            self._pressed_keys[contact.uid] = key
            self.note_on.send(key, 1 - y)

        present = {contact.uid for contact in contacts}
        for uid, key in list(self._pressed_keys.items()):
            if uid not in present:
                del self._pressed_keys[uid]
                self.note_off.send(key)