"""Touchpad swipes as a gesture controller: a vertical stroke plays a note."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from .signals import Channel
from .types import Contact

LEFT_NOTE = 59
RIGHT_NOTE = 60

# Average time between touchpad samples measured in experiments (seconds).
SAMPLE_PERIOD = 0.006846681922196797
# Minimum per-sample vertical movement that counts as swiping, found by tuning.
SWIPE_THRESHOLD = 0.26390520554812824 * SAMPLE_PERIOD
# Samples a swipe must last before its end triggers a note.
MIN_SWIPE_SAMPLES = 7


class _ContactSource(Protocol):
    contact_changed: Channel


class Direction(enum.Enum):
    """Direction of the movement at the end of a swipe."""

    UP = "up"
    DOWN = "down"


class _Side(enum.Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class _Finger:
    id: int
    prev_y: float
    swiping: bool = False
    swiping_for: int = 0
    swipe_start_y: float = 0.0
    triggering_direction: Optional[Direction] = None


class SwipeGestureController:
    """Plays a note when a finger ends a vertical swipe.

    One finger is tracked on each half of the touchpad: the left one plays
    LEFT_NOTE and the right one RIGHT_NOTE. The velocity is the swipe's
    amplitude. Lifting a finger that has triggered a note releases it.
    """

    def __init__(self, touchpad: _ContactSource) -> None:
        self.note_on = Channel()
        self.note_off = Channel()
        self._touchpad = touchpad
        self._left: Optional[_Finger] = None
        self._right: Optional[_Finger] = None
        self._connected = True
        touchpad.contact_changed.connect(self.on_contacts)

    @staticmethod
    def is_functional() -> bool:
        """The swipe controller is not usable yet."""
        return False

    def close(self) -> None:
        """Stop listening to the touchpad."""
        if self._connected:
            self._touchpad.contact_changed.disconnect(self.on_contacts)
            self._connected = False

    def _finger(self, side: _Side) -> Optional[_Finger]:
        return self._left if side is _Side.LEFT else self._right

    def _set_finger(self, side: _Side, finger: Optional[_Finger]) -> None:
        if side is _Side.LEFT:
            self._left = finger
        else:
            self._right = finger

    @staticmethod
    def _note(side: _Side) -> int:
        return LEFT_NOTE if side is _Side.LEFT else RIGHT_NOTE

    def on_contacts(self, contacts: Sequence[Contact]) -> None:
        """Update finger tracking with the current contacts and emit notes."""
        present = {contact.uid for contact in contacts}
        for side in _Side:
            finger = self._finger(side)
            if finger is not None and finger.id not in present:
                if finger.triggering_direction is not None:
                    self.note_off.send(self._note(side))
                self._set_finger(side, None)

        for contact in contacts:
            if self._left is not None and self._left.id == contact.uid:
                side = _Side.LEFT
            elif self._right is not None and self._right.id == contact.uid:
                side = _Side.RIGHT
            else:
                new_side = _Side.LEFT if contact.x < 0.5 else _Side.RIGHT
                self._set_finger(new_side, _Finger(contact.uid, contact.y))
                continue

            finger = self._finger(side)
            assert finger is not None
            dy = contact.y - finger.prev_y
            finger.prev_y = contact.y

            if abs(dy) > SWIPE_THRESHOLD:
                if not finger.swiping:
                    finger.swiping = True
                    finger.swipe_start_y = contact.y
                finger.swiping_for += 1
            else:
                direction = Direction.UP if dy > 0 else Direction.DOWN
                if (
                    finger.swiping
                    and finger.swiping_for >= MIN_SWIPE_SAMPLES
                    and finger.triggering_direction != direction
                ):
                    amplitude = abs(contact.y - finger.swipe_start_y)
                    self.note_on.send(self._note(side), amplitude)
                    finger.triggering_direction = direction
                finger.swiping = False
                finger.swiping_for = 0