import pytest

from orchestrion.signals import Channel
from orchestrion.swipe import (
    LEFT_NOTE,
    MIN_SWIPE_SAMPLES,
    RIGHT_NOTE,
    SwipeGestureController,
)
from orchestrion.types import Contact


class FakeTouchpad:
    def __init__(self):
        self.contact_changed = Channel()


@pytest.fixture
def setup():
    pad = FakeTouchpad()
    controller = SwipeGestureController(pad)
    ons, offs = [], []
    controller.note_on.connect(lambda note, vel: ons.append((note, vel)))
    controller.note_off.connect(offs.append)
    return pad, controller, ons, offs


def swipe(pad, uid, x, start, moves, step=0.01, final_dy=0.0):
    ys = [start + step * i for i in range(moves + 1)]
    for y in ys:
        pad.contact_changed.send([Contact(uid, x, y)])
    last = ys[-1] + final_dy
    pad.contact_changed.send([Contact(uid, x, last)])
    return ys[1], last


def test_not_functional():
    assert SwipeGestureController.is_functional() is False


def test_new_contact_emits_nothing(setup):
    pad, _, ons, offs = setup
    pad.contact_changed.send([Contact(1, 0.2, 0.5)])
    assert ons == [] and offs == []


def test_long_swipe_on_left_triggers_left_note(setup):
    pad, _, ons, _ = setup
    start, end = swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES + 1)
    assert len(ons) == 1
    note, velocity = ons[0]
    assert note == LEFT_NOTE
    assert velocity == pytest.approx(abs(end - start))


def test_right_side_plays_right_note(setup):
    pad, _, ons, _ = setup
    swipe(pad, 2, 0.8, 0.1, MIN_SWIPE_SAMPLES)
    assert [note for note, _ in ons] == [RIGHT_NOTE]


def test_short_swipe_does_not_trigger(setup):
    pad, _, ons, _ = setup
    swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES - 1)
    assert ons == []


def test_lifting_triggered_finger_releases_note(setup):
    pad, _, ons, offs = setup
    swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES)
    pad.contact_changed.send([])
    assert len(ons) == 1
    assert offs == [LEFT_NOTE]


def test_lifting_untriggered_finger_emits_nothing(setup):
    pad, _, ons, offs = setup
    swipe(pad, 1, 0.2, 0.1, 2)
    pad.contact_changed.send([])
    assert ons == [] and offs == []


def test_same_direction_does_not_retrigger(setup):
    pad, _, ons, _ = setup
    swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES)
    swipe(pad, 1, 0.2, 0.3, MIN_SWIPE_SAMPLES)
    assert len(ons) == 1


def test_other_direction_retriggers(setup):
    pad, _, ons, _ = setup
    swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES)
    swipe(pad, 1, 0.2, 0.3, MIN_SWIPE_SAMPLES, final_dy=0.0001)
    assert [note for note, _ in ons] == [LEFT_NOTE, LEFT_NOTE]


def test_close_disconnects(setup):
    pad, controller, ons, _ = setup
    controller.close()
    controller.close()
    assert len(pad.contact_changed) == 0
    swipe(pad, 1, 0.2, 0.1, MIN_SWIPE_SAMPLES)
    assert ons == []