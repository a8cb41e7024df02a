import threading

import pytest

from orchestrion.touchpad import (
    DummyOperatingSystemTouchpad,
    OperatingSystemTouchpad,
    Touchpad,
    create_operating_system_touchpad,
)
from orchestrion.types import Contact, TouchpadContact, TouchpadScan


class _FakeOsTouchpad(OperatingSystemTouchpad):
    def __init__(self, callback):
        self.callback = callback

    def is_available(self):
        return True


def test_dummy_touchpad_is_unavailable():
    assert DummyOperatingSystemTouchpad().is_available() is False


def test_operating_system_touchpad_is_abstract():
    with pytest.raises(TypeError):
        OperatingSystemTouchpad()


def test_factory_returns_unavailable_touchpad_here():
    touchpad = create_operating_system_touchpad(lambda scan: None)
    assert isinstance(touchpad, OperatingSystemTouchpad)
    assert touchpad.is_available() is False


def test_default_touchpad_is_unavailable():
    with Touchpad() as touchpad:
        assert touchpad.is_available() is False


def test_touchpad_reports_availability_of_os_touchpad():
    with Touchpad(os_touchpad_factory=_FakeOsTouchpad) as touchpad:
        assert touchpad.is_available() is True


def test_scans_from_os_touchpad_reach_contact_channel():
    created = []

    def factory(callback):
        fake = _FakeOsTouchpad(callback)
        created.append(fake)
        return fake

    received = []
    done = threading.Event()

    with Touchpad(os_touchpad_factory=factory) as touchpad:
        def on_contacts(contacts):
            received.append(list(contacts))
            done.set()

        touchpad.contact_changed.connect(on_contacts)
        created[0].callback(TouchpadScan(0, [TouchpadContact(2, 0.5, 0.25)]))
        assert done.wait(2.0)

    assert received[0] == [Contact(0, 0.5, 0.25)]