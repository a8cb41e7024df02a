import dataclasses

import pytest

from orchestrion.types import (
    Contact,
    DeviceType,
    GestureControllerType,
    TouchpadContact,
    TouchpadScan,
    choose_devices_submenu,
)


def test_submenu_ids_match_device_types():
    assert choose_devices_submenu(DeviceType.MIDI_CONTROLLER) == "chooseMidiControllerSubmenu"
    assert choose_devices_submenu(DeviceType.MIDI_SYNTHESIZER) == "chooseMidiSynthesizerSubmenu"
    assert choose_devices_submenu(DeviceType.PLAYBACK_DEVICE) == "choosePlaybackDeviceSubmenu"


def test_submenu_ids_are_distinct_for_all_device_types():
    ids = {choose_devices_submenu(t) for t in DeviceType}
    assert len(ids) == len(DeviceType)


def test_submenu_unknown_type_raises():
    with pytest.raises(KeyError):
        choose_devices_submenu("not-a-device")


def test_controller_type_order_matches_serialised_integers():
    values = [int(t) for t in GestureControllerType]
    assert values == list(range(len(GestureControllerType)))
    assert GestureControllerType(int(GestureControllerType.COMPUTER_KEYBOARD)) is (
        GestureControllerType.COMPUTER_KEYBOARD
    )


def test_contact_is_immutable_and_comparable():
    contact = Contact(uid=3, x=0.25, y=0.75)
    assert contact == Contact(3, 0.25, 0.75)
    with pytest.raises(dataclasses.FrozenInstanceError):
        contact.x = 0.5


def test_touchpad_contact_defaults():
    contact = TouchpadContact()
    assert contact.number == -1
    assert (contact.x, contact.y) == (0.0, 0.0)


def test_touchpad_scan_contacts_are_not_shared():
    first = TouchpadScan(scan_time=10)
    second = TouchpadScan(scan_time=20)
    first.contacts.append(TouchpadContact(1, 0.1, 0.2))
    assert second.contacts == []
    assert first.contacts == [TouchpadContact(1, 0.1, 0.2)]