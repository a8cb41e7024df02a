"""Choosing which gesture controllers are active."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Set, Union

from .configuration import GestureControllerConfiguration
from .keyboard import ComputerKeyboard, ComputerKeyboardGestureController
from .midi import MidiDeviceGestureController
from .signals import Channel, Notification
from .swipe import SwipeGestureController
from .touchpad import Touchpad
from .touchpad_controller import TouchpadGestureController
from .types import GestureControllerType

GestureController = Union[
    MidiDeviceGestureController,
    TouchpadGestureController,
    ComputerKeyboardGestureController,
]


class MidiDeviceService:
    """The MIDI input devices known to the application and the one selected.

    ``event_received`` carries ``(tick, event)`` pairs from the selected device.
    """

    def __init__(
        self,
        available_devices: Iterable[str] = (),
        selected_device: Optional[str] = None,
        no_device_id: str = "",
    ) -> None:
        self.available_devices: Set[str] = set(available_devices)
        self.selected_device = selected_device
        self.no_device_id = no_device_id
        self.selected_device_changed = Notification()
        self.startup_selection_finished = Notification()
        self.activity_detected = Notification()
        self.event_received = Channel()

    def is_available(self, device: str) -> bool:
        """Whether ``device`` is currently connected."""
        return device in self.available_devices

    def is_no_device(self, device: str) -> bool:
        """Whether ``device`` is the placeholder meaning "no device"."""
        return device == self.no_device_id

    def select_device(self, device: Optional[str]) -> None:
        """Select ``device`` and notify listeners."""
        self.selected_device = device
        self.selected_device_changed.notify()


class GestureControllerSelector:
    """Creates and tears down gesture controllers according to the selection."""

    def __init__(
        self,
        midi_device_service: MidiDeviceService,
        configuration: GestureControllerConfiguration,
        keyboard: Optional[ComputerKeyboard] = None,
        touchpad_factory: Callable[[], Touchpad] = Touchpad,
    ) -> None:
        self.midi_device_service = midi_device_service
        self.configuration = configuration
        self.keyboard = keyboard if keyboard is not None else ComputerKeyboard()
        self._touchpad_factory = touchpad_factory
        self._touchpad: Optional[Touchpad] = None
        self._touchpad_controller: Optional[TouchpadGestureController] = None
        self._keyboard_controller: Optional[ComputerKeyboardGestureController] = None
        self._midi_controller: Optional[MidiDeviceGestureController] = None
        self.touchpad_controller_changed = Notification()
        self.selected_controllers_changed = Notification()
        self.activity_detected_on_midi_controller_while_deselected = Notification()

    def init(self) -> None:
        """Start following the MIDI device service."""
        service = self.midi_device_service
        service.selected_device_changed.connect(self._do_fallback_selection)
        service.startup_selection_finished.connect(self._do_startup_selection)
        service.activity_detected.connect(self._on_midi_activity)

    def _on_midi_activity(self) -> None:
        if self.get_selected_controller(GestureControllerType.MIDI_DEVICE) is None:
            self.activity_detected_on_midi_controller_while_deselected.notify()

    def _midi_device_unusable(self, device: str) -> bool:
        service = self.midi_device_service
        return not service.is_available(device) or service.is_no_device(device)

    def _do_startup_selection(self) -> None:
        stored = self.configuration.read_selected_controllers()
        if stored is not None:
            self._do_set_selected_controllers(stored)
            return
        device = self.midi_device_service.selected_device
        if device is None or self._midi_device_unusable(device):
            self._do_set_selected_controllers({GestureControllerType.COMPUTER_KEYBOARD})
        else:
            self._do_set_selected_controllers({GestureControllerType.MIDI_DEVICE})

    def _do_fallback_selection(self) -> None:
        if self.configuration.read_selected_controllers() is not None:
            return
        device = self.midi_device_service.selected_device
        if device is None:
            self._do_set_selected_controllers({GestureControllerType.COMPUTER_KEYBOARD})
        elif self._midi_device_unusable(device):
            self._do_set_selected_controllers(
                {GestureControllerType.COMPUTER_KEYBOARD, GestureControllerType.MIDI_DEVICE}
            )
        else:
            self._do_set_selected_controllers({GestureControllerType.MIDI_DEVICE})

    def functional_controllers(self) -> Set[GestureControllerType]:
        """The controller types that can be used on this system."""
        checks = {
            GestureControllerType.MIDI_DEVICE: MidiDeviceGestureController.is_functional,
            GestureControllerType.TOUCHPAD: TouchpadGestureController.is_functional,
            GestureControllerType.COMPUTER_KEYBOARD: ComputerKeyboardGestureController.is_functional,
            GestureControllerType.SWIPE: SwipeGestureController.is_functional,
        }
        return {kind for kind, is_functional in checks.items() if is_functional()}

    def set_selected_controllers(self, types: Iterable[GestureControllerType]) -> None:
        """Select exactly ``types`` and, if anything changed, store the selection."""
        if self._do_set_selected_controllers(set(types)):
            self.configuration.write_selected_controllers(self.selected_controllers())

    def add_selected_controller(self, controller_type: GestureControllerType) -> None:
        """Add ``controller_type`` to the current selection."""
        self.set_selected_controllers(self.selected_controllers() | {controller_type})

    def _do_set_selected_controllers(self, types: Set[GestureControllerType]) -> bool:
        changed = False

        needs_touchpad = GestureControllerType.TOUCHPAD in types
        if self._touchpad_controller is not None and not needs_touchpad:
            changed = True
            self._touchpad_controller.close()
            self._touchpad_controller = None
            if self._touchpad is not None:
                self._touchpad.close()
                self._touchpad = None
            self.touchpad_controller_changed.notify()
        elif (
            self._touchpad_controller is None
            and needs_touchpad
            and TouchpadGestureController.is_functional()
        ):
            changed = True
            self._touchpad = self._touchpad_factory()
            self._touchpad_controller = TouchpadGestureController(self._touchpad)
            self.touchpad_controller_changed.notify()

        needs_keyboard = GestureControllerType.COMPUTER_KEYBOARD in types
        if self._keyboard_controller is not None and not needs_keyboard:
            changed = True
            self._keyboard_controller.close()
            self._keyboard_controller = None
        elif (
            self._keyboard_controller is None
            and needs_keyboard
            and ComputerKeyboardGestureController.is_functional()
        ):
            changed = True
            self._keyboard_controller = ComputerKeyboardGestureController(self.keyboard)

        needs_midi = GestureControllerType.MIDI_DEVICE in types
        if self._midi_controller is not None and not needs_midi:
            changed = True
            self._midi_controller.close()
            self._midi_controller = None
        elif (
            self._midi_controller is None
            and needs_midi
            and MidiDeviceGestureController.is_functional()
        ):
            changed = True
            self._midi_controller = MidiDeviceGestureController(
                self.midi_device_service.event_received
            )

        if changed:
            self.selected_controllers_changed.notify()
        return changed

    def selected_controllers(self) -> Set[GestureControllerType]:
        """The controller types currently active."""
        types: Set[GestureControllerType] = set()
        if self._touchpad_controller is not None:
            types.add(GestureControllerType.TOUCHPAD)
        if self._keyboard_controller is not None:
            types.add(GestureControllerType.COMPUTER_KEYBOARD)
        if self._midi_controller is not None:
            types.add(GestureControllerType.MIDI_DEVICE)
        return types

    def get_selected_controller(
        self, controller_type: GestureControllerType
    ) -> Optional[GestureController]:
        """The active controller of ``controller_type``, or None."""
        if controller_type == GestureControllerType.MIDI_DEVICE:
            return self._midi_controller
        if controller_type == GestureControllerType.TOUCHPAD:
            return self._touchpad_controller
        if controller_type == GestureControllerType.SWIPE:
            return None
        if controller_type == GestureControllerType.COMPUTER_KEYBOARD:
            return self._keyboard_controller
        raise ValueError(f"unknown gesture controller type: {controller_type!r}")

    def get_touchpad_controller(self) -> Optional[TouchpadGestureController]:
        """The active touchpad controller, or None."""
        return self._touchpad_controller