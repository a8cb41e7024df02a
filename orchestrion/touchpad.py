"""Touchpad device: operating-system access plus scan processing."""

from __future__ import annotations

import abc
from typing import Callable, Optional

from .clock import Clock, SteadyClock
from .signals import Channel
from .touchpad_processor import TouchpadProcessor
from .types import TouchpadScan

ScanCallback = Callable[[TouchpadScan], None]


class OperatingSystemTouchpad(abc.ABC):
    """Access to the platform's touchpad; reports scans through a callback."""

    @abc.abstractmethod
    def is_available(self) -> bool:
        """Whether a touchpad could be found and opened."""


class DummyOperatingSystemTouchpad(OperatingSystemTouchpad):
    """Stand-in for platforms without touchpad support."""

    def is_available(self) -> bool:
        return False


def create_operating_system_touchpad(callback: ScanCallback) -> OperatingSystemTouchpad:
    """Create the touchpad for this platform, delivering scans to ``callback``."""
    return DummyOperatingSystemTouchpad()


class Touchpad:
    """A touchpad whose contacts are broadcast on ``contact_changed``."""

    def __init__(
        self,
        clock: Optional[Clock] = None,
        os_touchpad_factory: Callable[
            [ScanCallback], OperatingSystemTouchpad
        ] = create_operating_system_touchpad,
    ) -> None:
        self._processor = TouchpadProcessor(clock if clock is not None else SteadyClock())
        self._os_touchpad = os_touchpad_factory(self._processor.process)

    @property
    def contact_changed(self) -> Channel:
        """Channel carrying the current list of contacts."""
        return self._processor.contact_changed

    def is_available(self) -> bool:
        """Whether the underlying touchpad is usable."""
        return self._os_touchpad.is_available()

    def close(self) -> None:
        """Stop processing scans."""
        self._processor.close()

    def __enter__(self) -> "Touchpad":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()