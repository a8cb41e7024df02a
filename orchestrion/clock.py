"""Clocks that report monotonic time in seconds."""

from __future__ import annotations

import abc
import time


class Clock(abc.ABC):
    """Source of monotonic time, in seconds."""

    @abc.abstractmethod
    def now(self) -> float:
        """Return the current time in seconds."""


class SteadyClock(Clock):
    """A clock backed by the system's monotonic timer."""

    def now(self) -> float:
        """Return the monotonic time in seconds."""
        return time.monotonic()