"""Lightweight synchronous signal primitives used to wire components together."""

from __future__ import annotations

from typing import Any, Callable, List


class Channel:
    """A broadcast channel that delivers values to every connected callback."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register ``callback``; it is called with the values of each ``send``."""
        self._callbacks.append(callback)
        return callback

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Unregister ``callback``; raises ValueError if it was never connected."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not connected to this channel") from None

    def send(self, *args: Any) -> None:
        """Deliver ``args`` to all connected callbacks in connection order."""
        for callback in list(self._callbacks):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)


class Notification:
    """A value-less signal: connected callbacks are called with no arguments."""

    def __init__(self) -> None:
        self._callbacks: List[Callable[[], Any]] = []

    def connect(self, callback: Callable[[], Any]) -> Callable[[], Any]:
        """Register ``callback`` to be called on each ``notify``."""
        self._callbacks.append(callback)
        return callback

    def disconnect(self, callback: Callable[[], Any]) -> None:
        """Unregister ``callback``; raises ValueError if it was never connected."""
        try:
            self._callbacks.remove(callback)
        except ValueError:
            raise ValueError("callback is not connected to this notification") from None

    def notify(self) -> None:
        """Call every connected callback in connection order."""
        for callback in list(self._callbacks):
            callback()

    def __len__(self) -> int:
        return len(self._callbacks)