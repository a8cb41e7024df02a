"""Turns raw touchpad scans into contacts with stable unique ids."""

from __future__ import annotations

import itertools
import threading
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterator, List, MutableMapping, Optional

from .clock import Clock, SteadyClock
from .signals import Channel
from .types import Contact, TouchpadScan

# A contact not seen for longer than this (ms, in scan time) gets a new uid.
CONTACT_GAP_MS = 20
# Without any scan for this long (seconds), all contacts are considered lifted.
RELEASE_TIMEOUT = 0.150


@dataclass
class ContactInfo:
    """The uid currently assigned to a raw contact and when it was last seen."""

    uid: int
    last_scan_time: int


def scan_to_contacts(
    scan: TouchpadScan,
    uid_map: MutableMapping[int, ContactInfo],
    uids: Iterator[int],
) -> List[Contact]:
    """Convert ``scan`` to contacts, updating ``uid_map`` and drawing new uids from ``uids``."""
    contacts: List[Contact] = []
    for raw in scan.contacts:
        info = uid_map.get(raw.number)
        if info is None:
            info = ContactInfo(next(uids), scan.scan_time)
            uid_map[raw.number] = info
        if scan.scan_time - info.last_scan_time > CONTACT_GAP_MS:
            info.uid = next(uids)
        info.last_scan_time = scan.scan_time
        contacts.append(Contact(info.uid, raw.x, raw.y))
    return contacts


class TouchpadProcessor:
    """Processes scans on a worker thread and broadcasts contacts on ``contact_changed``.

    When no scan arrives for a while after the last one, an empty contact list
    is sent and all uid assignments are forgotten.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.contact_changed = Channel()
        self._clock = clock if clock is not None else SteadyClock()
        self._condition = threading.Condition()
        self._queue: Deque[TouchpadScan] = deque()
        self._last_contact_time: Optional[float] = None
        self._uid_map: Dict[int, ContactInfo] = {}
        self._uids = itertools.count()
        self._running = True
        self._thread = threading.Thread(
            target=self._run, name="touchpad-processor", daemon=True
        )
        self._thread.start()

    def process(self, scan: TouchpadScan) -> None:
        """Queue ``scan`` for processing."""
        now = self._clock.now()
        with self._condition:
            self._last_contact_time = now
            self._queue.append(scan)
            self._condition.notify()

    def close(self) -> None:
        """Stop the worker thread and wait for it to finish."""
        with self._condition:
            self._running = False
            self._condition.notify_all()
        if self._thread.is_alive() and self._thread is not threading.current_thread():
            self._thread.join()

    def __enter__(self) -> "TouchpadProcessor":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _ready(self) -> bool:
        return bool(self._queue) or not self._running

    def _run(self) -> None:
        while True:
            with self._condition:
                if self._last_contact_time is None:
                    self._condition.wait_for(self._ready)
                else:
                    deadline = self._last_contact_time + RELEASE_TIMEOUT
                    timeout = max(0.0, deadline - self._clock.now())
                    self._condition.wait_for(self._ready, timeout)

                if not self._running:
                    return

                if self._queue:
                    scan = self._queue.popleft()
                    contacts = scan_to_contacts(scan, self._uid_map, self._uids)
                else:
                    self._uid_map.clear()
                    self._last_contact_time = None
                    contacts = []

            self.contact_changed.send(contacts)