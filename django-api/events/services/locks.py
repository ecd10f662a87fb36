"""Per-event critical sections."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from events.domain import EventId


@dataclass
class _Entry:
    lock: threading.Lock = field(default_factory=threading.Lock)
    holders: int = 0


class EventLocks:
    """Hands out one lock per event ID.

    Calls for different events never contend with each other. An entry lives
    only while some caller holds or waits for it.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[EventId, _Entry] = {}

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)

    def _acquire_entry(self, event_id: EventId) -> _Entry:
        with self._guard:
            entry = self._locks.setdefault(event_id, _Entry())
            entry.holders += 1
            return entry

    def _release_entry(self, event_id: EventId, entry: _Entry) -> None:
        with self._guard:
            entry.holders -= 1
            if entry.holders == 0:
                del self._locks[event_id]

    @contextmanager
    def hold(self, event_id: EventId) -> Iterator[None]:
        entry = self._acquire_entry(event_id)
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry(event_id, entry)
