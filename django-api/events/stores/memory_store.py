"""In-memory EventStore used by unit tests and the memory backend."""

import threading
from dataclasses import replace
from datetime import datetime

from events.domain import AttendeeRecord, Event, EventId, StudentId
from events.stores.interfaces import EventStore


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self._events: dict[EventId, Event] = {}
        self._attendees: dict[EventId, dict[StudentId, AttendeeRecord]] = {}
        self._lock = threading.Lock()

    def get_event(self, event_id: EventId) -> Event | None:
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return None
            return replace(event, attendees=frozenset(self._attendees.get(event_id, {})))

    def save_event(self, event: Event) -> None:
        with self._lock:
            self._events[event.id] = replace(event, attendees=frozenset())
            self._attendees.setdefault(event.id, {})

    def add_attendee(
        self, event_id: EventId, student_id: StudentId, registered_at: datetime
    ) -> bool:
        with self._lock:
            attendees = self._attendees.setdefault(event_id, {})
            if student_id in attendees:
                return False
            attendees[student_id] = AttendeeRecord(event_id, student_id, registered_at)
            return True

    def list_attendees(self, event_id: EventId) -> list[AttendeeRecord]:
        with self._lock:
            records = self._attendees.get(event_id, {}).values()
            return sorted(records, key=lambda record: record.registered_at)
