"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import AttendeeRecord, Event, EventId, StudentId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event (with references and attendees) by ID, or None."""
        ...

    @abstractmethod
    def save_event(self, event: Event) -> None:
        """Insert or update an event's fields and references.

        Attendees are only ever written through add_attendee.
        """
        ...

    @abstractmethod
    def add_attendee(
        self, event_id: EventId, student_id: StudentId, registered_at: datetime
    ) -> bool:
        """Atomically add a student to the event's attendee set.

        Returns False without writing if the student is already present.
        """
        ...

    @abstractmethod
    def list_attendees(self, event_id: EventId) -> list[AttendeeRecord]:
        """Return attendee records ordered by registered_at ascending."""
        ...
