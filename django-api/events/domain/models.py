"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum

from events.domain.value_objects import Capacity, EventId, Reference, StudentId


class EventStatus(Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event.

    `organizer_id` is a lookup key only; the organizer does not own the event.
    """

    id: EventId
    organizer_id: str
    title: str
    status: EventStatus
    created_at: datetime
    references: tuple[Reference, ...] = ()
    attendees: frozenset[StudentId] = field(default_factory=frozenset)
    capacity: Capacity | None = None

    @property
    def is_full(self) -> bool:
        return self.capacity is not None and len(self.attendees) >= self.capacity.value

    def with_status(self, status: EventStatus) -> "Event":
        return replace(self, status=status)


@dataclass(frozen=True)
class AttendeeRecord:
    """A student's registration for one event."""

    event_id: EventId
    student_id: StudentId
    registered_at: datetime


@dataclass(frozen=True)
class RegistrationResult:
    """Outcome of a successful registration.

    `warnings` carries non-fatal problems, such as a failed organizer
    notification.
    """

    event_id: EventId
    student_id: StudentId
    registered_at: datetime
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class PublishResult:
    event: Event
    published_at: datetime
