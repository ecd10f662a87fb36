from events.domain.models import (
    AttendeeRecord,
    Event,
    EventStatus,
    PublishResult,
    RegistrationResult,
)
from events.domain.value_objects import (
    Capacity,
    EventId,
    Reference,
    ReferenceKind,
    StudentId,
)

__all__ = [
    "Event",
    "EventStatus",
    "AttendeeRecord",
    "RegistrationResult",
    "PublishResult",
    "EventId",
    "StudentId",
    "Capacity",
    "Reference",
    "ReferenceKind",
]
