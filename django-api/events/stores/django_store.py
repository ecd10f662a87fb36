"""Django ORM implementation of the EventStore."""

from datetime import datetime

from django.db import IntegrityError, transaction

from events import models as orm
from events.domain import (
    AttendeeRecord,
    Capacity,
    Event,
    EventId,
    EventStatus,
    Reference,
    ReferenceKind,
    StudentId,
)
from events.stores.interfaces import EventStore


def _to_domain(row: orm.Event) -> Event:
    return Event(
        id=EventId(row.id),
        organizer_id=row.organizer_id,
        title=row.title,
        status=EventStatus(row.status),
        created_at=row.created_at,
        references=tuple(
            Reference(kind=ReferenceKind(ref.kind), payload=ref.payload)
            for ref in row.references.all()
        ),
        attendees=frozenset(
            StudentId(student_id)
            for student_id in row.attendees.values_list("student_id", flat=True)
        ),
        capacity=Capacity(row.capacity) if row.capacity is not None else None,
    )


class DjangoEventStore(EventStore):
    """Database-backed event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        row = (
            orm.Event.objects.prefetch_related("references")
            .filter(id=event_id.value)
            .first()
        )
        if row is None:
            return None
        return _to_domain(row)

    @transaction.atomic
    def save_event(self, event: Event) -> None:
        row, _ = orm.Event.objects.update_or_create(
            id=event.id.value,
            defaults={
                "organizer_id": event.organizer_id,
                "title": event.title,
                "status": event.status.value,
                "capacity": event.capacity.value if event.capacity else None,
                "created_at": event.created_at,
            },
        )
        row.references.all().delete()
        orm.Reference.objects.bulk_create(
            orm.Reference(event=row, position=position, kind=ref.kind.value, payload=ref.payload)
            for position, ref in enumerate(event.references)
        )

    def add_attendee(
        self, event_id: EventId, student_id: StudentId, registered_at: datetime
    ) -> bool:
        # The unique (event, student_id) constraint makes the check-and-add
        # atomic across processes, not only within one registry.
        try:
            with transaction.atomic():
                orm.Attendee.objects.create(
                    event_id=event_id.value,
                    student_id=student_id.value,
                    registered_at=registered_at,
                )
        except IntegrityError:
            return False
        return True

    def list_attendees(self, event_id: EventId) -> list[AttendeeRecord]:
        rows = orm.Attendee.objects.filter(event_id=event_id.value).order_by("registered_at")
        return [
            AttendeeRecord(
                event_id=event_id,
                student_id=StudentId(row.student_id),
                registered_at=row.registered_at,
            )
            for row in rows
        ]
