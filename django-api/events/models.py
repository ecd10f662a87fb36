"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    class Status(models.TextChoices):
        DRAFT = "draft"
        PUBLISHED = "published"
        CANCELLED = "cancelled"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    organizer_id = models.CharField(max_length=64)
    title = models.CharField(max_length=255)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.DRAFT)
    capacity = models.PositiveIntegerField(blank=True, null=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "-created_at"]),
        ]

    def __str__(self) -> str:
        return self.title


class Reference(models.Model):
    """Persistence model for event references, kept in attachment order."""

    class Kind(models.TextChoices):
        QR = "qr"
        URL = "url"

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="references")
    position = models.PositiveIntegerField()
    kind = models.CharField(max_length=8, choices=Kind.choices)
    payload = models.TextField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["event", "position"], name="unique_reference_position"),
        ]

    def __str__(self) -> str:
        return f"{self.kind}: {self.payload[:40]}"


class Attendee(models.Model):
    """Persistence model for registrations."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="attendees")
    student_id = models.CharField(max_length=64)
    registered_at = models.DateTimeField()

    class Meta:
        ordering = ["registered_at"]
        constraints = [
            models.UniqueConstraint(fields=["event", "student_id"], name="unique_event_attendee"),
        ]
        indexes = [
            models.Index(fields=["event"]),
        ]

    def __str__(self) -> str:
        return f"{self.event.title} - {self.student_id}"
