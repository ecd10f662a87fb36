"""Django ORM models (persistence layer).

Domain logic lives in ads/domain/models.py.
"""

import uuid

from django.db import models


class Ad(models.Model):
    """Persistence model for calendar ads."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    business_id = models.CharField(max_length=64)
    title = models.CharField(max_length=255)
    target_criteria = models.JSONField(default=dict, blank=True)
    view_count = models.PositiveBigIntegerField(default=0)
    view_budget = models.PositiveBigIntegerField(blank=True, null=True)
    active = models.BooleanField(default=True)
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["created_at", "id"]
        indexes = [
            models.Index(fields=["active", "created_at"]),
        ]

    def __str__(self) -> str:
        return self.title
