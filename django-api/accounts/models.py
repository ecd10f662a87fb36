"""Django ORM models (persistence layer).

Domain logic lives in accounts/domain/models.py.
"""

from django.db import models


class CampusUser(models.Model):
    """Persistence model for campus users of every role."""

    class Role(models.TextChoices):
        STUDENT = "student"
        ORGANIZER = "organizer"
        BUSINESS = "business"

    class Channel(models.TextChoices):
        EMAIL = "email"
        PUSH = "push"

    user_id = models.CharField(max_length=64, primary_key=True)
    role = models.CharField(max_length=16, choices=Role.choices)
    email = models.EmailField()
    push_token = models.CharField(max_length=255, blank=True, null=True)
    preferred_channel = models.CharField(
        max_length=16, choices=Channel.choices, default=Channel.EMAIL
    )
    # Role-specific payload: interests, organization or company.
    role_data = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self) -> str:
        return f"{self.user_id} ({self.role})"
