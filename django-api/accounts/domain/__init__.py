from accounts.domain.models import (
    BusinessData,
    ContactChannel,
    OrganizerData,
    Role,
    StudentData,
    User,
    UserId,
)

__all__ = [
    "User",
    "UserId",
    "Role",
    "ContactChannel",
    "StudentData",
    "OrganizerData",
    "BusinessData",
]
