"""Domain representation of campus users.

Students, organizers and businesses share one User entity. The role tag
decides which data variant the user carries.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(Enum):
    STUDENT = "student"
    ORGANIZER = "organizer"
    BUSINESS = "business"


class ContactChannel(Enum):
    EMAIL = "email"
    PUSH = "push"


@dataclass(frozen=True)
class UserId:
    """Opaque user identifier (student number, staff handle, ...)."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class StudentData:
    interests: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class OrganizerData:
    organization: str


@dataclass(frozen=True)
class BusinessData:
    company: str


RoleData = StudentData | OrganizerData | BusinessData

_ROLE_DATA_TYPES: dict[Role, type] = {
    Role.STUDENT: StudentData,
    Role.ORGANIZER: OrganizerData,
    Role.BUSINESS: BusinessData,
}


@dataclass(frozen=True)
class User:
    """Domain representation of a User."""

    id: UserId
    role: Role
    data: RoleData
    email: str
    push_token: str | None = None
    preferred_channel: ContactChannel = ContactChannel.EMAIL

    def __post_init__(self) -> None:
        expected = _ROLE_DATA_TYPES[self.role]
        if not isinstance(self.data, expected):
            raise ValueError(
                f"{self.role.value} users require {expected.__name__}, "
                f"got {type(self.data).__name__}"
            )
