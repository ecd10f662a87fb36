"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from urllib.parse import urlparse
from uuid import UUID, uuid4


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    @classmethod
    def new(cls) -> Self:
        return cls(value=uuid4())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class StudentId:
    """Identity of a student registering for events."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("StudentId cannot be empty")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Capacity:
    """Non-negative upper bound on attendees."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")


class ReferenceKind(Enum):
    QR = "qr"
    URL = "url"


@dataclass(frozen=True)
class Reference:
    """Organizer-supplied verifiable claim: a QR payload or a URL."""

    kind: ReferenceKind
    payload: str

    def __post_init__(self) -> None:
        if not self.payload or not self.payload.strip():
            raise ValueError("Reference payload cannot be empty")


def is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
