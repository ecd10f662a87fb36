"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_STUDENT_ID = "INVALID_STUDENT_ID"
    INVALID_STATE = "INVALID_STATE"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    EVENT_FULL = "EVENT_FULL"
    REFERENCE_INVALID = "REFERENCE_INVALID"
    VALIDATOR_UNAVAILABLE = "VALIDATOR_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidStudentIdError(DomainError):
    """Raised when a student ID is blank."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STUDENT_ID,
            message="Invalid student ID",
        )


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed in the event's current status."""

    def __init__(self, event_id: str, status: str, operation: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATE,
            message=f"Cannot {operation} an event that is {status}",
        )
        self.event_id = event_id
        self.status = status


class DuplicateRegistrationError(DomainError):
    """Raised when the student is already registered for the event."""

    def __init__(self, event_id: str, student_id: str) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message="Student is already registered for this event",
        )
        self.event_id = event_id
        self.student_id = student_id


class EventFullError(DomainError):
    """Raised when a capacity-bound event has no free places."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_FULL,
            message="Event has reached its capacity",
        )
        self.event_id = event_id


class ReferenceInvalidError(DomainError):
    """Raised when an event reference fails verification."""

    def __init__(self, details: str, code: ErrorCode = ErrorCode.REFERENCE_INVALID) -> None:
        super().__init__(
            code=code,
            message="Event reference could not be verified",
        )
        self.details = details


class ValidatorUnavailableError(ReferenceInvalidError):
    """Reference could not be checked at all (timeout, network error).

    Transient: the caller may retry the whole operation later.
    """

    def __init__(self, details: str) -> None:
        super().__init__(details, code=ErrorCode.VALIDATOR_UNAVAILABLE)
