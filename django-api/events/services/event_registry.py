"""Event registry - all event lifecycle and registration logic lives here.

Services:
- Depend only on interfaces (stores, validators, dispatcher)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors
"""

from collections.abc import Callable, Sequence
from dataclasses import replace
from datetime import datetime

import structlog
from django.utils import timezone

from accounts.domain import UserId
from accounts.stores.interfaces import UserStore
from events.domain import (
    AttendeeRecord,
    Capacity,
    Event,
    EventId,
    EventStatus,
    PublishResult,
    Reference,
    RegistrationResult,
    StudentId,
)
from events.domain.errors import (
    DomainError,
    DuplicateRegistrationError,
    EventFullError,
    EventNotFoundError,
    InvalidEventIdError,
    InvalidStateError,
    InvalidStudentIdError,
    ReferenceInvalidError,
    ValidatorUnavailableError,
)
from events.services.locks import EventLocks
from events.services.reference_validator import ReferenceValidator, find_invalid_reference
from events.stores.interfaces import EventStore
from notifications.dispatcher import NotificationDispatcher
from notifications.messages import attendee_registered_message

logger = structlog.get_logger(__name__)


class EventRegistry:
    """Owns events, their attendee sets and status transitions."""

    def __init__(
        self,
        store: EventStore,
        validator: ReferenceValidator,
        dispatcher: NotificationDispatcher,
        users: UserStore,
        validation_timeout: float,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._store = store
        self._validator = validator
        self._dispatcher = dispatcher
        self._users = users
        self._validation_timeout = validation_timeout
        self._clock = clock
        self._locks = EventLocks()

    # Queries

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        return self._get_existing(self._parse_event_id(event_id))

    def list_attendees(self, event_id: str) -> list[AttendeeRecord]:
        eid = self._parse_event_id(event_id)
        self._get_existing(eid)
        return self._store.list_attendees(eid)

    # Lifecycle

    def create_event(
        self,
        organizer_id: str,
        title: str,
        references: Sequence[Reference] = (),
        capacity: int | None = None,
    ) -> Event:
        """Create a DRAFT event."""
        event = Event(
            id=EventId.new(),
            organizer_id=organizer_id,
            title=title,
            status=EventStatus.DRAFT,
            created_at=self._clock(),
            references=tuple(references),
            capacity=Capacity(capacity) if capacity is not None else None,
        )
        self._store.save_event(event)
        logger.info("event_created", event_id=str(event.id), organizer_id=organizer_id)
        return event

    def update_references(self, event_id: str, references: Sequence[Reference]) -> Event:
        """Replace an event's references. Only DRAFT events accept changes.

        Raises:
            InvalidStateError: If the event is PUBLISHED or CANCELLED.
        """
        eid = self._parse_event_id(event_id)
        self._get_existing(eid)
        with self._locks.hold(eid):
            event = self._get_existing(eid)
            self._require_status(event, EventStatus.DRAFT, "change references of")
            updated = replace(event, references=tuple(references))
            self._store.save_event(updated)
        logger.info("event_references_updated", event_id=event_id, count=len(references))
        return updated

    def publish(self, event_id: str) -> PublishResult:
        """Move a DRAFT event to PUBLISHED once all references validate.

        References replaced while a check is running are checked again.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidStateError: If the event is not DRAFT.
            ReferenceInvalidError: If any reference fails; the event stays DRAFT.
        """
        eid = self._parse_event_id(event_id)
        event = self._get_existing(eid)
        self._require_status(event, EventStatus.DRAFT, "publish")

        published = None
        while published is None:
            self._verify_references(event)
            with self._locks.hold(eid):
                current = self._get_existing(eid)
                self._require_status(current, EventStatus.DRAFT, "publish")
                if current.references == event.references:
                    published = current.with_status(EventStatus.PUBLISHED)
                    self._store.save_event(published)
            if published is None:
                logger.info("event_references_changed_during_publish", event_id=event_id)
                event = current

        logger.info("event_published", event_id=event_id)
        return PublishResult(event=published, published_at=self._clock())

    def cancel(self, event_id: str) -> Event:
        """Cancel an event. CANCELLED is terminal.

        Raises:
            InvalidStateError: If the event is already CANCELLED.
        """
        eid = self._parse_event_id(event_id)
        self._get_existing(eid)
        with self._locks.hold(eid):
            event = self._get_existing(eid)
            if event.status is EventStatus.CANCELLED:
                raise InvalidStateError(event_id, event.status.value, "cancel")
            cancelled = event.with_status(EventStatus.CANCELLED)
            self._store.save_event(cancelled)
        logger.info("event_cancelled", event_id=event_id)
        return cancelled

    # Registration

    def register(self, event_id: str, student_id: str) -> RegistrationResult:
        """Register a student for a published event.

        Checks run in a fixed order and stop at the first failure: existence,
        status, duplicate, references. The duplicate check and the attendee
        add happen in one critical section per event. The organizer is
        notified after the section is left; a failed notification is reported
        in `warnings` and does not undo the registration.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
            InvalidStateError: If the event is not PUBLISHED.
            DuplicateRegistrationError: If the student is already registered.
            EventFullError: If the event has a capacity and it is reached.
            ReferenceInvalidError: If any reference fails verification.
        """
        eid = self._parse_event_id(event_id)
        sid = self._parse_student_id(student_id)
        log = logger.bind(event_id=event_id, student_id=student_id)

        try:
            event = self._get_existing(eid)
            self._check_can_register(event, sid)
            self._verify_references(event)

            with self._locks.hold(eid):
                current = self._get_existing(eid)
                self._check_can_register(current, sid)
                registered_at = self._clock()
                if not self._store.add_attendee(eid, sid, registered_at):
                    raise DuplicateRegistrationError(event_id, student_id)
        except DomainError as exc:
            log.info("registration_rejected", code=exc.code.value)
            raise

        log.info("attendee_registered")
        registered = replace(current, attendees=current.attendees | {sid})
        warnings = self._notify_organizer(registered, sid)
        return RegistrationResult(
            event_id=eid,
            student_id=sid,
            registered_at=registered_at,
            warnings=warnings,
        )

    # Internals

    def _parse_event_id(self, event_id: str) -> EventId:
        try:
            return EventId.from_string(event_id)
        except (ValueError, TypeError, AttributeError):
            raise InvalidEventIdError()

    def _parse_student_id(self, student_id: str) -> StudentId:
        try:
            return StudentId(student_id)
        except (ValueError, AttributeError):
            raise InvalidStudentIdError()

    def _get_existing(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(str(event_id))
        return event

    def _require_status(self, event: Event, status: EventStatus, operation: str) -> None:
        if event.status is not status:
            raise InvalidStateError(str(event.id), event.status.value, operation)

    def _check_can_register(self, event: Event, student_id: StudentId) -> None:
        self._require_status(event, EventStatus.PUBLISHED, "register for")
        if student_id in event.attendees:
            raise DuplicateRegistrationError(str(event.id), str(student_id))
        if event.is_full:
            raise EventFullError(str(event.id))

    def _verify_references(self, event: Event) -> None:
        failure = find_invalid_reference(
            self._validator, event.references, self._validation_timeout
        )
        if failure is None:
            return
        if failure.unavailable:
            raise ValidatorUnavailableError(failure.details)
        raise ReferenceInvalidError(failure.details)

    def _notify_organizer(self, event: Event, student_id: StudentId) -> tuple[str, ...]:
        try:
            organizer = self._users.get_user(UserId(event.organizer_id))
        except ValueError:
            organizer = None
        if organizer is None:
            logger.warning("organizer_not_found", event_id=str(event.id))
            return ("Organizer could not be notified: organizer not found",)

        result = self._dispatcher.dispatch(organizer, attendee_registered_message(event, student_id))
        if result.delivered:
            return ()
        logger.warning(
            "organizer_notification_failed",
            event_id=str(event.id),
            attempts=result.attempts,
            error=result.error,
        )
        return (f"Organizer could not be notified: {result.error}",)
