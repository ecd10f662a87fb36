"""Pytest configuration and shared fixtures."""

import threading
from collections.abc import Callable

import pytest
from rest_framework.test import APIClient

from accounts.domain import ContactChannel, OrganizerData, Role, User, UserId
from accounts.stores.memory_store import InMemoryUserStore
from events.domain import Event, Reference, ReferenceKind
from events.services.event_registry import EventRegistry
from events.services.reference_validator import ReferenceValidator, ValidationOutcome
from events.stores.memory_store import InMemoryEventStore
from notifications.channels import ChannelRegistry, DeliveryOutcome, NotificationChannel
from notifications.dispatcher import NotificationDispatcher
from notifications.messages import Message

ORGANIZER_ID = "org-7"


class FakeValidator(ReferenceValidator):
    """Validator answering from a payload -> outcome table; valid by default."""

    def __init__(self) -> None:
        self.outcomes: dict[str, ValidationOutcome] = {}
        self.calls: list[Reference] = []
        self._lock = threading.Lock()

    def validate(self, reference: Reference) -> ValidationOutcome:
        with self._lock:
            self.calls.append(reference)
        return self.outcomes.get(reference.payload, ValidationOutcome(True, "ok"))


class RecordingChannel(NotificationChannel):
    """Channel that records messages instead of sending them."""

    def __init__(self, name: str, fail: bool = False, reachable: bool = True) -> None:
        self.name = name
        self.fail = fail
        self.reachable = reachable
        self.sent: list[tuple[User, Message]] = []

    def can_deliver(self, recipient: User) -> bool:
        return self.reachable

    def send(self, recipient: User, message: Message) -> DeliveryOutcome:
        if self.fail:
            return DeliveryOutcome(False, f"{self.name} down")
        self.sent.append((recipient, message))
        return DeliveryOutcome(True)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def organizer() -> User:
    return User(
        id=UserId(ORGANIZER_ID),
        role=Role.ORGANIZER,
        data=OrganizerData(organization="Chess Club"),
        email="chess@campus.edu",
        push_token="device-1",
        preferred_channel=ContactChannel.EMAIL,
    )


@pytest.fixture
def user_store(organizer: User) -> InMemoryUserStore:
    store = InMemoryUserStore()
    store.save_user(organizer)
    return store


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def validator() -> FakeValidator:
    return FakeValidator()


@pytest.fixture
def email_channel() -> RecordingChannel:
    return RecordingChannel("email")


@pytest.fixture
def push_channel() -> RecordingChannel:
    return RecordingChannel("push")


@pytest.fixture
def dispatcher(email_channel: RecordingChannel, push_channel: RecordingChannel) -> NotificationDispatcher:
    return NotificationDispatcher(ChannelRegistry([email_channel, push_channel]), timeout=1.0)


@pytest.fixture
def registry(
    event_store: InMemoryEventStore,
    validator: FakeValidator,
    dispatcher: NotificationDispatcher,
    user_store: InMemoryUserStore,
) -> EventRegistry:
    return EventRegistry(
        store=event_store,
        validator=validator,
        dispatcher=dispatcher,
        users=user_store,
        validation_timeout=1.0,
    )


@pytest.fixture
def make_published_event(registry: EventRegistry) -> Callable[..., Event]:
    def make(references: tuple[Reference, ...] | None = None, capacity: int | None = None) -> Event:
        if references is None:
            references = (
                Reference(ReferenceKind.URL, "https://chess.campus.edu/spring-open"),
                Reference(ReferenceKind.QR, "https://chess.campus.edu/qr/1"),
            )
        event = registry.create_event(ORGANIZER_ID, "Spring Open", references, capacity)
        return registry.publish(str(event.id)).event

    return make
