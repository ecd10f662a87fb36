"""Builds the process-wide EventRegistry from Django settings.

The registry must be shared: its per-event locks only serialize callers
that go through the same instance.
"""

from functools import lru_cache

from django.conf import settings

from accounts.stores.django_store import DjangoUserStore
from accounts.stores.interfaces import UserStore
from accounts.stores.memory_store import InMemoryUserStore
from events.services.event_registry import EventRegistry
from events.services.reference_validator import (
    CachingReferenceValidator,
    LiveReferenceValidator,
    ReferenceValidator,
)
from events.stores.django_store import DjangoEventStore
from events.stores.interfaces import EventStore
from events.stores.memory_store import InMemoryEventStore
from notifications.channels import ChannelRegistry, EmailChannel, PushChannel
from notifications.dispatcher import NotificationDispatcher


def build_stores() -> tuple[EventStore, UserStore]:
    if settings.EVENT_STORE == "memory":
        return InMemoryEventStore(), InMemoryUserStore()
    return DjangoEventStore(), DjangoUserStore()


def build_validator() -> ReferenceValidator:
    validator: ReferenceValidator = LiveReferenceValidator(
        timeout=settings.REFERENCE_VALIDATION_TIMEOUT
    )
    if settings.REFERENCE_CACHE_TTL > 0:
        validator = CachingReferenceValidator(validator, ttl=settings.REFERENCE_CACHE_TTL)
    return validator


def build_dispatcher() -> NotificationDispatcher:
    channels = ChannelRegistry([EmailChannel(), PushChannel()])
    return NotificationDispatcher(channels, timeout=settings.NOTIFICATION_TIMEOUT)


@lru_cache(maxsize=1)
def get_event_registry() -> EventRegistry:
    store, users = build_stores()
    return EventRegistry(
        store=store,
        validator=build_validator(),
        dispatcher=build_dispatcher(),
        users=users,
        validation_timeout=settings.REFERENCE_VALIDATION_TIMEOUT,
    )
