from events.handlers.views import (
    EventCancelView,
    EventDetailView,
    EventListView,
    EventPublishView,
    RegistrationListView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "EventPublishView",
    "EventCancelView",
    "RegistrationListView",
]
