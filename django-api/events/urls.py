from django.urls import path

from events.handlers import (
    EventCancelView,
    EventDetailView,
    EventListView,
    EventPublishView,
    RegistrationListView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("events/<str:event_id>/publish", EventPublishView.as_view(), name="event-publish"),
    path("events/<str:event_id>/cancel", EventCancelView.as_view(), name="event-cancel"),
    path(
        "events/<str:event_id>/registrations",
        RegistrationListView.as_view(),
        name="event-registrations",
    ),
]
