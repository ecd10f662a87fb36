"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.domain.errors import DomainError, ErrorCode, ReferenceInvalidError
from events.handlers.serializers import (
    AttendeeSerializer,
    EventCreateSerializer,
    EventSerializer,
    RegistrationRequestSerializer,
    RegistrationResultSerializer,
)
from events.services.event_registry import EventRegistry
from events.services.factory import get_event_registry

ERROR_STATUS = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STUDENT_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_STATE: status.HTTP_403_FORBIDDEN,
    ErrorCode.DUPLICATE_REGISTRATION: status.HTTP_409_CONFLICT,
    ErrorCode.EVENT_FULL: status.HTTP_409_CONFLICT,
    ErrorCode.REFERENCE_INVALID: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.VALIDATOR_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def error_response(exc: DomainError) -> Response:
    body: dict[str, str] = {"code": exc.code.value, "message": exc.message}
    if isinstance(exc, ReferenceInvalidError):
        body["details"] = exc.details
    return Response(body, status=ERROR_STATUS[exc.code])


class RegistryView(APIView):
    """Base view giving access to the shared EventRegistry."""

    def get_registry(self) -> EventRegistry:
        return get_event_registry()


class EventListView(RegistryView):
    """Handler for POST /api/events"""

    def post(self, request: Request) -> Response:
        serializer = EventCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        event = self.get_registry().create_event(
            organizer_id=serializer.validated_data["organizer_id"],
            title=serializer.validated_data["title"],
            references=serializer.domain_references(),
            capacity=serializer.validated_data.get("capacity"),
        )
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(RegistryView):
    """Handler for GET /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            event = self.get_registry().get_event(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)


class EventPublishView(RegistryView):
    """Handler for POST /api/events/{event_id}/publish"""

    def post(self, request: Request, event_id: str) -> Response:
        try:
            result = self.get_registry().publish(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(result.event).data)


class EventCancelView(RegistryView):
    """Handler for POST /api/events/{event_id}/cancel"""

    def post(self, request: Request, event_id: str) -> Response:
        try:
            event = self.get_registry().cancel(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)


class RegistrationListView(RegistryView):
    """Handler for GET/POST /api/events/{event_id}/registrations"""

    def get(self, request: Request, event_id: str) -> Response:
        try:
            attendees = self.get_registry().list_attendees(event_id)
        except DomainError as exc:
            return error_response(exc)
        return Response(AttendeeSerializer(attendees, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = RegistrationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            result = self.get_registry().register(event_id, serializer.validated_data["student_id"])
        except DomainError as exc:
            return error_response(exc)
        return Response(
            RegistrationResultSerializer(result).data, status=status.HTTP_201_CREATED
        )
