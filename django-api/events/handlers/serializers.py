"""Serializers for request parsing and for transforming domain models to API responses."""

from rest_framework import serializers

from events.domain import Event, Reference, ReferenceKind


class ReferenceSerializer(serializers.Serializer):
    """Reference payload, both directions."""

    kind = serializers.ChoiceField(choices=[kind.value for kind in ReferenceKind])
    payload = serializers.CharField(max_length=4096)

    def to_representation(self, instance: Reference) -> dict[str, str]:
        return {"kind": instance.kind.value, "payload": instance.payload}


class EventCreateSerializer(serializers.Serializer):
    organizer_id = serializers.CharField(max_length=64)
    title = serializers.CharField(max_length=255)
    capacity = serializers.IntegerField(min_value=0, required=False, allow_null=True)
    references = ReferenceSerializer(many=True, required=False)

    def domain_references(self) -> list[Reference]:
        return [
            Reference(kind=ReferenceKind(item["kind"]), payload=item["payload"])
            for item in self.validated_data.get("references", [])
        ]


class RegistrationRequestSerializer(serializers.Serializer):
    student_id = serializers.CharField(max_length=64)


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.SerializerMethodField()
    organizer_id = serializers.CharField()
    title = serializers.CharField()
    status = serializers.SerializerMethodField()
    capacity = serializers.SerializerMethodField()
    attendee_count = serializers.SerializerMethodField()
    references = ReferenceSerializer(many=True)
    created_at = serializers.DateTimeField()

    def get_id(self, event: Event) -> str:
        return str(event.id)

    def get_status(self, event: Event) -> str:
        return event.status.value

    def get_capacity(self, event: Event) -> int | None:
        return event.capacity.value if event.capacity else None

    def get_attendee_count(self, event: Event) -> int:
        return len(event.attendees)


class AttendeeSerializer(serializers.Serializer):
    student_id = serializers.CharField(source="student_id.value")
    registered_at = serializers.DateTimeField()


class RegistrationResultSerializer(serializers.Serializer):
    event_id = serializers.CharField()
    student_id = serializers.CharField(source="student_id.value")
    registered_at = serializers.DateTimeField()
    warnings = serializers.ListField(child=serializers.CharField())
