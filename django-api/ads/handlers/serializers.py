"""Serializers for calendar ad placement."""

from rest_framework import serializers


class PlacementRequestSerializer(serializers.Serializer):
    event_count = serializers.IntegerField(min_value=0)
    user_interests = serializers.DictField(required=False, default=dict)


class AdSerializer(serializers.Serializer):
    """Serializer for Ad domain model."""

    id = serializers.CharField()
    business_id = serializers.CharField()
    title = serializers.CharField()
    view_count = serializers.IntegerField()
