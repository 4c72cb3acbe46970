"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers

from catalog.services import ExperienceInput


class _IdField(serializers.Field):
    """Renders a domain id value object as its integer value."""

    def to_representation(self, value):
        return value.value


class UserSerializer(serializers.Serializer):
    """Serializer for User domain model."""

    id = _IdField()
    first_name = serializers.CharField()
    last_name = serializers.CharField()
    email = serializers.EmailField()


class ExperienceSerializer(serializers.Serializer):
    """Serializer for Experience domain model."""

    id = _IdField()
    name = serializers.CharField()
    description = serializers.CharField()
    date = serializers.DateTimeField()
    location = serializers.CharField()
    organiser = UserSerializer()
    attendees = UserSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class TripSerializer(serializers.Serializer):
    """Serializer for Trip domain model."""

    id = _IdField()
    destination = serializers.CharField()
    description = serializers.CharField()
    start_date = serializers.DateTimeField()
    end_date = serializers.DateTimeField()
    organiser = UserSerializer()
    attendees = UserSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ExperienceInputSerializer(serializers.Serializer):
    """Shapes the create-experience payload.

    Only types are checked here; required-field rules belong to the service.
    """

    name = serializers.CharField(allow_blank=True, default="")
    description = serializers.CharField(allow_blank=True, default="")
    date = serializers.CharField(allow_blank=True, allow_null=True, default=None)
    location = serializers.CharField(allow_blank=True, default="")

    def create(self, validated_data) -> ExperienceInput:
        return ExperienceInput(**validated_data)
