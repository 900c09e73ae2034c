"""Serializers for the venue directory."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Venue


class VenueSerializer(serializers.ModelSerializer):
    class Meta:
        model = Venue
        fields = ["id", "name", "capacity", "created_at", "updated_at"]
        read_only_fields = fields


class AvailabilityQuerySerializer(serializers.Serializer):
    date = serializers.DateField(input_formats=["%Y-%m-%d"])
