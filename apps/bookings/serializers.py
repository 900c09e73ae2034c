"""Serializers for the booking domain.

Input serializers validate raw payloads and turn them into the command
dataclasses the booking core accepts.
"""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .commands import (
    ChangeStatusCommand,
    ConfirmCancellationCommand,
    CreateBookingCommand,
    GuestInfo,
    RequestCancellationCommand,
)
from .models import Booking
from .utils import normalize_phone

ISO_DATE = ["%Y-%m-%d"]


class PhoneField(serializers.CharField):
    """Phone number normalized to digits with an optional leading ``+``."""

    default_error_messages = {
        "invalid_phone": "Enter a valid phone number.",
    }

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", 20)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        value = normalize_phone(super().to_internal_value(data))
        digits = value[1:] if value.startswith("+") else value
        if not digits.isdigit() or len(digits) < 10:
            self.fail("invalid_phone")
        return value


class BookingCreateSerializer(serializers.Serializer):
    """Reservation request from a guest."""

    venue = serializers.UUIDField()
    first_name = serializers.CharField(min_length=2, max_length=100)
    last_name = serializers.CharField(min_length=2, max_length=100)
    phone = PhoneField()
    guest_count = serializers.IntegerField(min_value=1)
    date = serializers.DateField(input_formats=ISO_DATE)

    def to_command(self) -> CreateBookingCommand:
        data = self.validated_data
        return CreateBookingCommand(
            venue_id=data["venue"],
            guest=GuestInfo(
                first_name=data["first_name"],
                last_name=data["last_name"],
                phone=data["phone"],
                count=data["guest_count"],
            ),
            date=data["date"],
        )


class CancellationRequestSerializer(serializers.Serializer):
    phone = PhoneField()

    def to_command(self, booking_id) -> RequestCancellationCommand:
        return RequestCancellationCommand(booking_id=booking_id, phone=self.validated_data["phone"])


class CancellationConfirmSerializer(serializers.Serializer):
    phone = PhoneField()
    code = serializers.RegexField(r"^\d{6}$", error_messages={"invalid": "Code must be 6 digits."})

    def to_command(self, booking_id) -> ConfirmCancellationCommand:
        return ConfirmCancellationCommand(
            booking_id=booking_id,
            phone=self.validated_data["phone"],
            code=self.validated_data["code"],
        )


class StatusChangeSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=Booking.Status.choices)

    def to_command(self, booking_id) -> ChangeStatusCommand:
        return ChangeStatusCommand(booking_id=booking_id, status=self.validated_data["status"])


class BookingSerializer(serializers.ModelSerializer):
    """Read representation of a booking."""

    venue_id = serializers.ReadOnlyField(source="venue.id")
    venue_name = serializers.ReadOnlyField(source="venue.name")

    class Meta:
        model = Booking
        fields = [
            "id",
            "venue_id",
            "venue_name",
            "guest_first_name",
            "guest_last_name",
            "guest_phone",
            "guest_count",
            "date",
            "status",
            "created_at",
            "updated_at",
            "cancelled_at",
        ]
        read_only_fields = fields
