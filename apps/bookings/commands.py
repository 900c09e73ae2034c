"""
Booking Commands

Typed requests accepted by the booking core. The API serializers validate
raw payloads and build one of these; the core never sees a request dict.

Commands:
- CreateBookingCommand: Reserve a venue for one date
- RequestCancellationCommand: Send a cancellation code to the guest
- ConfirmCancellationCommand: Cancel a booking with the received code
- ChangeStatusCommand: Administrative status transition
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from .utils import normalize_phone


@dataclass(frozen=True)
class GuestInfo:
    """Who the booking is for and how many people come."""

    first_name: str
    last_name: str
    phone: str
    count: int

    def __post_init__(self):
        for name in ("first_name", "last_name", "phone"):
            value = (getattr(self, name) or "").strip()
            if not value:
                raise ValueError(f"Guest {name.replace('_', ' ')} is required")
            object.__setattr__(self, name, value)
        object.__setattr__(self, "phone", normalize_phone(self.phone))
        if self.count < 1:
            raise ValueError("Guest count must be at least 1")


@dataclass(frozen=True)
class CreateBookingCommand:
    venue_id: UUID
    guest: GuestInfo
    date: date


@dataclass(frozen=True)
class RequestCancellationCommand:
    booking_id: UUID
    phone: str


@dataclass(frozen=True)
class ConfirmCancellationCommand:
    booking_id: UUID
    phone: str
    code: str


@dataclass(frozen=True)
class ChangeStatusCommand:
    booking_id: UUID
    status: str
