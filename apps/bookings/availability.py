"""Availability index: which dates a venue cannot be booked for."""

from __future__ import annotations

from datetime import date

from apps.venues.directory import as_venue_id
from shared.clock import Clock, system_clock

from .models import Booking


class AvailabilityIndex:
    """
    Read-only queries over active bookings.

    A date is unavailable when an active (pending or confirmed) booking
    holds it, or when it lies before today. The authoritative check at
    insert time happens inside BookingStore.create_booking under a lock;
    these answers are for display and pre-checks.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or system_clock

    def list_unavailable_dates(self, venue_id) -> list[date]:
        """Dates held by active bookings, ascending, without duplicates."""
        return list(
            Booking.objects.active()
            .for_venue(as_venue_id(venue_id))
            .order_by("date")
            .values_list("date", flat=True)
            .distinct()
        )

    def is_booked(self, venue_id, day: date) -> bool:
        return Booking.objects.active().for_venue(as_venue_id(venue_id)).filter(date=day).exists()

    def is_available(self, venue_id, day: date) -> bool:
        if day < self.clock.today():
            return False
        return not self.is_booked(venue_id, day)
