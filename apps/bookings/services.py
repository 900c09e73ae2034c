"""Booking store: the system of record for reservations."""

from __future__ import annotations

import logging
import uuid
from datetime import date

from django.conf import settings  # type: ignore
from django.core.exceptions import ImproperlyConfigured  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.db.utils import NotSupportedError  # type: ignore

from apps.venues.directory import VenueDirectory, VenueNotFound, as_venue_id
from apps.venues.models import Venue
from shared.clock import Clock, system_clock

from .availability import AvailabilityIndex
from .commands import GuestInfo
from .exceptions import (
    BookingConflict,
    BookingNotFound,
    CapacityExceeded,
    InvalidDate,
    InvalidTransition,
)
from .models import Booking
from .utils import normalize_phone

logger = logging.getLogger(__name__)


def _lock_queryset_if_possible(queryset):
    """Apply select_for_update when inside transaction.atomic()."""

    if not transaction.get_connection().in_atomic_block:
        return queryset

    try:
        return queryset.select_for_update()
    except NotSupportedError:
        return queryset


def _as_booking_id(booking_id) -> uuid.UUID:
    if isinstance(booking_id, uuid.UUID):
        return booking_id
    try:
        return uuid.UUID(str(booking_id))
    except ValueError:
        raise BookingNotFound(booking_id=booking_id)


def initial_status() -> str:
    status = settings.BOOKING_INITIAL_STATUS
    if status not in Booking.ACTIVE_STATUSES:
        raise ImproperlyConfigured(
            f"BOOKING_INITIAL_STATUS must be one of {[str(s) for s in Booking.ACTIVE_STATUSES]}, got {status!r}"
        )
    return status


class BookingStore:
    """
    Creates bookings, moves them between statuses and answers lookups.

    create_booking holds the venue row lock across "is the date free?" and
    the insert. The partial unique constraint on (venue, date) for active
    statuses backs this up on databases without row locks, so two
    concurrent requests for one slot yield one booking and one
    BookingConflict.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        venues: VenueDirectory | None = None,
        availability: AvailabilityIndex | None = None,
    ):
        self.clock = clock or system_clock
        self.venues = venues or VenueDirectory()
        self.availability = availability or AvailabilityIndex(clock=self.clock)

    # ==================== CREATION ====================

    def create_booking(self, venue_id, guest: GuestInfo, day: date) -> Booking:
        if day < self.clock.today():
            raise InvalidDate(date=day)

        capacity = self.venues.get_capacity(venue_id)
        if guest.count > capacity:
            raise CapacityExceeded(
                f"Guest count {guest.count} exceeds the venue capacity of {capacity}.",
                capacity=capacity,
            )

        venue_pk = as_venue_id(venue_id)
        try:
            with transaction.atomic():
                # Per-venue mutex for the check-and-insert below.
                try:
                    _lock_queryset_if_possible(Venue.objects.filter(pk=venue_pk)).get()
                except Venue.DoesNotExist:
                    raise VenueNotFound(venue_id=venue_id)

                if self.availability.is_booked(venue_pk, day):
                    raise BookingConflict(venue_id=venue_id, date=day)

                booking = Booking.objects.create(
                    venue_id=venue_pk,
                    guest_first_name=guest.first_name,
                    guest_last_name=guest.last_name,
                    guest_phone=guest.phone,
                    guest_count=guest.count,
                    date=day,
                    status=initial_status(),
                    created_at=self.clock.now(),
                )
        except BookingConflict:
            logger.info(f"Booking conflict for venue {venue_id} on {day}")
            raise
        except IntegrityError as e:
            logger.info(f"Booking conflict for venue {venue_id} on {day} caught by constraint: {e}")
            raise BookingConflict(venue_id=venue_id, date=day) from e

        logger.info(
            f"Booking {booking.id} created for venue {venue_id} on {day} "
            f"({guest.count} guests, status {booking.status})"
        )
        return booking

    # ==================== LOOKUPS ====================

    def get_booking(self, booking_id) -> Booking:
        try:
            return Booking.objects.select_related("venue").get(pk=_as_booking_id(booking_id))
        except Booking.DoesNotExist:
            raise BookingNotFound(booking_id=booking_id)

    def list_bookings_by_phone(self, phone: str) -> list[Booking]:
        """All bookings for the phone number, any status, newest first."""
        return list(
            Booking.objects.select_related("venue")
            .for_phone(normalize_phone(phone))
            .order_by("-created_at")
        )

    def list_bookings_by_venue(self, venue_id) -> list[Booking]:
        return list(
            Booking.objects.select_related("venue")
            .for_venue(as_venue_id(venue_id))
            .order_by("-created_at")
        )

    # ==================== MUTATIONS ====================

    def set_status(self, booking_id, new_status: str) -> Booking:
        """
        Move a booking to ``new_status``.

        Allowed: pending -> confirmed, pending -> cancelled,
        confirmed -> cancelled. Anything else, including cancelling an
        already cancelled booking, raises InvalidTransition.
        """
        pk = _as_booking_id(booking_id)
        with transaction.atomic():
            try:
                booking = _lock_queryset_if_possible(Booking.objects.filter(pk=pk)).get()
            except Booking.DoesNotExist:
                raise BookingNotFound(booking_id=booking_id)

            previous = booking.status
            if not booking.can_transition_to(new_status):
                raise InvalidTransition(
                    f"Cannot change booking status from {previous} to {new_status}.",
                    current=previous,
                    requested=str(new_status),
                )

            booking.status = str(new_status)
            update_fields = ["status", "updated_at"]
            if booking.status == Booking.Status.CANCELLED:
                booking.cancelled_at = self.clock.now()
                update_fields.append("cancelled_at")
            booking.save(update_fields=update_fields)

        logger.info(f"Booking {booking.id} status changed: {previous} -> {booking.status}")
        return booking

    def delete_booking(self, booking_id) -> None:
        """Administrative hard delete. Ignores status rules, cannot be undone."""
        deleted, _ = Booking.objects.filter(pk=_as_booking_id(booking_id)).delete()
        if not deleted:
            raise BookingNotFound(booking_id=booking_id)
        logger.warning(f"Booking {booking_id} deleted by administrator")
