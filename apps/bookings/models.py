"""Booking domain models."""

from __future__ import annotations

import uuid

from django.core.validators import MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils import timezone  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class BookingQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status__in=Booking.ACTIVE_STATUSES)

    def for_venue(self, venue_id):
        return self.filter(venue_id=venue_id)

    def for_phone(self, phone: str):
        return self.filter(guest_phone=phone)


class Booking(models.Model):
    """Reservation of a venue for a single calendar date."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        CONFIRMED = "confirmed", _("Confirmed")
        CANCELLED = "cancelled", _("Cancelled")

    # Statuses that occupy the date.
    ACTIVE_STATUSES = (Status.PENDING, Status.CONFIRMED)

    # Cancelled is terminal.
    TRANSITIONS = {
        "pending": ("confirmed", "cancelled"),
        "confirmed": ("cancelled",),
        "cancelled": (),
    }

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    venue = models.ForeignKey(
        "venues.Venue",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    guest_first_name = models.CharField(max_length=100)
    guest_last_name = models.CharField(max_length=100)
    guest_phone = models.CharField(max_length=20)
    guest_count = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    date = models.DateField()
    status = models.CharField(
        max_length=16,
        choices=Status.choices,
        default=Status.PENDING,
    )
    created_at = models.DateTimeField(default=timezone.now, editable=False)
    updated_at = models.DateTimeField(auto_now=True)
    cancelled_at = models.DateTimeField(null=True, blank=True)

    objects = BookingQuerySet.as_manager()

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["venue", "date"],
                condition=models.Q(status__in=["pending", "confirmed"]),
                name="booking_one_active_per_venue_date",
            ),
        ]
        indexes = [
            models.Index(fields=["venue", "date"], name="booking_venue_date_idx"),
            models.Index(fields=["guest_phone"], name="booking_guest_phone_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.id} for {self.venue_id} on {self.date}"

    @property
    def is_active(self) -> bool:
        return self.status in self.ACTIVE_STATUSES

    def can_transition_to(self, status: str) -> bool:
        return str(status) in self.TRANSITIONS.get(str(self.status), ())
