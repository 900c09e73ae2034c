"""Typed failures of the booking core."""

from __future__ import annotations

from shared.exceptions import DomainError, NotFound


class InvalidDate(DomainError):
    code = "invalid_date"
    default_message = "Booking date cannot be in the past."


class CapacityExceeded(DomainError):
    code = "capacity_exceeded"
    default_message = "Guest count exceeds the venue capacity."


class BookingConflict(DomainError):
    """An active booking already holds the venue for that date."""

    code = "conflict"
    status_code = 409
    default_message = "Date unavailable."


class BookingNotFound(NotFound):
    default_message = "Booking not found."


class PhoneMismatch(DomainError):
    code = "phone_mismatch"
    status_code = 403
    default_message = "Phone number does not match the booking."


class InvalidTransition(DomainError):
    code = "invalid_transition"
    status_code = 409
    default_message = "Booking status cannot be changed this way."


class InvalidCode(DomainError):
    """What the public API shows for expired, wrong or missing codes."""

    code = "invalid_code"
    default_message = "Invalid or expired code."
