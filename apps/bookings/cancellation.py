"""
Guest cancellation protocol

    request_cancellation(booking, phone)        -> code issued and sent by SMS
    confirm_cancellation(booking, phone, code)  -> booking cancelled

The coordinator keeps no state between the two calls. The only state is
the verification code itself, so either step may be retried from any
process. A code that is never confirmed simply expires.
"""

from __future__ import annotations

import logging
import math

from django.db import transaction  # type: ignore

from apps.notifications.gateway import NotificationGateway
from apps.verification.models import VerificationCode
from apps.verification.services import VerificationCodeService

from .exceptions import PhoneMismatch
from .models import Booking
from .services import BookingStore
from .utils import normalize_phone

logger = logging.getLogger(__name__)

CANCEL_PURPOSE = VerificationCode.Purpose.CANCEL_BOOKING


class CancellationCoordinator:
    def __init__(
        self,
        store: BookingStore | None = None,
        codes: VerificationCodeService | None = None,
        gateway: NotificationGateway | None = None,
    ):
        self.store = store or BookingStore()
        self.codes = codes or VerificationCodeService(clock=self.store.clock)
        self.gateway = gateway or NotificationGateway()

    def _owned_booking(self, booking_id, phone: str) -> Booking:
        booking = self.store.get_booking(booking_id)
        if normalize_phone(phone) != booking.guest_phone:
            logger.warning(f"Phone mismatch on cancellation of booking {booking.id}")
            raise PhoneMismatch(booking_id=booking_id)
        return booking

    def _code_message(self, booking: Booking, code: str) -> str:
        minutes = max(math.ceil(self.codes.ttl.total_seconds() / 60), 1)
        return (
            f"Code {code} cancels your booking at {booking.venue.name} "
            f"on {booking.date.strftime('%d.%m.%Y')}. Valid for {minutes} min."
        )

    def request_cancellation(self, booking_id, phone: str) -> None:
        """
        Issue a cancellation code and text it to the guest.

        Raises BookingNotFound, PhoneMismatch or DeliveryFailed. After a
        DeliveryFailed the code is still live; asking again replaces it.
        """
        booking = self._owned_booking(booking_id, phone)
        code = self.codes.issue(booking.pk, CANCEL_PURPOSE)
        self.gateway.send(booking.guest_phone, self._code_message(booking, code))
        logger.info(f"Cancellation code sent for booking {booking.id}")

    def confirm_cancellation(self, booking_id, phone: str, code: str) -> Booking:
        """
        Cancel the booking if ``code`` is the live code for it.

        Raises BookingNotFound, PhoneMismatch, CodeNotFound, CodeExpired,
        CodeMismatch or InvalidTransition. Code consumption and the status
        change share one transaction; on any failure nothing changes.
        """
        with transaction.atomic():
            booking = self._owned_booking(booking_id, phone)
            self.codes.verify(booking.pk, CANCEL_PURPOSE, code)
            booking = self.store.set_status(booking.pk, Booking.Status.CANCELLED)

        logger.info(f"Booking {booking.id} cancelled by guest")
        return booking
