"""Integration tests for booking API endpoints."""

from __future__ import annotations

import re
import uuid
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.notifications.backends import locmem
from apps.verification.models import VerificationCode
from apps.venues.models import Venue

PHONE = "+998901234567"


class BookingAPITestMixin:
    def setUp(self) -> None:
        locmem.reset()
        self.venue = Venue.objects.create(name="Grand Hall", capacity=100)
        self.day = timezone.localdate() + timedelta(days=10)
        self.list_url = reverse("booking-list")

    def _payload(self, **overrides) -> dict:
        payload = {
            "venue": str(self.venue.id),
            "first_name": "Aziz",
            "last_name": "Karimov",
            "phone": PHONE,
            "guest_count": 50,
            "date": self.day.isoformat(),
        }
        payload.update(overrides)
        return payload

    def _book(self, **overrides) -> Booking:
        response = self.client.post(self.list_url, self._payload(**overrides), format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return Booking.objects.get(pk=response.data["id"])

    def _last_code(self) -> str:
        return re.search(r"\b(\d{6})\b", locmem.outbox[-1].text).group(1)


class BookingAPITests(BookingAPITestMixin, APITestCase):
    """Covers reservation, conflicts and lookups by phone."""

    def test_guest_can_create_booking(self) -> None:
        response = self.client.post(self.list_url, self._payload(phone="+998 90 123-45-67"), format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(Booking.objects.count(), 1)
        self.assertEqual(response.data["status"], Booking.Status.PENDING)
        self.assertEqual(response.data["venue_name"], "Grand Hall")
        self.assertEqual(response.data["guest_phone"], PHONE)
        self.assertEqual(response.data["date"], self.day.isoformat())

    def test_prevent_double_booking_of_a_date(self) -> None:
        self._book()

        response = self.client.post(self.list_url, self._payload(phone="+998907654321"), format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data, {"code": "conflict", "detail": "Date unavailable."})
        self.assertEqual(Booking.objects.count(), 1)

    def test_capacity_exceeded(self) -> None:
        response = self.client.post(self.list_url, self._payload(guest_count=150), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "capacity_exceeded")
        self.assertFalse(Booking.objects.exists())

    def test_past_date_rejected(self) -> None:
        yesterday = timezone.localdate() - timedelta(days=1)

        response = self.client.post(self.list_url, self._payload(date=yesterday.isoformat()), format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
        self.assertEqual(response.data["code"], "invalid_date")

    def test_unknown_venue(self) -> None:
        response = self.client.post(self.list_url, self._payload(venue=str(uuid.uuid4())), format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)
        self.assertEqual(response.data["code"], "not_found")

    def test_payload_validation(self) -> None:
        payload = self._payload(first_name="A", phone="12ab", guest_count=0, date="01.12.2025")

        response = self.client.post(self.list_url, payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        for field in ("first_name", "phone", "guest_count", "date"):
            self.assertIn(field, response.data)
        self.assertFalse(Booking.objects.exists())

    def test_bookings_by_phone(self) -> None:
        first = self._book()
        second = self._book(date=(self.day + timedelta(days=1)).isoformat())
        self._book(phone="+998907654321", date=(self.day + timedelta(days=2)).isoformat())

        response = self.client.get(reverse("booking-by-phone", kwargs={"phone": PHONE}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        ids = [item["id"] for item in response.data["bookings"]]
        self.assertEqual(ids, [str(second.id), str(first.id)])

    def test_bookings_by_phone_empty(self) -> None:
        response = self.client.get(reverse("booking-by-phone", kwargs={"phone": PHONE}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"bookings": []})


class CancellationAPITests(BookingAPITestMixin, APITestCase):
    """Covers the request/confirm cancellation flow."""

    def setUp(self) -> None:
        super().setUp()
        self.booking = self._book()
        self.request_url = reverse("booking-cancellation-request", kwargs={"pk": self.booking.id})
        self.confirm_url = reverse("booking-cancellation-confirm", kwargs={"pk": self.booking.id})

    def test_full_cancellation_flow(self) -> None:
        response = self.client.post(self.request_url, {"phone": PHONE}, format="json")
        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED, response.data)
        self.assertEqual(len(locmem.outbox), 1)

        response = self.client.post(
            self.confirm_url,
            {"phone": PHONE, "code": self._last_code()},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], Booking.Status.CANCELLED)
        self.assertIsNotNone(response.data["cancelled_at"])

        dates = self.client.get(reverse("venue-unavailable-dates", kwargs={"pk": self.venue.id})).data["dates"]
        self.assertNotIn(self.day.isoformat(), dates)

    def test_request_with_wrong_phone(self) -> None:
        response = self.client.post(self.request_url, {"phone": "+998907654321"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN, response.data)
        self.assertEqual(response.data["code"], "phone_mismatch")
        self.assertEqual(locmem.outbox, [])

    def test_request_for_unknown_booking(self) -> None:
        url = reverse("booking-cancellation-request", kwargs={"pk": uuid.uuid4()})

        response = self.client.post(url, {"phone": PHONE}, format="json")

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, response.data)

    def test_delivery_failure(self) -> None:
        locmem.fail_next = True

        response = self.client.post(self.request_url, {"phone": PHONE}, format="json")

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY, response.data)
        self.assertEqual(response.data["code"], "delivery_failed")

    def test_code_errors_are_not_distinguished(self) -> None:
        self.client.post(self.request_url, {"phone": PHONE}, format="json")
        code = self._last_code()
        wrong = "000000" if code != "000000" else "000001"

        mismatch = self.client.post(self.confirm_url, {"phone": PHONE, "code": wrong}, format="json")

        VerificationCode.objects.update(expires_at=timezone.now() - timedelta(seconds=1))
        expired = self.client.post(self.confirm_url, {"phone": PHONE, "code": code}, format="json")

        VerificationCode.objects.all().delete()
        missing = self.client.post(self.confirm_url, {"phone": PHONE, "code": code}, format="json")

        for response in (mismatch, expired, missing):
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, response.data)
            self.assertEqual(response.data, {"code": "invalid_code", "detail": "Invalid or expired code."})

        self.booking.refresh_from_db()
        self.assertEqual(self.booking.status, Booking.Status.PENDING)

    def test_code_must_be_six_digits(self) -> None:
        response = self.client.post(self.confirm_url, {"phone": PHONE, "code": "12345"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("code", response.data)


class AdminBookingAPITests(BookingAPITestMixin, APITestCase):
    """Covers the staff-only override endpoints."""

    def setUp(self) -> None:
        super().setUp()
        self.admin = get_user_model().objects.create_user(
            username="admin",
            password="AdminPass123",
            is_staff=True,
        )
        self.booking = self._book()
        self.client.force_authenticate(self.admin)

    def test_admin_endpoints_require_staff(self) -> None:
        self.client.force_authenticate(None)
        url = reverse("booking-admin:booking-list")
        self.assertIn(
            self.client.get(url).status_code,
            (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN),
        )

        guest = get_user_model().objects.create_user(username="guest", password="GuestPass123")
        self.client.force_authenticate(guest)
        self.assertEqual(self.client.get(url).status_code, status.HTTP_403_FORBIDDEN)

    def test_list_with_filters(self) -> None:
        other_venue = Venue.objects.create(name="Garden", capacity=30)
        self._book(venue=str(other_venue.id), guest_count=10)
        url = reverse("booking-admin:booking-list")

        response = self.client.get(url)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["count"], 2)

        response = self.client.get(url, {"venue": str(self.venue.id)})
        self.assertEqual([item["id"] for item in response.data["results"]], [str(self.booking.id)])

        response = self.client.get(url, {"status": "cancelled"})
        self.assertEqual(response.data["count"], 0)

        response = self.client.get(url, {"date_from": (self.day + timedelta(days=1)).isoformat()})
        self.assertEqual(response.data["count"], 0)

    def test_retrieve(self) -> None:
        url = reverse("booking-admin:booking-detail", kwargs={"pk": self.booking.id})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], str(self.booking.id))

    def test_confirm_then_cancel(self) -> None:
        url = reverse("booking-admin:booking-status", kwargs={"pk": self.booking.id})

        response = self.client.patch(url, {"status": "confirmed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["status"], "confirmed")

        response = self.client.patch(url, {"status": "cancelled"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)

        response = self.client.patch(url, {"status": "pending"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT, response.data)
        self.assertEqual(response.data["code"], "invalid_transition")

    def test_status_must_be_known(self) -> None:
        url = reverse("booking-admin:booking-status", kwargs={"pk": self.booking.id})

        response = self.client.patch(url, {"status": "archived"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("status", response.data)

    def test_delete(self) -> None:
        url = reverse("booking-admin:booking-detail", kwargs={"pk": self.booking.id})

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Booking.objects.exists())

        response = self.client.delete(url)
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_bookings_of_a_venue(self) -> None:
        url = reverse("booking-admin:venue-bookings", kwargs={"venue_id": self.venue.id})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([item["id"] for item in response.data["results"]], [str(self.booking.id)])

    def test_bookings_of_unknown_venue(self) -> None:
        url = reverse("booking-admin:venue-bookings", kwargs={"venue_id": uuid.uuid4()})

        response = self.client.get(url)

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
