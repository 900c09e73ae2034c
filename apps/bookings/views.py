"""API views for the booking domain."""

from __future__ import annotations

from rest_framework import mixins, permissions, status, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.generics import ListAPIView  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.venues.directory import VenueDirectory
from apps.verification.exceptions import CodeExpired, CodeMismatch, CodeNotFound

from .cancellation import CancellationCoordinator
from .exceptions import InvalidCode
from .filters import BookingFilterSet
from .models import Booking
from .serializers import (
    BookingCreateSerializer,
    BookingSerializer,
    CancellationConfirmSerializer,
    CancellationRequestSerializer,
    StatusChangeSerializer,
)
from .services import BookingStore


class BookingViewSet(viewsets.GenericViewSet):
    """Public booking endpoints: reserve, look up by phone, cancel by code."""

    permission_classes = [permissions.AllowAny]
    serializer_class = BookingSerializer

    def get_store(self) -> BookingStore:
        return BookingStore()

    def get_coordinator(self) -> CancellationCoordinator:
        return CancellationCoordinator(store=self.get_store())

    def create(self, request, *args, **kwargs):  # type: ignore
        serializer = BookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command()
        booking = self.get_store().create_booking(command.venue_id, command.guest, command.date)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)

    @action(detail=False, methods=["get"], url_path=r"by-phone/(?P<phone>[^/]+)", url_name="by-phone")
    def by_phone(self, request, phone=None):  # type: ignore
        bookings = self.get_store().list_bookings_by_phone(phone)
        return Response({"bookings": BookingSerializer(bookings, many=True).data})

    @action(detail=True, methods=["post"], url_path="cancellation/request", url_name="cancellation-request")
    def request_cancellation(self, request, pk=None):  # type: ignore
        serializer = CancellationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command(pk)
        self.get_coordinator().request_cancellation(command.booking_id, command.phone)
        return Response(
            {"detail": "Verification code sent."},
            status=status.HTTP_202_ACCEPTED,
        )

    @action(detail=True, methods=["post"], url_path="cancellation/confirm", url_name="cancellation-confirm")
    def confirm_cancellation(self, request, pk=None):  # type: ignore
        serializer = CancellationConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command(pk)
        try:
            booking = self.get_coordinator().confirm_cancellation(
                command.booking_id,
                command.phone,
                command.code,
            )
        except (CodeNotFound, CodeExpired, CodeMismatch) as exc:
            # Do not tell a guesser which of the three it was.
            raise InvalidCode() from exc
        return Response(BookingSerializer(booking).data, status=status.HTTP_200_OK)


class AdminBookingViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """Staff-only override path: list, inspect, change status, hard delete."""

    queryset = Booking.objects.select_related("venue").all()
    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAdminUser]
    filterset_class = BookingFilterSet

    def get_store(self) -> BookingStore:
        return BookingStore()

    def retrieve(self, request, pk=None, *args, **kwargs):  # type: ignore
        booking = self.get_store().get_booking(pk)
        return Response(BookingSerializer(booking).data)

    def destroy(self, request, pk=None, *args, **kwargs):  # type: ignore
        self.get_store().delete_booking(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    @action(detail=True, methods=["patch"], url_path="status", url_name="status")
    def change_status(self, request, pk=None):  # type: ignore
        serializer = StatusChangeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        command = serializer.to_command(pk)
        booking = self.get_store().set_status(command.booking_id, command.status)
        return Response(BookingSerializer(booking).data)


class VenueBookingsView(ListAPIView):
    """All bookings of one venue, newest first."""

    serializer_class = BookingSerializer
    permission_classes = [permissions.IsAdminUser]
    filter_backends: list = []

    def get_queryset(self):  # type: ignore
        venue = VenueDirectory().get_venue(self.kwargs["venue_id"])
        return BookingStore().list_bookings_by_venue(venue.pk)
