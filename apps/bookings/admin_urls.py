"""URL routing for the staff-only booking endpoints."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import AdminBookingViewSet, VenueBookingsView

router = DefaultRouter()
router.register(r"bookings", AdminBookingViewSet, basename="booking")

urlpatterns = [
    path("venues/<str:venue_id>/bookings/", VenueBookingsView.as_view(), name="venue-bookings"),
    path("", include(router.urls)),
]
