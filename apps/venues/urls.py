"""URL routing for the venue directory."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import SimpleRouter  # type: ignore

from .views import VenueViewSet

router = SimpleRouter()
router.register(r"", VenueViewSet, basename="venue")

urlpatterns = [
    path("", include(router.urls)),
]
