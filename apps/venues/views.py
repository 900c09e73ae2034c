"""API views for the venue directory and its availability calendar."""

from __future__ import annotations

from rest_framework import permissions, viewsets  # type: ignore
from rest_framework.decorators import action  # type: ignore
from rest_framework.response import Response  # type: ignore

from apps.bookings.availability import AvailabilityIndex

from .models import Venue
from .serializers import AvailabilityQuerySerializer, VenueSerializer


class VenueViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only venue listing plus the dates each venue is taken."""

    queryset = Venue.objects.all()
    serializer_class = VenueSerializer
    permission_classes = [permissions.AllowAny]

    @action(detail=True, methods=["get"], url_path="unavailable-dates", url_name="unavailable-dates")
    def unavailable_dates(self, request, pk=None):  # type: ignore
        venue = self.get_object()
        dates = AvailabilityIndex().list_unavailable_dates(venue.pk)
        return Response({"venue_id": str(venue.pk), "dates": [d.isoformat() for d in dates]})

    @action(detail=True, methods=["get"], url_path="availability", url_name="availability")
    def availability(self, request, pk=None):  # type: ignore
        venue = self.get_object()
        query = AvailabilityQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        day = query.validated_data["date"]
        return Response(
            {
                "venue_id": str(venue.pk),
                "date": day.isoformat(),
                "available": AvailabilityIndex().is_available(venue.pk, day),
            }
        )
