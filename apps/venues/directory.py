"""Venue directory: the booking core's only view of venue data."""

from __future__ import annotations

import uuid

from shared.exceptions import NotFound

from .models import Venue


class VenueNotFound(NotFound):
    default_message = "Venue not found."


def as_venue_id(venue_id) -> uuid.UUID:
    if isinstance(venue_id, uuid.UUID):
        return venue_id
    try:
        return uuid.UUID(str(venue_id))
    except ValueError:
        raise VenueNotFound(venue_id=venue_id)


class VenueDirectory:
    """Read-only lookups of venue existence and capacity."""

    def get_venue(self, venue_id) -> Venue:
        try:
            return Venue.objects.get(pk=as_venue_id(venue_id))
        except Venue.DoesNotExist:
            raise VenueNotFound(venue_id=venue_id)

    def get_capacity(self, venue_id) -> int:
        capacity = (
            Venue.objects.filter(pk=as_venue_id(venue_id))
            .values_list("capacity", flat=True)
            .first()
        )
        if capacity is None:
            raise VenueNotFound(venue_id=venue_id)
        return capacity
