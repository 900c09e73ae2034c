"""FilterSet for the administrative booking list."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Booking
from .utils import normalize_phone


class BookingFilterSet(django_filters.FilterSet):
    venue = django_filters.UUIDFilter(field_name="venue_id")
    status = django_filters.ChoiceFilter(choices=Booking.Status.choices)
    date_from = django_filters.DateFilter(field_name="date", lookup_expr="gte")
    date_to = django_filters.DateFilter(field_name="date", lookup_expr="lte")
    phone = django_filters.CharFilter(method="filter_phone")

    class Meta:
        model = Booking
        fields = ["venue", "status"]

    def filter_phone(self, queryset, name, value):  # type: ignore
        if not value:
            return queryset
        return queryset.filter(guest_phone=normalize_phone(value))
