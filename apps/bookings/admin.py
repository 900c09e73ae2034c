"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "venue",
        "date",
        "guest_first_name",
        "guest_last_name",
        "guest_phone",
        "guest_count",
        "status",
        "created_at",
    )
    list_filter = ("status", "date")
    search_fields = ("guest_phone", "guest_last_name", "venue__name")
    readonly_fields = ("id", "created_at", "updated_at", "cancelled_at")
