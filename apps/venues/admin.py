"""Admin registration for venues."""

from __future__ import annotations

from django.contrib import admin

from .models import Venue


@admin.register(Venue)
class VenueAdmin(admin.ModelAdmin):
    list_display = ("name", "capacity", "created_at")
    search_fields = ("name",)
    readonly_fields = ("id", "created_at", "updated_at")
