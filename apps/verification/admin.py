"""Admin registration for verification codes."""

from __future__ import annotations

from django.contrib import admin

from .models import VerificationCode


@admin.register(VerificationCode)
class VerificationCodeAdmin(admin.ModelAdmin):
    list_display = ("subject_id", "purpose", "issued_at", "expires_at", "consumed")
    list_filter = ("purpose", "consumed")
    search_fields = ("subject_id",)
    readonly_fields = ("subject_id", "purpose", "code", "issued_at", "expires_at", "consumed")
