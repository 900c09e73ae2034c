"""Verification code model."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class VerificationCode(models.Model):
    """One-time code with an expiry, bound to ``(subject_id, purpose)``."""

    class Purpose(models.TextChoices):
        CANCEL_BOOKING = "cancel-booking", _("Cancel booking")

    subject_id = models.CharField(max_length=64)
    purpose = models.CharField(max_length=32, choices=Purpose.choices)
    code = models.CharField(max_length=6)
    issued_at = models.DateTimeField()
    expires_at = models.DateTimeField()
    consumed = models.BooleanField(default=False)

    class Meta:
        verbose_name = _("Verification code")
        verbose_name_plural = _("Verification codes")
        ordering = ["-issued_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["subject_id", "purpose"],
                name="verification_one_code_per_subject_purpose",
            ),
        ]
        indexes = [
            models.Index(fields=["expires_at"], name="verification_expires_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.purpose} code for {self.subject_id}"

    def is_expired(self, now) -> bool:
        return now > self.expires_at
