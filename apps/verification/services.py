"""Issuing and checking one-time verification codes."""

from __future__ import annotations

import logging
import secrets
from datetime import timedelta

from django.conf import settings  # type: ignore
from django.db import IntegrityError, transaction  # type: ignore
from django.db.models import Q  # type: ignore

from shared.clock import Clock, system_clock

from .exceptions import CodeExpired, CodeMismatch, CodeNotFound
from .models import VerificationCode

logger = logging.getLogger(__name__)

CODE_LENGTH = 6


def generate_code() -> str:
    """Uniform over 000000-999999, leading zeros kept."""
    return f"{secrets.randbelow(10 ** CODE_LENGTH):0{CODE_LENGTH}d}"


class VerificationCodeService:
    """
    Single-use numeric codes bound to ``(subject_id, purpose)``.

    Issuing replaces whatever code the pair had before. Verifying consumes
    the code with a conditional UPDATE, so of two concurrent correct
    attempts exactly one succeeds. Expiry is checked lazily against the
    clock; ``purge_stale`` is housekeeping only.
    """

    def __init__(self, clock: Clock | None = None, ttl: timedelta | None = None):
        self.clock = clock or system_clock
        self._ttl = ttl

    @property
    def ttl(self) -> timedelta:
        if self._ttl is not None:
            return self._ttl
        return timedelta(seconds=settings.VERIFICATION_CODE_TTL_SECONDS)

    def issue(self, subject_id, purpose: str) -> str:
        subject_id = str(subject_id)
        now = self.clock.now()
        values = {
            "code": generate_code(),
            "issued_at": now,
            "expires_at": now + self.ttl,
            "consumed": False,
        }
        pair = VerificationCode.objects.filter(subject_id=subject_id, purpose=purpose)

        with transaction.atomic():
            if not pair.update(**values):
                try:
                    with transaction.atomic():
                        VerificationCode.objects.create(subject_id=subject_id, purpose=purpose, **values)
                except IntegrityError:
                    # A concurrent first issue inserted the row; replace its code.
                    pair.update(**values)

        logger.info(f"Issued {purpose} code for {subject_id}, expires at {values['expires_at'].isoformat()}")
        return values["code"]

    def verify(self, subject_id, purpose: str, candidate: str) -> None:
        subject_id = str(subject_id)
        record = VerificationCode.objects.filter(
            subject_id=subject_id,
            purpose=purpose,
            consumed=False,
        ).first()
        if record is None:
            raise CodeNotFound(subject_id=subject_id, purpose=purpose)

        if record.is_expired(self.clock.now()):
            logger.info(f"Expired {purpose} code presented for {subject_id}")
            raise CodeExpired(subject_id=subject_id, purpose=purpose)

        if str(candidate) != record.code:
            logger.info(f"Wrong {purpose} code presented for {subject_id}")
            raise CodeMismatch(subject_id=subject_id, purpose=purpose)

        claimed = VerificationCode.objects.filter(
            pk=record.pk,
            code=record.code,
            consumed=False,
        ).update(consumed=True)
        if not claimed:
            # Consumed or replaced between the read and the update.
            raise CodeNotFound(subject_id=subject_id, purpose=purpose)

        logger.info(f"Verified {purpose} code for {subject_id}")

    def purge_stale(self, now=None) -> int:
        """Delete consumed and expired codes. Returns the number removed."""
        now = now or self.clock.now()
        deleted, _ = VerificationCode.objects.filter(Q(consumed=True) | Q(expires_at__lt=now)).delete()
        return deleted
