"""Celery tasks for verification codes."""

from __future__ import annotations

import logging

from celery import shared_task  # type: ignore

from .services import VerificationCodeService

logger = logging.getLogger(__name__)


@shared_task(name="verification.purge_stale_codes")
def purge_stale_codes() -> dict[str, int]:
    """
    Remove consumed and expired verification codes.

    Runs every 10 minutes via Celery Beat. Expiry is enforced at check
    time, so skipping a run never lets an old code through.

    Returns:
        dict: {"purged": number of deleted codes}
    """
    purged = VerificationCodeService().purge_stale()
    if purged > 0:
        logger.info(f"Purged {purged} stale verification codes")
    return {"purged": purged}
