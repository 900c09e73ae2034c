"""Notification gateway: the only way the core talks to guests' phones."""

from __future__ import annotations

import logging

from django.conf import settings  # type: ignore
from django.utils.module_loading import import_string  # type: ignore

from .backends.base import BaseSMSBackend
from .exceptions import DeliveryFailed
from .utils import mask_phone

logger = logging.getLogger(__name__)


def get_sms_backend(path: str | None = None) -> BaseSMSBackend:
    return import_string(path or settings.SMS_BACKEND)()


class NotificationGateway:
    """Delivers a text message to a phone number.

    Raises DeliveryFailed when the backend cannot deliver; never retries.
    """

    def __init__(self, backend: BaseSMSBackend | None = None):
        self._backend = backend

    @property
    def backend(self) -> BaseSMSBackend:
        if self._backend is None:
            self._backend = get_sms_backend()
        return self._backend

    def send(self, phone: str, message: str) -> None:
        try:
            self.backend.send_message(phone, message)
        except DeliveryFailed:
            logger.warning(f"SMS delivery to {mask_phone(phone)} failed")
            raise
        except Exception as e:
            logger.error(f"Unexpected SMS backend error for {mask_phone(phone)}: {e}", exc_info=True)
            raise DeliveryFailed(phone=phone) from e

        logger.info(f"SMS sent successfully to {mask_phone(phone)}")
