"""SMS backend posting to a JSON HTTP gateway."""

import logging

import requests
from django.conf import settings  # type: ignore

from apps.notifications.exceptions import DeliveryFailed
from apps.notifications.utils import mask_phone

from .base import BaseSMSBackend

logger = logging.getLogger(__name__)


class HttpSMSBackend(BaseSMSBackend):
    """
    Sends ``{"to", "from", "text"}`` to ``SMS_GATEWAY_URL`` with a bearer
    token. Any transport error or non-2xx answer is a DeliveryFailed.
    """

    def __init__(self, url=None, token=None, sender=None, timeout=None, session=None):
        self.url = url or settings.SMS_GATEWAY_URL
        self.token = token if token is not None else settings.SMS_GATEWAY_TOKEN
        self.sender = sender or settings.SMS_SENDER
        self.timeout = timeout or settings.SMS_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def send_message(self, phone: str, text: str) -> None:
        if not self.url:
            raise DeliveryFailed("SMS gateway is not configured.", phone=phone)

        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        payload = {"to": phone, "from": self.sender, "text": text}

        try:
            response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"SMS gateway error for {mask_phone(phone)}: {e}")
            raise DeliveryFailed(phone=phone) from e
