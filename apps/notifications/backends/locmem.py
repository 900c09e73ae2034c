"""In-memory SMS backend for tests.

Messages land in the module-level ``outbox`` list, like
``django.core.mail.outbox``. Tests clear it themselves. Setting
``fail_next`` makes the next send raise DeliveryFailed.
"""

from dataclasses import dataclass

from apps.notifications.exceptions import DeliveryFailed

from .base import BaseSMSBackend


@dataclass(frozen=True)
class SentMessage:
    phone: str
    text: str


outbox: list[SentMessage] = []
fail_next = False


class LocMemSMSBackend(BaseSMSBackend):
    def send_message(self, phone: str, text: str) -> None:
        global fail_next
        if fail_next:
            fail_next = False
            raise DeliveryFailed(phone=phone)
        outbox.append(SentMessage(phone=phone, text=text))


def reset() -> None:
    global fail_next
    outbox.clear()
    fail_next = False
