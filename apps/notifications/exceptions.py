from __future__ import annotations

from shared.exceptions import DomainError


class DeliveryFailed(DomainError):
    """The SMS could not be handed over to the provider."""

    code = "delivery_failed"
    status_code = 502
    default_message = "Message could not be delivered. Try again later."
