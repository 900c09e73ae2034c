from abc import ABC, abstractmethod


class BaseSMSBackend(ABC):
    """Base class for SMS transports.

    ``send_message`` returns nothing on success and raises DeliveryFailed
    when the provider rejects or cannot be reached.
    """

    @abstractmethod
    def send_message(self, phone: str, text: str) -> None:
        pass
