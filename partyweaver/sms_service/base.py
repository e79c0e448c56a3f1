import re
from abc import ABC, abstractmethod

NON_DIGITS = re.compile(r"\D")


class SmsNotConfiguredError(Exception):
    """Raised when the SMS provider credentials are missing."""

    def __init__(self) -> None:
        super().__init__("SMS service not configured")


class SmsDeliveryError(Exception):
    """Raised when the SMS gateway reports a non-success status."""


def digits_only(phone_number: str) -> str:
    """Strip everything but digits, e.g. ``"+1 (555) 123-4567"`` -> ``"15551234567"``."""
    return NON_DIGITS.sub("", phone_number)


class SmsServiceBase(ABC):
    @abstractmethod
    async def send_sms(self, to_number: str, text: str) -> dict:
        """Send ``text`` to ``to_number`` and return the gateway response.

        Raises:
            SmsNotConfiguredError: If credentials are missing. Nothing is sent.
            SmsDeliveryError: If the gateway rejects the message.
        """
        pass
