import logging
from typing import Protocol

import httpx

from partyweaver.sms_service.base import (
    SmsDeliveryError,
    SmsNotConfiguredError,
    SmsServiceBase,
    digits_only,
)

logger = logging.getLogger(__name__)

# Vonage reports per-message status codes as strings; "0" is success
VONAGE_SUCCESS_STATUS = "0"


class VonageSmsConfig(Protocol):
    vonage_api_key: str
    vonage_api_secret: str
    vonage_sms_url: str
    sms_from: str


class VonageSmsService(SmsServiceBase):
    """SMS delivery through the Vonage (Nexmo) SMS API."""

    def __init__(
        self,
        config: VonageSmsConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    @property
    def is_configured(self) -> bool:
        return bool(self._config.vonage_api_key and self._config.vonage_api_secret)

    async def send_sms(self, to_number: str, text: str) -> dict:
        if not self.is_configured:
            logger.error("Vonage API credentials not found")
            raise SmsNotConfiguredError()

        try:
            async with self._http_client_class() as client:
                response = await client.post(
                    self._config.vonage_sms_url,
                    headers={"Content-Type": "application/json"},
                    json={
                        "api_key": self._config.vonage_api_key,
                        "api_secret": self._config.vonage_api_secret,
                        "from": self._config.sms_from,
                        "to": digits_only(to_number),
                        "text": text,
                    },
                )
                result = response.json()
        except (httpx.HTTPError, ValueError) as e:
            raise SmsDeliveryError(f"SMS gateway request failed: {e}") from e

        logger.info(f"SMS gateway response: {result}")

        messages = result.get("messages") or [{}]
        if messages[0].get("status") != VONAGE_SUCCESS_STATUS:
            logger.error(f"SMS sending failed: {result}")
            raise SmsDeliveryError(messages[0].get("error-text") or "Failed to send SMS")

        return result
