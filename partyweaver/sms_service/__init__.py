from partyweaver.config.settings import settings
from partyweaver.sms_service.base import (
    SmsDeliveryError,
    SmsNotConfiguredError,
    SmsServiceBase,
    digits_only,
)
from partyweaver.sms_service.vonage_service import VonageSmsService


def get_sms_service() -> SmsServiceBase:
    return VonageSmsService(config=settings)


__all__ = [
    "SmsDeliveryError",
    "SmsNotConfiguredError",
    "SmsServiceBase",
    "digits_only",
    "get_sms_service",
]
