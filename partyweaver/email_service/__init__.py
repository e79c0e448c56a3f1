from partyweaver.config.settings import settings
from partyweaver.email_service.base import EmailDeliveryError, EmailServiceBase
from partyweaver.email_service.resend_service import ResendEmailService
from partyweaver.email_service.smtp_service import SMTPEmailService
from partyweaver.email_service.templates import EmailTemplates


def get_email_service() -> EmailServiceBase:
    if settings.resend_api_key:
        return ResendEmailService(config=settings)
    return SMTPEmailService(config=settings)


__all__ = [
    "EmailDeliveryError",
    "EmailServiceBase",
    "EmailTemplates",
    "get_email_service",
]
