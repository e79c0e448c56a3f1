import logging
from typing import Protocol

import httpx

from partyweaver.email_service.base import EmailDeliveryError, EmailServiceBase
from partyweaver.email_service.templates import EmailTemplates

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    async def _send(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> str | None:
        """Send email via Resend and return the Resend email id."""
        try:
            async with self._http_client_class() as client:
                response = await client.post(
                    RESEND_EMAILS_URL,
                    headers={
                        "Authorization": f"Bearer {self._config.resend_api_key}",
                        "Content-Type": "application/json",
                    },
                    json={
                        "from": self._config.emails_from,
                        "to": [to_address],
                        "subject": subject,
                        "html": html_body,
                        "text": text_body,
                    },
                )
                response.raise_for_status()
                resend_email_id = response.json().get("id")
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Resend rejected email to {to_address}: {e}") from e
        except ValueError:
            # Accepted with a 2xx, only the body is unreadable
            logger.warning(f"Resend accepted email to {to_address} without a JSON body")
            return None

        logger.info(f"Email sent via Resend: {resend_email_id}")
        return resend_email_id

    async def send_invitation(
        self,
        to_address: str,
        guest_name: str,
        event_title: str,
        event_date: str,
        event_location: str,
        rsvp_url: str,
    ) -> None:
        subject, html_body, text_body = EmailTemplates.render_invitation(
            guest_name=guest_name,
            event_title=event_title,
            event_date=event_date,
            event_location=event_location,
            rsvp_url=rsvp_url,
        )
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )

    async def send_sign_in_link(self, to_address: str, sign_in_url: str) -> None:
        subject, html_body, text_body = EmailTemplates.render_sign_in(sign_in_url)
        await self._send(
            to_address=to_address,
            subject=subject,
            html_body=html_body,
            text_body=text_body,
        )
