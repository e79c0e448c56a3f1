import asyncio
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Protocol

from partyweaver.email_service.base import EmailDeliveryError, EmailServiceBase
from partyweaver.email_service.templates import EmailTemplates


class SMTPEmailConfig(Protocol):
    smtp_host: str
    smtp_port: int
    smtp_user: str
    smtp_password: str
    emails_from: str


class SMTPEmailService(EmailServiceBase):
    """Plain SMTP delivery, used locally against Mailhog when no Resend key is set."""

    def __init__(self, config: SMTPEmailConfig):
        self.host = config.smtp_host
        self.port = config.smtp_port
        self.username = config.smtp_user
        self.password = config.smtp_password
        self.from_address = config.emails_from

    def _create_message(
        self,
        to_address: str,
        subject: str,
        html_body: str,
        text_body: str,
    ) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = self.from_address
        msg["To"] = to_address

        part1 = MIMEText(text_body, "plain")
        part2 = MIMEText(html_body, "html")
        msg.attach(part1)
        msg.attach(part2)

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        try:
            with smtplib.SMTP(self.host, self.port) as server:
                if self.username and self.password:
                    server.starttls()
                    server.login(self.username, self.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"SMTP delivery to {msg['To']} failed: {e}") from e

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
        msg = self._create_message(to_address, subject, html_body, text_body)
        await asyncio.to_thread(self._send, msg)

    async def send_sign_in_link(self, to_address: str, sign_in_url: str) -> None:
        subject, html_body, text_body = EmailTemplates.render_sign_in(sign_in_url)
        msg = self._create_message(to_address, subject, html_body, text_body)
        await asyncio.to_thread(self._send, msg)
