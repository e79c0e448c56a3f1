"""Invitation dispatcher.

Given an invite's contact details, look up the parent event and send the
invitation by email and/or SMS. Stateless: every call handles one invite and
makes at most one email call and one SMS call, in that order. Nothing is
written to the database and nothing is retried.
"""

import logging
from typing import Protocol
from uuid import UUID

from partyweaver.config.settings import settings
from partyweaver.email_service.base import EmailDeliveryError, EmailServiceBase
from partyweaver.events.dtos import EventDTO
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.invitations.dtos import (
    DispatchErrorKind,
    DispatchFailure,
    DispatchResult,
    DispatchSuccess,
    InvitationRequest,
)
from partyweaver.invitations.formatting import (
    build_rsvp_url,
    format_event_date,
    format_sms_message,
)
from partyweaver.sms_service.base import SmsDeliveryError, SmsNotConfiguredError, SmsServiceBase

logger = logging.getLogger(__name__)

LOCATION_PLACEHOLDER = "Location TBD"


class DispatcherConfig(Protocol):
    public_site_url: str
    event_timezone: str


class InvitationDispatcher:
    def __init__(
        self,
        event_read_model: EventReadModel,
        email_service: EmailServiceBase,
        sms_service: SmsServiceBase,
        config: DispatcherConfig = settings,
    ) -> None:
        self._event_read_model = event_read_model
        self._email_service = email_service
        self._sms_service = sms_service
        self._config = config

    async def dispatch(self, request: InvitationRequest) -> DispatchResult:
        logger.info(
            f"Processing invitation: event_id={request.event_id} guest={request.guest_name} "
            f"email={bool(request.email)} phone={bool(request.phone_number)}"
        )
        try:
            return await self._dispatch(request)
        except Exception:
            logger.exception("Error sending invitation")
            return DispatchFailure(DispatchErrorKind.UNEXPECTED, "Failed to send invitation")

    async def _get_event(self, event_id: str) -> EventDTO | None:
        try:
            event_uuid = UUID(event_id)
        except ValueError:
            return None
        return await self._event_read_model.get_event(event_uuid)

    async def _dispatch(self, request: InvitationRequest) -> DispatchResult:
        event = await self._get_event(request.event_id)
        if event is None:
            logger.error(f"Event not found: {request.event_id}")
            return DispatchFailure(DispatchErrorKind.NOT_FOUND, "Event not found")

        rsvp_url = build_rsvp_url(self._config.public_site_url, request.invite_token)
        event_date = format_event_date(event.start_time, self._config.event_timezone)

        email_sent = False
        if request.email:
            try:
                await self._email_service.send_invitation(
                    to_address=request.email,
                    guest_name=request.guest_name,
                    event_title=event.title,
                    event_date=event_date,
                    event_location=event.location or LOCATION_PLACEHOLDER,
                    rsvp_url=rsvp_url,
                )
                email_sent = True
            except EmailDeliveryError as e:
                # Email failures are reported but never block the SMS channel
                logger.error(f"Email invitation failed for token {request.invite_token}: {e}")

        sms_sent = False
        if request.phone_number:
            text = format_sms_message(request.guest_name, event.title, event_date, rsvp_url)
            try:
                await self._sms_service.send_sms(request.phone_number, text)
            except SmsNotConfiguredError as e:
                return DispatchFailure(DispatchErrorKind.NOT_CONFIGURED, str(e))
            except SmsDeliveryError as e:
                logger.error(f"SMS invitation failed for token {request.invite_token}: {e}")
                return DispatchFailure(DispatchErrorKind.DELIVERY_FAILED, "Failed to send SMS")
            sms_sent = True

        return DispatchSuccess(email_sent=email_sent, sms_sent=sms_sent)
