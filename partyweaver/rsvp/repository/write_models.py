import logging
from abc import ABC, abstractmethod
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from partyweaver.config.database import async_session_manager
from partyweaver.events.dtos import InviteNotFoundError, RSVPStatus
from partyweaver.events.repository.orm_models import Event, EventInvite
from partyweaver.rsvp.dtos import RSVPInvitationDTO

logger = logging.getLogger(__name__)


class RSVPWriteModel(ABC):
    @abstractmethod
    async def respond(self, token: str, status: RSVPStatus) -> RSVPInvitationDTO:
        """Record a guest's answer. Raises InviteNotFoundError for an unknown token."""
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """SQL implementation of RSVP write operations."""

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def respond(self, token: str, status: RSVPStatus) -> RSVPInvitationDTO:
        if status == RSVPStatus.PENDING:
            raise ValueError("An RSVP response cannot be pending")

        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventInvite, Event)
                .join(Event, EventInvite.event_id == Event.uuid)
                .where(EventInvite.invite_token == token)
            )
            row = result.one_or_none()
            if row is None:
                raise InviteNotFoundError(f"Invite with token {token} not found")
            invite, event = row

            invite.rsvp_status = status
            invite.responded_at = datetime.now(UTC)
            await session.flush()

            logger.info(f"RSVP recorded for invite {invite.uuid}: {status.value}")
            return RSVPInvitationDTO.from_invite(invite, event)
