import abc

from sqlalchemy import select

from partyweaver.config.database import async_session_manager
from partyweaver.events.repository.orm_models import Event, EventInvite
from partyweaver.rsvp.dtos import RSVPInvitationDTO


class RSVPReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_by_token(self, token: str) -> RSVPInvitationDTO | None:
        raise NotImplementedError


class SqlRSVPReadModel(RSVPReadModel):
    """SQL implementation of the RSVP read model."""

    def __init__(self, session_overwrite=None) -> None:
        self.session_overwrite = session_overwrite

    async def get_by_token(self, token: str) -> RSVPInvitationDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventInvite, Event)
                .join(Event, EventInvite.event_id == Event.uuid)
                .where(EventInvite.invite_token == token)
            )
            row = result.one_or_none()
            if row is None:
                return None
            invite, event = row
            return RSVPInvitationDTO.from_invite(invite, event)
