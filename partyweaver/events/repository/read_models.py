import abc
from uuid import UUID

from sqlalchemy import or_, select

from partyweaver.config.database import async_session_manager
from partyweaver.events.dtos import EventDTO, InviteDTO
from partyweaver.events.repository.orm_models import Event, EventCohost, EventInvite


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def list_events_for_user(self, user_id: UUID) -> list[EventDTO]:
        """Events the user hosts or co-hosts, soonest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_invites(self, event_id: UUID) -> list[InviteDTO]:
        """Invites of an event, newest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_invite(self, invite_id: UUID) -> InviteDTO | None:
        raise NotImplementedError

    @abc.abstractmethod
    async def get_invite_by_token(self, invite_token: str) -> InviteDTO | None:
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of event read model."""

    def __init__(self, session_overwrite=None) -> None:
        self.session_overwrite = session_overwrite

    async def get_event(self, event_id: UUID) -> EventDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            return EventDTO.from_event(event) if event else None

    async def list_events_for_user(self, user_id: UUID) -> list[EventDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(Event)
                .outerjoin(EventCohost, EventCohost.event_id == Event.uuid)
                .where(or_(Event.host_user_id == user_id, EventCohost.user_id == user_id))
                .order_by(Event.start_time.asc())
            )
            result = await session.execute(stmt)
            return [EventDTO.from_event(event) for event in result.scalars().unique().all()]

    async def list_invites(self, event_id: UUID) -> list[InviteDTO]:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(EventInvite)
                .where(EventInvite.event_id == event_id)
                .order_by(EventInvite.created_at.desc())
            )
            result = await session.execute(stmt)
            return [InviteDTO.from_invite(invite) for invite in result.scalars().all()]

    async def get_invite(self, invite_id: UUID) -> InviteDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(EventInvite).where(EventInvite.uuid == invite_id))
            invite = result.scalar_one_or_none()
            return InviteDTO.from_invite(invite) if invite else None

    async def get_invite_by_token(self, invite_token: str) -> InviteDTO | None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(EventInvite).where(EventInvite.invite_token == invite_token)
            )
            invite = result.scalar_one_or_none()
            return InviteDTO.from_invite(invite) if invite else None
