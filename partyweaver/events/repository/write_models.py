"""Event and invite write models. Return DTOs, never ORM models.

Every mutation re-checks the event policy inside its own transaction, so the
acting user's role is evaluated against the row being changed.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from partyweaver.config.database import async_session_manager
from partyweaver.events.dtos import (
    EventChangesDTO,
    EventDTO,
    EventNotFoundError,
    InviteDTO,
)
from partyweaver.events.policy import EventAction, EventPolicy, event_policy
from partyweaver.events.repository.orm_models import Event, EventInvite


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(self, host_user_id: UUID, changes: EventChangesDTO) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def update_event(
        self, event_id: UUID, user_id: UUID, changes: EventChangesDTO
    ) -> EventDTO:
        """Update editable fields. Host or co-host only; the host never changes."""
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: UUID, user_id: UUID) -> None:
        """Delete an event and its invites. Host only."""
        raise NotImplementedError

    @abstractmethod
    async def remove_cohost(self, event_id: UUID, user_id: UUID, cohost_user_id: UUID) -> EventDTO:
        """Remove a co-host. Host only; removing a non-member is a no-op."""
        raise NotImplementedError


class InviteWriteModel(ABC):
    @abstractmethod
    async def create_invite(
        self,
        event_id: UUID,
        user_id: UUID,
        guest_name: str,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> InviteDTO:
        """Create a pending invite. Host or co-host only; the token is generated on insert."""
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    """SQL implementation of event write operations."""

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        policy: EventPolicy = event_policy,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.policy = policy

    async def _get_event(self, session, event_id: UUID) -> Event:
        result = await session.execute(select(Event).where(Event.uuid == event_id))
        event = result.scalar_one_or_none()
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    async def create_event(self, host_user_id: UUID, changes: EventChangesDTO) -> EventDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = Event(
                title=changes.title,
                description=changes.description,
                location=changes.location,
                start_time=changes.start_time,
                host_user_id=host_user_id,
                cohosts=[],
            )
            session.add(event)
            await session.flush()
            await session.refresh(event)
            return EventDTO.from_event(event)

    async def update_event(
        self, event_id: UUID, user_id: UUID, changes: EventChangesDTO
    ) -> EventDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, event_id)
            self.policy.authorize(EventAction.EDIT, EventDTO.from_event(event), user_id)

            event.title = changes.title
            event.description = changes.description
            event.location = changes.location
            event.start_time = changes.start_time
            await session.flush()
            await session.refresh(event)
            return EventDTO.from_event(event)

    async def delete_event(self, event_id: UUID, user_id: UUID) -> None:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, event_id)
            self.policy.authorize(EventAction.DELETE, EventDTO.from_event(event), user_id)

            await session.delete(event)
            await session.flush()

    async def remove_cohost(self, event_id: UUID, user_id: UUID, cohost_user_id: UUID) -> EventDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = await self._get_event(session, event_id)
            self.policy.authorize(EventAction.MANAGE_COHOSTS, EventDTO.from_event(event), user_id)

            event.cohosts = [cohost for cohost in event.cohosts if cohost.user_id != cohost_user_id]
            await session.flush()
            return EventDTO.from_event(event)


class SqlInviteWriteModel(InviteWriteModel):
    """SQL implementation of invite write operations."""

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        policy: EventPolicy = event_policy,
    ) -> None:
        self.session_overwrite = session_overwrite
        self.policy = policy

    async def create_invite(
        self,
        event_id: UUID,
        user_id: UUID,
        guest_name: str,
        email: str | None = None,
        phone_number: str | None = None,
    ) -> InviteDTO:
        async with async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.uuid == event_id))
            event = result.scalar_one_or_none()
            if event is None:
                raise EventNotFoundError(event_id)
            self.policy.authorize(EventAction.INVITE, EventDTO.from_event(event), user_id)

            invite = EventInvite(
                event_id=event.uuid,
                guest_name=guest_name,
                email=email,
                phone_number=phone_number,
            )
            session.add(invite)
            await session.flush()
            await session.refresh(invite)
            return InviteDTO.from_invite(invite)
