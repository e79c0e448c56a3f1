"""Request and response bodies shared by the event features."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, field_validator

from partyweaver.events.dtos import EventChangesDTO, EventDTO, InviteDTO, RSVPStatus


class EventForm(BaseModel):
    """Event editor form."""

    title: str
    start_time: datetime
    description: str | None = None
    location: str | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        return value

    @field_validator("description", "location")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    def to_dto(self) -> EventChangesDTO:
        return EventChangesDTO(
            title=self.title,
            start_time=self.start_time,
            description=self.description,
            location=self.location,
        )


class EventResponse(BaseModel):
    id: UUID
    title: str
    description: str | None = None
    location: str | None = None
    start_time: datetime
    host_user_id: UUID
    cohost_user_ids: list[UUID] = []
    created_at: datetime | None = None
    is_host: bool

    @classmethod
    def from_dto(cls, event: EventDTO, user_id: UUID) -> "EventResponse":
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            location=event.location,
            start_time=event.start_time,
            host_user_id=event.host_user_id,
            cohost_user_ids=event.cohost_user_ids,
            created_at=event.created_at,
            is_host=event.host_user_id == user_id,
        )


class InviteResponse(BaseModel):
    id: UUID
    event_id: UUID
    guest_name: str
    email: str | None = None
    phone_number: str | None = None
    invite_token: str
    rsvp_status: RSVPStatus
    responded_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dto(cls, invite: InviteDTO) -> "InviteResponse":
        return cls(
            id=invite.id,
            event_id=invite.event_id,
            guest_name=invite.guest_name,
            email=invite.email,
            phone_number=invite.phone_number,
            invite_token=invite.invite_token,
            rsvp_status=invite.rsvp_status,
            responded_at=invite.responded_at,
            created_at=invite.created_at,
        )
