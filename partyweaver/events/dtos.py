from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from partyweaver.events.repository.orm_models import Event, EventInvite


class EventNotFoundError(Exception):
    """Raised when an event id does not resolve to an event."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} not found")


class InviteNotFoundError(Exception):
    """Raised when an invite id or token does not resolve to an invite."""


class PermissionDeniedError(Exception):
    """Raised when the acting user lacks the host or co-host role required."""


class RSVPStatus(str, Enum):
    PENDING = "pending"
    ATTENDING = "attending"
    MAYBE = "maybe"
    NOT_ATTENDING = "not_attending"


@dataclass(frozen=True)
class EventDTO:
    """DTO for event data."""

    id: UUID
    title: str
    start_time: datetime
    host_user_id: UUID
    description: str | None = None
    location: str | None = None
    cohost_user_ids: list[UUID] = field(default_factory=list)
    created_at: datetime | None = None

    @classmethod
    def from_event(cls, event: "Event") -> "EventDTO":
        """Create EventDTO from Event ORM model."""
        return cls(
            id=event.uuid,
            title=event.title,
            description=event.description,
            location=event.location,
            start_time=event.start_time,
            host_user_id=event.host_user_id,
            cohost_user_ids=list(event.cohost_user_ids),
            created_at=event.created_at,
        )


@dataclass(frozen=True)
class EventChangesDTO:
    """Editable event fields submitted by the event editor."""

    title: str
    start_time: datetime
    description: str | None = None
    location: str | None = None


@dataclass(frozen=True)
class InviteDTO:
    """DTO for a guest invite."""

    id: UUID
    event_id: UUID
    guest_name: str
    invite_token: str
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    email: str | None = None
    phone_number: str | None = None
    responded_at: datetime | None = None
    created_at: datetime | None = None

    @classmethod
    def from_invite(cls, invite: "EventInvite") -> "InviteDTO":
        """Create InviteDTO from EventInvite ORM model."""
        return cls(
            id=invite.uuid,
            event_id=invite.event_id,
            guest_name=invite.guest_name,
            email=invite.email,
            phone_number=invite.phone_number,
            invite_token=invite.invite_token,
            rsvp_status=RSVPStatus(invite.rsvp_status),
            responded_at=invite.responded_at,
            created_at=invite.created_at,
        )
