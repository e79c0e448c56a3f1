from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from partyweaver.events.dtos import RSVPStatus

if TYPE_CHECKING:
    from partyweaver.events.repository.orm_models import Event, EventInvite


@dataclass(frozen=True)
class RSVPInvitationDTO:
    """An invite joined with the event it belongs to, as the RSVP page shows it."""

    invite_token: str
    guest_name: str
    rsvp_status: RSVPStatus
    event_id: UUID
    event_title: str
    event_start_time: datetime
    event_description: str | None = None
    event_location: str | None = None
    responded_at: datetime | None = None

    @classmethod
    def from_invite(cls, invite: "EventInvite", event: "Event") -> "RSVPInvitationDTO":
        return cls(
            invite_token=invite.invite_token,
            guest_name=invite.guest_name,
            rsvp_status=RSVPStatus(invite.rsvp_status),
            responded_at=invite.responded_at,
            event_id=event.uuid,
            event_title=event.title,
            event_description=event.description,
            event_location=event.location,
            event_start_time=event.start_time,
        )
