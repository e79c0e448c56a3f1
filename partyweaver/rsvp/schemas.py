from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel

from partyweaver.config.settings import settings
from partyweaver.events.dtos import RSVPStatus
from partyweaver.invitations.formatting import format_event_date
from partyweaver.rsvp.dtos import RSVPInvitationDTO


class RSVPInvitationResponse(BaseModel):
    guest_name: str
    rsvp_status: RSVPStatus
    responded_at: datetime | None = None
    event_id: UUID
    event_title: str
    event_description: str | None = None
    event_location: str | None = None
    event_start_time: datetime
    event_date: str

    @classmethod
    def from_dto(cls, invitation: RSVPInvitationDTO) -> "RSVPInvitationResponse":
        return cls(
            guest_name=invitation.guest_name,
            rsvp_status=invitation.rsvp_status,
            responded_at=invitation.responded_at,
            event_id=invitation.event_id,
            event_title=invitation.event_title,
            event_description=invitation.event_description,
            event_location=invitation.event_location,
            event_start_time=invitation.event_start_time,
            event_date=format_event_date(invitation.event_start_time, settings.event_timezone),
        )


class RSVPSubmit(BaseModel):
    status: Literal["attending", "maybe", "not_attending"]
