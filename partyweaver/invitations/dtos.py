from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from partyweaver.events.dtos import InviteDTO


class InvitationRequest(BaseModel):
    """Body accepted by the invitation dispatcher.

    Field names follow the client's camelCase; snake_case is accepted too.
    """

    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(alias="eventId")
    guest_name: str = Field(alias="guestName")
    email: str | None = None
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    invite_token: str = Field(alias="inviteToken")

    @classmethod
    def from_invite(cls, invite: "InviteDTO") -> "InvitationRequest":
        return cls(
            event_id=str(invite.event_id),
            guest_name=invite.guest_name,
            email=invite.email,
            phone_number=invite.phone_number,
            invite_token=invite.invite_token,
        )


class InvitationSentResponse(BaseModel):
    success: bool = True
    message: str


class InvitationErrorResponse(BaseModel):
    error: str


class DispatchErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NOT_CONFIGURED = "not_configured"
    DELIVERY_FAILED = "delivery_failed"
    UNEXPECTED = "unexpected"


DISPATCH_ERROR_STATUS_CODES = {
    DispatchErrorKind.NOT_FOUND: 404,
    DispatchErrorKind.NOT_CONFIGURED: 500,
    DispatchErrorKind.DELIVERY_FAILED: 500,
    DispatchErrorKind.UNEXPECTED: 500,
}


@dataclass(frozen=True)
class DispatchSuccess:
    email_sent: bool = False
    sms_sent: bool = False
    message: str = "Invitation sent successfully"


@dataclass(frozen=True)
class DispatchFailure:
    kind: DispatchErrorKind
    error: str

    @property
    def status_code(self) -> int:
        return DISPATCH_ERROR_STATUS_CODES[self.kind]


DispatchResult = DispatchSuccess | DispatchFailure
