"""DTOs for the invite guest feature."""

from pydantic import BaseModel, field_validator, model_validator

from partyweaver.events.schemas import InviteResponse

INVITATION_SENT = "Invitation sent successfully!"
INVITATION_NOT_SENT = "Invitation created but failed to send. Please try sending manually."


class CreateInviteRequest(BaseModel):
    """Invite guest form. Guest name plus an email, a phone number, or both."""

    guest_name: str
    email: str | None = None
    phone_number: str | None = None

    @field_validator("guest_name")
    @classmethod
    def guest_name_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Guest name is required")
        return value

    @field_validator("email", "phone_number")
    @classmethod
    def blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @model_validator(mode="after")
    def contact_required(self) -> "CreateInviteRequest":
        if not self.email and not self.phone_number:
            raise ValueError("Please provide either an email or phone number")
        return self


class CreateInviteResponse(BaseModel):
    invite: InviteResponse
    sent: bool
    message: str
