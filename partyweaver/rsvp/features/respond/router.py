from fastapi import APIRouter, Depends, HTTPException

from partyweaver.events.dtos import InviteNotFoundError, RSVPStatus
from partyweaver.rsvp.dependencies import get_rsvp_write_model
from partyweaver.rsvp.repository.write_models import RSVPWriteModel
from partyweaver.rsvp.schemas import RSVPInvitationResponse, RSVPSubmit
from partyweaver.rsvp.urls import RSVP_URL

router = APIRouter()


@router.post(RSVP_URL, response_model=RSVPInvitationResponse)
async def respond(
    token: str,
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPInvitationResponse:
    """Submit the guest's answer: attending, maybe or not attending."""
    try:
        invitation = await write_model.respond(token, RSVPStatus(rsvp_data.status))
    except InviteNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid invitation link")
    return RSVPInvitationResponse.from_dto(invitation)
