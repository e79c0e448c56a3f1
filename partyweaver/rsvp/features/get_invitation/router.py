from fastapi import APIRouter, Depends, HTTPException

from partyweaver.rsvp.dependencies import get_rsvp_read_model
from partyweaver.rsvp.repository.read_models import RSVPReadModel
from partyweaver.rsvp.schemas import RSVPInvitationResponse
from partyweaver.rsvp.urls import RSVP_URL

router = APIRouter()


@router.get(RSVP_URL, response_model=RSVPInvitationResponse)
async def get_invitation(
    token: str,
    read_model: RSVPReadModel = Depends(get_rsvp_read_model),
) -> RSVPInvitationResponse:
    """Load the invitation behind an RSVP link. No sign-in needed, the token is the key."""
    invitation = await read_model.get_by_token(token)
    if invitation is None:
        raise HTTPException(status_code=404, detail="Invalid invitation link")
    return RSVPInvitationResponse.from_dto(invitation)
