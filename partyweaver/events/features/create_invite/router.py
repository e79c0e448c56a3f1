import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_invite_write_model
from partyweaver.events.dtos import EventNotFoundError, PermissionDeniedError
from partyweaver.events.features.create_invite.dtos import (
    INVITATION_NOT_SENT,
    INVITATION_SENT,
    CreateInviteRequest,
    CreateInviteResponse,
)
from partyweaver.events.repository.write_models import InviteWriteModel
from partyweaver.events.schemas import InviteResponse
from partyweaver.events.urls import EVENT_INVITES_URL
from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.dtos import DispatchFailure, InvitationRequest
from partyweaver.invitations.router import get_invitation_dispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(EVENT_INVITES_URL, response_model=CreateInviteResponse, status_code=201)
async def create_invite(
    event_id: UUID,
    request: CreateInviteRequest,
    current_user: UserDTO = Depends(get_current_user),
    write_model: InviteWriteModel = Depends(get_invite_write_model),
    dispatcher: InvitationDispatcher = Depends(get_invitation_dispatcher),
) -> CreateInviteResponse:
    """
    Invite a guest and send the invitation.

    The invite is stored first; a failed send keeps the invite and returns a
    warning so the host can resend it manually.
    """
    try:
        invite = await write_model.create_invite(
            event_id=event_id,
            user_id=current_user.id,
            guest_name=request.guest_name,
            email=request.email,
            phone_number=request.phone_number,
        )
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    result = await dispatcher.dispatch(InvitationRequest.from_invite(invite))
    if isinstance(result, DispatchFailure):
        logger.warning(f"Invite {invite.id} created but not sent: {result.error}")
        return CreateInviteResponse(
            invite=InviteResponse.from_dto(invite), sent=False, message=INVITATION_NOT_SENT
        )

    return CreateInviteResponse(
        invite=InviteResponse.from_dto(invite), sent=True, message=INVITATION_SENT
    )
