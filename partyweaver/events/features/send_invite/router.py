from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_read_model
from partyweaver.events.dtos import PermissionDeniedError
from partyweaver.events.policy import EventAction, event_policy
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.events.urls import SEND_EVENT_INVITE_URL
from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.dtos import InvitationRequest
from partyweaver.invitations.router import dispatch_result_response, get_invitation_dispatcher

router = APIRouter()


@router.post(SEND_EVENT_INVITE_URL)
async def send_invite(
    event_id: UUID,
    invite_id: UUID,
    current_user: UserDTO = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
    dispatcher: InvitationDispatcher = Depends(get_invitation_dispatcher),
) -> JSONResponse:
    """Send an existing invite again, e.g. after a failed first attempt."""
    event = await read_model.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event_policy.authorize(EventAction.INVITE, event, current_user.id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    invite = await read_model.get_invite(invite_id)
    if invite is None or invite.event_id != event_id:
        raise HTTPException(status_code=404, detail="Invite not found")

    result = await dispatcher.dispatch(InvitationRequest.from_invite(invite))
    return dispatch_result_response(result)
