from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_read_model, get_event_write_model
from partyweaver.events.dtos import EventNotFoundError, PermissionDeniedError
from partyweaver.events.policy import EventAction, event_policy
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.events.repository.write_models import EventWriteModel
from partyweaver.events.schemas import EventResponse
from partyweaver.events.urls import EVENT_COHOST_URL, EVENT_COHOSTS_URL

router = APIRouter()

COHOST_INVITES_UNAVAILABLE = "Co-host management will be available in the next update."


class AddCohostRequest(BaseModel):
    email: EmailStr


@router.post(EVENT_COHOSTS_URL, status_code=501)
async def add_cohost(
    event_id: UUID,
    request: AddCohostRequest,
    current_user: UserDTO = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> None:
    """
    Add a co-host by email. Host only.

    Resolving an email to a user account is not supported yet, so after the
    host check this always answers 501.
    """
    event = await read_model.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event_policy.authorize(EventAction.MANAGE_COHOSTS, event, current_user.id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    raise HTTPException(status_code=501, detail=COHOST_INVITES_UNAVAILABLE)


@router.delete(EVENT_COHOST_URL, response_model=EventResponse)
async def remove_cohost(
    event_id: UUID,
    user_id: UUID,
    current_user: UserDTO = Depends(get_current_user),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """Remove a co-host from the event. Host only."""
    try:
        event = await write_model.remove_cohost(
            event_id=event_id, user_id=current_user.id, cohost_user_id=user_id
        )
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return EventResponse.from_dto(event, current_user.id)
