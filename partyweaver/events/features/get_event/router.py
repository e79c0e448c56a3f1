from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_read_model
from partyweaver.events.dtos import PermissionDeniedError
from partyweaver.events.policy import EventAction, event_policy
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.events.schemas import EventResponse
from partyweaver.events.urls import EVENT_URL

router = APIRouter()


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    current_user: UserDTO = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    """Event detail for its host or a co-host."""
    event = await read_model.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")

    try:
        event_policy.authorize(EventAction.READ, event, current_user.id)
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return EventResponse.from_dto(event, current_user.id)
