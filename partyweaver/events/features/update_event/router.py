from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_write_model
from partyweaver.events.dtos import EventNotFoundError, PermissionDeniedError
from partyweaver.events.repository.write_models import EventWriteModel
from partyweaver.events.schemas import EventForm, EventResponse
from partyweaver.events.urls import EVENT_URL

router = APIRouter()


@router.put(EVENT_URL, response_model=EventResponse)
async def update_event(
    event_id: UUID,
    form: EventForm,
    current_user: UserDTO = Depends(get_current_user),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """
    Update an event's title, description, location and start time.
    Allowed for the host and co-hosts. The host never changes.
    """
    try:
        event = await write_model.update_event(
            event_id=event_id, user_id=current_user.id, changes=form.to_dto()
        )
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return EventResponse.from_dto(event, current_user.id)
