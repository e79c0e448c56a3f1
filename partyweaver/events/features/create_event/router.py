from fastapi import APIRouter, Depends

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_write_model
from partyweaver.events.repository.write_models import EventWriteModel
from partyweaver.events.schemas import EventForm, EventResponse
from partyweaver.events.urls import EVENTS_URL

router = APIRouter()


@router.post(EVENTS_URL, response_model=EventResponse, status_code=201)
async def create_event(
    form: EventForm,
    current_user: UserDTO = Depends(get_current_user),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """Create an event hosted by the current user."""
    event = await write_model.create_event(host_user_id=current_user.id, changes=form.to_dto())
    return EventResponse.from_dto(event, current_user.id)
