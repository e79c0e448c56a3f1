from fastapi import APIRouter, Depends

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_read_model
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.events.schemas import EventResponse
from partyweaver.events.urls import EVENTS_URL

router = APIRouter()


@router.get(EVENTS_URL, response_model=list[EventResponse])
async def list_events(
    current_user: UserDTO = Depends(get_current_user),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """Dashboard: events the user hosts or co-hosts, soonest first."""
    events = await read_model.list_events_for_user(current_user.id)
    return [EventResponse.from_dto(event, current_user.id) for event in events]
