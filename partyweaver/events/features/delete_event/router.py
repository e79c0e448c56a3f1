from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.events.dependencies import get_event_write_model
from partyweaver.events.dtos import EventNotFoundError, PermissionDeniedError
from partyweaver.events.repository.write_models import EventWriteModel
from partyweaver.events.urls import EVENT_URL

router = APIRouter()


@router.delete(EVENT_URL, status_code=204)
async def delete_event(
    event_id: UUID,
    current_user: UserDTO = Depends(get_current_user),
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> Response:
    """Delete an event and all its invites. Host only."""
    try:
        await write_model.delete_event(event_id=event_id, user_id=current_user.id)
    except EventNotFoundError:
        raise HTTPException(status_code=404, detail="Event not found")
    except PermissionDeniedError as e:
        raise HTTPException(status_code=403, detail=str(e))

    return Response(status_code=204)
