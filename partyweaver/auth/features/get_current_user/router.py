from fastapi import APIRouter, Depends

from partyweaver.auth.dependencies import get_current_user
from partyweaver.auth.dtos import UserDTO
from partyweaver.auth.schemas import CurrentUserResponse
from partyweaver.auth.urls import CURRENT_USER_URL

router = APIRouter()


@router.get(CURRENT_USER_URL, response_model=CurrentUserResponse)
async def me(current_user: UserDTO = Depends(get_current_user)) -> CurrentUserResponse:
    return CurrentUserResponse(id=current_user.id, email=current_user.email)
