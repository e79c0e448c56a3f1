from fastapi import APIRouter, Depends, HTTPException

from partyweaver.auth.dependencies import get_jwt_service, get_sign_in_write_model
from partyweaver.auth.dtos import InvalidSignInLinkError
from partyweaver.auth.jwt_service import JWTService
from partyweaver.auth.repository.write_models import SignInWriteModel
from partyweaver.auth.schemas import TokenResponse, VerifySignInRequest
from partyweaver.auth.urls import VERIFY_SIGN_IN_URL

router = APIRouter()


@router.post(VERIFY_SIGN_IN_URL, response_model=TokenResponse)
async def verify_sign_in(
    request: VerifySignInRequest,
    write_model: SignInWriteModel = Depends(get_sign_in_write_model),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenResponse:
    """Exchange a sign-in link token for a session token."""
    try:
        user = await write_model.redeem_sign_in_link(request.token)
    except InvalidSignInLinkError as e:
        raise HTTPException(status_code=401, detail=str(e))

    return TokenResponse(access_token=jwt_service.create_access_token(user))
