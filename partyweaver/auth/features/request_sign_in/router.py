import logging
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, HTTPException

from partyweaver.auth.dependencies import get_sign_in_write_model
from partyweaver.auth.repository.write_models import SignInWriteModel
from partyweaver.auth.schemas import SignInRequest, SignInResponse
from partyweaver.auth.urls import SIGN_IN_URL
from partyweaver.config.settings import settings
from partyweaver.email_service import EmailDeliveryError, EmailServiceBase, get_email_service

logger = logging.getLogger(__name__)

router = APIRouter()

SIGN_IN_LINK_SENT = "Check your email for the login link!"


def build_sign_in_url(public_site_url: str, token: str) -> str:
    return f"{public_site_url.rstrip('/')}/auth/callback?{urlencode({'token': token})}"


@router.post(SIGN_IN_URL, response_model=SignInResponse)
async def request_sign_in(
    request: SignInRequest,
    write_model: SignInWriteModel = Depends(get_sign_in_write_model),
    email_service: EmailServiceBase = Depends(get_email_service),
) -> SignInResponse:
    """Email a single-use sign-in link. The account is created on first sign-in."""
    token = await write_model.create_sign_in_link(request.email)
    try:
        await email_service.send_sign_in_link(
            to_address=request.email,
            sign_in_url=build_sign_in_url(settings.public_site_url, token),
        )
    except EmailDeliveryError as e:
        logger.error(f"Failed to send sign-in link: {e}")
        raise HTTPException(status_code=502, detail="Failed to send the sign-in email")

    return SignInResponse(message=SIGN_IN_LINK_SENT)
