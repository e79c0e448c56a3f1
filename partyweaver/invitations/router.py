from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from partyweaver.config.settings import settings
from partyweaver.email_service import EmailServiceBase, get_email_service
from partyweaver.events.dependencies import get_event_read_model
from partyweaver.events.repository.read_models import EventReadModel
from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.dtos import (
    DispatchFailure,
    DispatchResult,
    InvitationErrorResponse,
    InvitationRequest,
    InvitationSentResponse,
)
from partyweaver.invitations.urls import SEND_INVITATION_URL
from partyweaver.sms_service import SmsServiceBase, get_sms_service

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": ", ".join(settings.cors_allow_headers),
}


def get_invitation_dispatcher(
    event_read_model: EventReadModel = Depends(get_event_read_model),
    email_service: EmailServiceBase = Depends(get_email_service),
    sms_service: SmsServiceBase = Depends(get_sms_service),
) -> InvitationDispatcher:
    """Dependency to get the invitation dispatcher."""
    return InvitationDispatcher(
        event_read_model=event_read_model,
        email_service=email_service,
        sms_service=sms_service,
    )


def dispatch_result_response(result: DispatchResult) -> JSONResponse:
    """Render a dispatch result as ``{success, message}`` or ``{error}``."""
    if isinstance(result, DispatchFailure):
        return JSONResponse(
            status_code=result.status_code,
            content=InvitationErrorResponse(error=result.error).model_dump(),
            headers=CORS_HEADERS,
        )
    return JSONResponse(
        status_code=200,
        content=InvitationSentResponse(message=result.message).model_dump(),
        headers=CORS_HEADERS,
    )


@router.options(SEND_INVITATION_URL, include_in_schema=False)
async def send_invitation_preflight() -> Response:
    return Response(status_code=200, headers=CORS_HEADERS)


@router.post(
    SEND_INVITATION_URL,
    response_model=InvitationSentResponse,
    responses={404: {"model": InvitationErrorResponse}, 500: {"model": InvitationErrorResponse}},
)
async def send_invitation(
    request: InvitationRequest,
    dispatcher: InvitationDispatcher = Depends(get_invitation_dispatcher),
) -> JSONResponse:
    """
    Send an invitation by email and/or SMS with a link to the RSVP page.

    Email is sent when an address is given, SMS when a phone number is given.
    Returns 404 when the event does not exist and 500 when the SMS service is
    not configured or a send fails.
    """
    result = await dispatcher.dispatch(request)
    return dispatch_result_response(result)
