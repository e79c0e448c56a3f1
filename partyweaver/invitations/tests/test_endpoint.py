from datetime import UTC, datetime
from uuid import uuid4

import pytest

from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.router import get_invitation_dispatcher
from partyweaver.invitations.urls import SEND_INVITATION_URL
from partyweaver.tests.config import StubDispatcherConfig
from partyweaver.tests.fakes import FakeEmailService, FakeSmsService
from partyweaver.tests.inmemory_models import InMemoryEventReadModel, InMemoryStore


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def event(store):
    return store.add_event(
        uuid4(),
        title="Launch Party",
        start_time=datetime(2025, 6, 1, 18, 0, tzinfo=UTC),
        location="HQ Rooftop",
    )


def build_overrides(store, email_service, sms_service) -> dict:
    dispatcher = InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=email_service,
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )
    return {get_invitation_dispatcher: lambda: dispatcher}


@pytest.mark.asyncio
async def test_send_invitation_by_email(client_factory, store, event):
    email_service = FakeEmailService()
    sms_service = FakeSmsService()
    payload = {
        "eventId": str(event.id),
        "guestName": "Jane",
        "email": "jane@example.com",
        "inviteToken": "abc123",
    }

    async with client_factory(build_overrides(store, email_service, sms_service)) as client:
        response = await client.post(SEND_INVITATION_URL, json=payload)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Invitation sent successfully"}
    assert response.headers["access-control-allow-origin"] == "*"
    assert len(email_service.invitations) == 1
    assert "Launch Party" in email_service.invitations[0]["event_title"]
    assert email_service.invitations[0]["rsvp_url"].endswith("/rsvp/abc123")
    assert sms_service.messages == []


@pytest.mark.asyncio
async def test_sms_not_configured_returns_500(client_factory, store, event):
    email_service = FakeEmailService()
    sms_service = FakeSmsService(configured=False)
    payload = {
        "eventId": str(event.id),
        "guestName": "Jane",
        "phoneNumber": "+15551234567",
        "inviteToken": "abc123",
    }

    async with client_factory(build_overrides(store, email_service, sms_service)) as client:
        response = await client.post(SEND_INVITATION_URL, json=payload)

    assert response.status_code == 500
    assert response.json() == {"error": "SMS service not configured"}
    assert email_service.invitations == []
    assert sms_service.messages == []


@pytest.mark.asyncio
async def test_unknown_event_returns_404(client_factory, store):
    payload = {
        "event_id": str(uuid4()),
        "guest_name": "Jane",
        "email": "jane@example.com",
        "invite_token": "abc123",
    }

    overrides = build_overrides(store, FakeEmailService(), FakeSmsService())
    async with client_factory(overrides) as client:
        response = await client.post(SEND_INVITATION_URL, json=payload)

    assert response.status_code == 404
    assert response.json() == {"error": "Event not found"}


@pytest.mark.asyncio
async def test_missing_invite_token_is_rejected(client_factory, store, event):
    payload = {"eventId": str(event.id), "guestName": "Jane", "email": "jane@example.com"}

    overrides = build_overrides(store, FakeEmailService(), FakeSmsService())
    async with client_factory(overrides) as client:
        response = await client.post(SEND_INVITATION_URL, json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_preflight_is_permissive(client):
    response = await client.options(
        SEND_INVITATION_URL,
        headers={
            "Origin": "https://party.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
        },
    )

    assert response.status_code == 200
    allowed = response.headers["access-control-allow-headers"].lower()
    for header in ("authorization", "x-client-info", "apikey", "content-type"):
        assert header in allowed
