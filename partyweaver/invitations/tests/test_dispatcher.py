"""Tests for InvitationDispatcher, using recording email and SMS services."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest

from partyweaver.email_service.resend_service import ResendEmailService
from partyweaver.invitations.dispatcher import InvitationDispatcher
from partyweaver.invitations.dtos import (
    DispatchErrorKind,
    DispatchFailure,
    DispatchSuccess,
    InvitationRequest,
)
from partyweaver.tests.config import StubDispatcherConfig
from partyweaver.tests.fakes import FakeEmailService, FakeSmsService
from partyweaver.tests.inmemory_models import InMemoryEventReadModel, InMemoryStore
from partyweaver.tests.mock_http import MockHttpClient, MockResponse


class ExplodingEventReadModel(InMemoryEventReadModel):
    async def get_event(self, event_id):
        raise RuntimeError("database unavailable")


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def launch_party(store):
    return store.add_event(
        uuid4(),
        title="Launch Party",
        start_time=datetime(2025, 6, 1, 18, 0, tzinfo=UTC),
        location="HQ Rooftop",
    )


@pytest.fixture
def email_service() -> FakeEmailService:
    return FakeEmailService()


@pytest.fixture
def sms_service() -> FakeSmsService:
    return FakeSmsService()


@pytest.fixture
def dispatcher(store, email_service, sms_service) -> InvitationDispatcher:
    return InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=email_service,
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )


def make_request(event_id, email=None, phone_number=None) -> InvitationRequest:
    return InvitationRequest(
        event_id=str(event_id),
        guest_name="Jane",
        email=email,
        phone_number=phone_number,
        invite_token="abc123",
    )


@pytest.mark.asyncio
async def test_email_only_invite_sends_one_email(
    dispatcher, launch_party, email_service, sms_service
):
    result = await dispatcher.dispatch(make_request(launch_party.id, email="jane@example.com"))

    assert result == DispatchSuccess(email_sent=True, sms_sent=False)
    assert result.message == "Invitation sent successfully"
    assert len(email_service.invitations) == 1
    assert sms_service.messages == []

    sent = email_service.invitations[0]
    assert sent["to_address"] == "jane@example.com"
    assert sent["event_title"] == "Launch Party"
    assert sent["event_date"] == "Sunday, June 1, 2025 at 6:00 PM"
    assert sent["event_location"] == "HQ Rooftop"
    assert sent["rsvp_url"].endswith("/rsvp/abc123")


@pytest.mark.asyncio
async def test_phone_only_invite_sends_one_sms(
    dispatcher, launch_party, email_service, sms_service
):
    result = await dispatcher.dispatch(
        make_request(launch_party.id, phone_number="+1 (555) 123-4567")
    )

    assert result == DispatchSuccess(email_sent=False, sms_sent=True)
    assert email_service.invitations == []
    assert len(sms_service.messages) == 1
    assert sms_service.messages[0]["to"] == "15551234567"
    assert sms_service.messages[0]["text"] == (
        "Hi Jane! You're invited to Launch Party on Sunday, June 1, 2025 at 6:00 PM. "
        "RSVP here: https://party.example.com/rsvp/abc123"
    )


@pytest.mark.asyncio
async def test_both_channels(dispatcher, launch_party, email_service, sms_service):
    result = await dispatcher.dispatch(
        make_request(launch_party.id, email="jane@example.com", phone_number="+15551234567")
    )

    assert result == DispatchSuccess(email_sent=True, sms_sent=True)
    assert len(email_service.invitations) == 1
    assert len(sms_service.messages) == 1


@pytest.mark.asyncio
async def test_missing_location_is_shown_as_tbd(dispatcher, store, email_service):
    event = store.add_event(uuid4(), location=None)

    await dispatcher.dispatch(make_request(event.id, email="jane@example.com"))

    assert email_service.invitations[0]["event_location"] == "Location TBD"


@pytest.mark.asyncio
async def test_unknown_event_is_not_found_and_nothing_is_sent(
    dispatcher, email_service, sms_service
):
    result = await dispatcher.dispatch(
        make_request(uuid4(), email="jane@example.com", phone_number="+15551234567")
    )

    assert result == DispatchFailure(DispatchErrorKind.NOT_FOUND, "Event not found")
    assert result.status_code == 404
    assert email_service.invitations == []
    assert sms_service.messages == []


@pytest.mark.asyncio
async def test_malformed_event_id_is_not_found(dispatcher, email_service):
    result = await dispatcher.dispatch(make_request("not-a-uuid", email="jane@example.com"))

    assert isinstance(result, DispatchFailure)
    assert result.kind == DispatchErrorKind.NOT_FOUND
    assert email_service.invitations == []


@pytest.mark.asyncio
async def test_sms_not_configured(store, launch_party, email_service):
    sms_service = FakeSmsService(configured=False)
    dispatcher = InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=email_service,
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )

    result = await dispatcher.dispatch(make_request(launch_party.id, phone_number="+15551234567"))

    assert result == DispatchFailure(DispatchErrorKind.NOT_CONFIGURED, "SMS service not configured")
    assert result.status_code == 500
    assert email_service.invitations == []
    assert sms_service.messages == []


@pytest.mark.asyncio
async def test_sms_gateway_failure(store, launch_party, email_service):
    dispatcher = InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=email_service,
        sms_service=FakeSmsService(fail=True),
        config=StubDispatcherConfig(),
    )

    result = await dispatcher.dispatch(make_request(launch_party.id, phone_number="+15551234567"))

    assert result == DispatchFailure(DispatchErrorKind.DELIVERY_FAILED, "Failed to send SMS")


@pytest.mark.asyncio
async def test_email_failure_does_not_block_sms(store, launch_party, sms_service):
    dispatcher = InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=FakeEmailService(fail=True),
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )

    result = await dispatcher.dispatch(
        make_request(launch_party.id, email="jane@example.com", phone_number="+15551234567")
    )

    assert result == DispatchSuccess(email_sent=False, sms_sent=True)
    assert len(sms_service.messages) == 1


@pytest.mark.asyncio
async def test_unexpected_error_is_generic_failure(store, email_service, sms_service):
    dispatcher = InvitationDispatcher(
        event_read_model=ExplodingEventReadModel(store),
        email_service=email_service,
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )

    result = await dispatcher.dispatch(make_request(uuid4(), email="jane@example.com"))

    assert result == DispatchFailure(DispatchErrorKind.UNEXPECTED, "Failed to send invitation")
    assert result.status_code == 500


class ResendConfig:
    resend_api_key = "test-api-key"
    emails_from = "Party Weaver <invitations@resend.dev>"


@pytest.mark.asyncio
async def test_sms_still_sent_when_resend_reply_is_not_json(store, launch_party, sms_service):
    resend_client = MockHttpClient(MockResponse(text="OK", status_code=200))
    dispatcher = InvitationDispatcher(
        event_read_model=InMemoryEventReadModel(store),
        email_service=ResendEmailService(config=ResendConfig(), http_client_class=resend_client),
        sms_service=sms_service,
        config=StubDispatcherConfig(),
    )

    result = await dispatcher.dispatch(
        make_request(launch_party.id, email="jane@example.com", phone_number="+15551234567")
    )

    assert result == DispatchSuccess(email_sent=True, sms_sent=True)
    assert len(resend_client.post_calls) == 1
    assert len(sms_service.messages) == 1
