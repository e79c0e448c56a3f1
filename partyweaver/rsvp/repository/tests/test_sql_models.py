"""Round trip: a pending invite answered through the RSVP write model."""

from datetime import UTC, datetime

import pytest
import pytest_asyncio

from partyweaver.events.dtos import EventChangesDTO, InviteNotFoundError, RSVPStatus
from partyweaver.events.repository.write_models import SqlEventWriteModel, SqlInviteWriteModel
from partyweaver.models.user import User
from partyweaver.rsvp.repository.read_models import SqlRSVPReadModel
from partyweaver.rsvp.repository.write_models import SqlRSVPWriteModel


@pytest_asyncio.fixture
async def invite(db_session):
    host = User(email="host@example.com", is_active=True)
    db_session.add(host)
    await db_session.flush()

    event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
        host.uuid,
        EventChangesDTO(
            title="Launch Party",
            start_time=datetime(2025, 6, 1, 18, 0, tzinfo=UTC),
            location="HQ Rooftop",
        ),
    )
    return await SqlInviteWriteModel(session_overwrite=db_session).create_invite(
        event.id, host.uuid, "Jane", email="jane@example.com"
    )


@pytest.mark.asyncio
async def test_pending_invite_is_answered_attending(db_session, invite):
    read_model = SqlRSVPReadModel(session_overwrite=db_session)
    before = await read_model.get_by_token(invite.invite_token)
    assert before.rsvp_status == RSVPStatus.PENDING
    assert before.responded_at is None
    assert before.event_title == "Launch Party"

    await SqlRSVPWriteModel(session_overwrite=db_session).respond(
        invite.invite_token, RSVPStatus.ATTENDING
    )

    after = await read_model.get_by_token(invite.invite_token)
    assert after.rsvp_status == RSVPStatus.ATTENDING
    assert after.responded_at is not None


@pytest.mark.asyncio
async def test_guest_can_change_their_answer(db_session, invite):
    write_model = SqlRSVPWriteModel(session_overwrite=db_session)

    await write_model.respond(invite.invite_token, RSVPStatus.MAYBE)
    answer = await write_model.respond(invite.invite_token, RSVPStatus.NOT_ATTENDING)

    assert answer.rsvp_status == RSVPStatus.NOT_ATTENDING


@pytest.mark.asyncio
async def test_unknown_token(db_session):
    write_model = SqlRSVPWriteModel(session_overwrite=db_session)

    with pytest.raises(InviteNotFoundError):
        await write_model.respond("nope", RSVPStatus.ATTENDING)

    assert await SqlRSVPReadModel(session_overwrite=db_session).get_by_token("nope") is None


@pytest.mark.asyncio
async def test_pending_is_not_an_answer(db_session, invite):
    with pytest.raises(ValueError):
        await SqlRSVPWriteModel(session_overwrite=db_session).respond(
            invite.invite_token, RSVPStatus.PENDING
        )
