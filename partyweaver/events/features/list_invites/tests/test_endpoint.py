import pytest

from partyweaver.events.dependencies import get_event_read_model
from partyweaver.events.urls import EVENT_INVITES_URL
from partyweaver.tests.inmemory_models import InMemoryEventReadModel, InMemoryStore
from partyweaver.tests.overrides import signed_in_as


@pytest.mark.asyncio
async def test_cohost_sees_guest_list(client_factory, host, cohost):
    store = InMemoryStore()
    event = store.add_event(host.id, cohost_user_ids=[cohost.id])
    store.add_invite(event.id, guest_name="Jane")
    other_event = store.add_event(host.id)
    store.add_invite(other_event.id, guest_name="Elsewhere")
    overrides = {
        get_event_read_model: lambda: InMemoryEventReadModel(store),
        **signed_in_as(cohost),
    }

    async with client_factory(overrides) as client:
        response = await client.get(EVENT_INVITES_URL.format(event_id=event.id))

    assert response.status_code == 200
    data = response.json()
    assert [invite["guest_name"] for invite in data] == ["Jane"]
    assert data[0]["rsvp_status"] == "pending"


@pytest.mark.asyncio
async def test_non_member_cannot_see_guest_list(client_factory, host, stranger):
    store = InMemoryStore()
    event = store.add_event(host.id)
    overrides = {
        get_event_read_model: lambda: InMemoryEventReadModel(store),
        **signed_in_as(stranger),
    }

    async with client_factory(overrides) as client:
        response = await client.get(EVENT_INVITES_URL.format(event_id=event.id))

    assert response.status_code == 403
