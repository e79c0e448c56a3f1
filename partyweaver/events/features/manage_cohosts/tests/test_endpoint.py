import pytest

from partyweaver.events.dependencies import get_event_read_model, get_event_write_model
from partyweaver.events.features.manage_cohosts.router import COHOST_INVITES_UNAVAILABLE
from partyweaver.events.urls import EVENT_COHOST_URL, EVENT_COHOSTS_URL
from partyweaver.tests.inmemory_models import (
    InMemoryEventReadModel,
    InMemoryEventWriteModel,
    InMemoryStore,
)
from partyweaver.tests.overrides import signed_in_as


@pytest.mark.asyncio
async def test_adding_cohost_is_not_available_yet(client_factory, host):
    store = InMemoryStore()
    event = store.add_event(host.id)
    overrides = {
        get_event_read_model: lambda: InMemoryEventReadModel(store),
        **signed_in_as(host),
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            EVENT_COHOSTS_URL.format(event_id=event.id), json={"email": "friend@example.com"}
        )

    assert response.status_code == 501
    assert response.json()["detail"] == COHOST_INVITES_UNAVAILABLE


@pytest.mark.asyncio
async def test_cohost_cannot_add_cohosts(client_factory, host, cohost):
    store = InMemoryStore()
    event = store.add_event(host.id, cohost_user_ids=[cohost.id])
    overrides = {
        get_event_read_model: lambda: InMemoryEventReadModel(store),
        **signed_in_as(cohost),
    }

    async with client_factory(overrides) as client:
        response = await client.post(
            EVENT_COHOSTS_URL.format(event_id=event.id), json={"email": "friend@example.com"}
        )

    assert response.status_code == 403


@pytest.mark.asyncio
async def test_host_removes_cohost(client_factory, host, cohost):
    store = InMemoryStore()
    event = store.add_event(host.id, cohost_user_ids=[cohost.id])
    overrides = {
        get_event_write_model: lambda: InMemoryEventWriteModel(store),
        **signed_in_as(host),
    }

    async with client_factory(overrides) as client:
        response = await client.delete(
            EVENT_COHOST_URL.format(event_id=event.id, user_id=cohost.id)
        )

    assert response.status_code == 200
    assert response.json()["cohost_user_ids"] == []


@pytest.mark.asyncio
async def test_cohost_cannot_remove_cohosts(client_factory, host, cohost):
    store = InMemoryStore()
    event = store.add_event(host.id, cohost_user_ids=[cohost.id])
    overrides = {
        get_event_write_model: lambda: InMemoryEventWriteModel(store),
        **signed_in_as(cohost),
    }

    async with client_factory(overrides) as client:
        response = await client.delete(
            EVENT_COHOST_URL.format(event_id=event.id, user_id=cohost.id)
        )

    assert response.status_code == 403
    assert response.json()["detail"] == "Only the event host can manage co-hosts."
    assert store.events[event.id].cohost_user_ids == [cohost.id]
