import pytest

from partyweaver.routers.healthz.router import API_VERSION


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/healthz/")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": API_VERSION}


@pytest.mark.asyncio
async def test_root_endpoint(client):
    """Test the root endpoint returns welcome message."""
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Welcome to the Party Weaver API"


@pytest.mark.asyncio
async def test_unknown_route_returns_404(client):
    response = await client.get("/api/v1/nothing-here")

    assert response.status_code == 404
