from uuid import uuid4

import pytest

from partyweaver.auth.dependencies import get_jwt_service
from partyweaver.auth.dtos import UserDTO
from partyweaver.auth.jwt_service import JWTService
from partyweaver.auth.urls import CURRENT_USER_URL


class MockConfig:
    secret_key = "test-secret"
    algorithm = "HS256"
    access_token_expire_minutes = 15


@pytest.mark.asyncio
async def test_me_returns_token_user(client_factory):
    jwt_service = JWTService(config=MockConfig())
    user = UserDTO(id=uuid4(), email="host@example.com")
    token = jwt_service.create_access_token(user)

    async with client_factory({get_jwt_service: lambda: jwt_service}) as client:
        response = await client.get(
            CURRENT_USER_URL, headers={"Authorization": f"Bearer {token}"}
        )

    assert response.status_code == 200
    assert response.json() == {"id": str(user.id), "email": "host@example.com"}


@pytest.mark.asyncio
async def test_missing_token_is_401(client):
    response = await client.get(CURRENT_USER_URL)

    assert response.status_code == 401
    assert response.json()["detail"] == "Not authenticated"


@pytest.mark.asyncio
async def test_bad_token_is_401(client_factory):
    jwt_service = JWTService(config=MockConfig())

    async with client_factory({get_jwt_service: lambda: jwt_service}) as client:
        response = await client.get(
            CURRENT_USER_URL, headers={"Authorization": "Bearer not.a.token"}
        )

    assert response.status_code == 401
