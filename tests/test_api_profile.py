"""Tests for the profile endpoints."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from cureconnect.models import User
from cureconnect.services import credentials

UPDATE = {"firstName": "Annie", "lastName": "Lee", "username": "annie", "email": "annie@x.com"}


@pytest.mark.asyncio
async def test_get_username(client) -> None:
    response = await client.get("/getUsername")

    assert response.status_code == 200
    assert response.json() == {"username": "alee"}


@pytest.mark.asyncio
async def test_get_profile(client) -> None:
    response = await client.get("/getProfile")

    assert response.status_code == 200
    assert response.json() == {
        "username": "alee",
        "email": "ann@x.com",
        "first_name": "Ann",
        "last_name": "Lee",
    }


@pytest.mark.asyncio
async def test_update_profile(client, db: AsyncSession, test_user: User) -> None:
    response = await client.put("/updateProfile", json=UPDATE)

    assert response.status_code == 200
    assert response.json() == {"message": "Profile updated successfully"}
    user = await credentials.get_user(db, test_user.id)
    assert user.username == "annie"


@pytest.mark.asyncio
async def test_update_profile_same_values_is_404(client) -> None:
    response = await client.put(
        "/updateProfile",
        json={"firstName": "Ann", "lastName": "Lee", "username": "alee", "email": "ann@x.com"},
    )

    assert response.status_code == 404
    assert response.json()["detail"] == "User not found or no changes made"


@pytest.mark.asyncio
async def test_update_profile_invalid_email(client, db: AsyncSession, test_user: User) -> None:
    response = await client.put("/updateProfile", json={**UPDATE, "email": "annie.x.com"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid email format"
    user = await credentials.get_user(db, test_user.id)
    assert user.username == "alee"


@pytest.mark.asyncio
async def test_update_profile_conflict(client, db: AsyncSession) -> None:
    db.add(User(first_name="Bo", last_name="Ray", username="annie", email="bo@x.com", password="x"))
    await db.commit()

    response = await client.put("/updateProfile", json=UPDATE)

    assert response.status_code == 400
    assert response.json()["detail"] == "Username or email already in use"


@pytest.mark.asyncio
async def test_update_profile_missing_field(client) -> None:
    payload = {k: v for k, v in UPDATE.items() if k != "lastName"}

    response = await client.put("/updateProfile", json=payload)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_profile_requires_token(public_client) -> None:
    assert (await public_client.get("/getProfile")).status_code == 403
    assert (await public_client.put("/updateProfile", json=UPDATE)).status_code == 403


@pytest.mark.asyncio
async def test_unexpected_error_is_opaque(db_engine, test_user: User, monkeypatch) -> None:
    from httpx import ASGITransport, AsyncClient

    from cureconnect.main import app
    from cureconnect.security import create_access_token

    async def boom(*args, **kwargs):
        raise RuntimeError("password=hunter2 leaked from driver")

    monkeypatch.setattr(credentials, "get_user", boom)
    token = create_access_token(test_user.id, test_user.username)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/getProfile", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 500
    assert "hunter2" not in response.text
    assert response.json()["detail"].startswith("An internal server error occurred")
