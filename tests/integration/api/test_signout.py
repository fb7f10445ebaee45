import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from credflow.domain.entities import Session
from .helpers import signup


@pytest.mark.asyncio
async def test_signout_revokes_session(client: AsyncClient, db_session: AsyncSession):
    await signup(client)
    token = client.cookies[ApplicationConfig.SESSION_COOKIE_NAME]

    response = await client.post("/signout")

    assert response.status_code == 303
    assert response.headers["location"] == "/signin"
    assert (await client.get("/session")).status_code == 401

    # Replaying the old cookie does not bring the session back
    client.cookies.set(ApplicationConfig.SESSION_COOKIE_NAME, token)
    assert (await client.get("/session")).status_code == 401

    result = await db_session.exec(select(Session).execution_options(populate_existing=True))
    sessions = result.all()
    assert len(sessions) == 1
    assert sessions[0].revoked is True
    assert sessions[0].revoked_at is not None


@pytest.mark.asyncio
async def test_signout_without_session_succeeds(client: AsyncClient):
    response = await client.post("/signout")

    assert response.status_code == 303
    assert response.headers["location"] == "/signin"


@pytest.mark.asyncio
async def test_forged_session_cookie_is_rejected(client: AsyncClient):
    client.cookies.set(ApplicationConfig.SESSION_COOKIE_NAME, "not-a-jwt")

    assert (await client.get("/session")).status_code == 401
    assert (await client.post("/signout")).status_code == 303
