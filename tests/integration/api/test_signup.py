"""
Integration tests for signup

- Valid fields create the user and sign it in
- Malformed fields never reach the database
- Duplicate username/email is rejected
"""
import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from credflow.domain.entities import User
from .helpers import load_user, signin, signup


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, db_session: AsyncSession):
    response = await signup(client)

    assert response.status_code == 303
    assert response.headers["location"] == "/home"
    assert ApplicationConfig.SESSION_COOKIE_NAME in response.cookies

    user = await load_user(db_session, "alice1")
    assert user.email == "a@example.com"
    assert user.password_hash != "Secret1"
    assert user.reset_token is None
    assert user.reset_expire is None
    # Leaving the next request's unit of work expires loaded instances
    user_id = str(user.id)

    me = await client.get("/session")
    assert me.status_code == 200
    assert me.json()["username"] == "alice1"
    assert me.json()["user_id"] == user_id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "fields",
    [
        {"username": "alice_1"},
        {"email": "alice@nowhere"},
        {"password": ""},
        {"password_confirm": "Different1"},
    ],
)
async def test_invalid_signup(client: AsyncClient, db_session: AsyncSession, fields):
    response = await signup(client, **fields)

    assert response.status_code == 303
    assert response.headers["location"] == "/signup"
    assert ApplicationConfig.SESSION_COOKIE_NAME not in response.cookies

    result = await db_session.exec(select(User))
    assert result.all() == []


@pytest.mark.asyncio
async def test_duplicate_username_and_email(client: AsyncClient, db_session: AsyncSession):
    await signup(client)
    client.cookies.clear()

    same_name = await signup(client, email="other@example.com")
    same_email = await signup(client, username="bob2")

    assert same_name.headers["location"] == "/signup"
    assert same_email.headers["location"] == "/signup"

    result = await db_session.exec(select(User))
    assert len(result.all()) == 1


@pytest.mark.asyncio
async def test_missing_form_fields(client: AsyncClient):
    response = await client.post("/signup", data={})

    assert response.status_code == 303
    assert response.headers["location"] == "/signup"


@pytest.mark.asyncio
async def test_signup_with_password_over_bcrypt_limit(client: AsyncClient):
    long_password = "a" * 80

    response = await signup(client, password=long_password)

    assert response.headers["location"] == "/home"
    client.cookies.clear()
    assert (await signin(client, "alice1", long_password)).headers["location"] == "/home"
    client.cookies.clear()
    assert (await signin(client, "alice1", "a" * 72)).headers["location"] == "/signin"
