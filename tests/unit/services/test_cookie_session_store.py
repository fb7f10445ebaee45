from datetime import timedelta

import pytest

from credflow.adapter.services.cookie_session_store import CookieSessionStore
from credflow.api.utils.jwt import verify_session_token
from credflow.app.services.clock import SystemClock
from credflow.domain.entities import User
from tests.unit.fakes import (
    FixedClock,
    InMemorySessionRepository,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)


@pytest.fixture
def uow():
    return InMemoryUnitOfWork(InMemoryUserRepository(), InMemorySessionRepository())


@pytest.fixture
def live_clock():
    # Session tokens carry a real exp claim
    return FixedClock(SystemClock().now())


@pytest.mark.asyncio
async def test_bind_issues_signed_token(uow, live_clock):
    user = User(username="alice1", email="a@example.com", password_hash="x" * 60)
    store = CookieSessionStore(uow, live_clock, ttl_hours=2)

    await store.bind(user)

    payload = verify_session_token(store.issued_token)
    assert payload["user_id"] == str(user.id)
    [session] = uow.sessions.rows.values()
    assert payload["session_id"] == str(session.id)
    assert session.expires_at == live_clock.now() + timedelta(hours=2)
    assert store.expires_at == session.expires_at
    assert store.destroyed is False


@pytest.mark.asyncio
async def test_destroy_revokes_current_session(uow, live_clock):
    user = User(username="alice1", email="a@example.com", password_hash="x" * 60)
    first = CookieSessionStore(uow, live_clock)
    await first.bind(user)

    store = CookieSessionStore(uow, live_clock, current_token=first.issued_token)
    await store.destroy()

    assert store.destroyed is True
    assert store.issued_token is None
    [session] = uow.sessions.rows.values()
    assert session.revoked is True


@pytest.mark.asyncio
@pytest.mark.parametrize("token", [None, "", "garbage"])
async def test_destroy_without_valid_token(uow, live_clock, token):
    store = CookieSessionStore(uow, live_clock, current_token=token)

    await store.destroy()

    assert store.destroyed is True
    assert uow.sessions.rows == {}
