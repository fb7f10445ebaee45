from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from credflow.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from tests.unit.fakes import FixedClock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_reset_token = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.set_reset_token_by_email = AsyncMock(return_value=None)
    uow.users.consume_reset_token = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.create = AsyncMock(side_effect=lambda session: session)
    uow.sessions.revoke_by_id = AsyncMock(return_value=True)
    return uow


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.bind = AsyncMock()
    session.destroy = AsyncMock()
    return session


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 5, 1, 12, 0, 0))
