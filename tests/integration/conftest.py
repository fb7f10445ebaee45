from typing import List, Tuple

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from credflow.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from credflow.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from credflow.app.services.mail_notifier import MailNotifier
from credflow.depends import get_mail_notifier, get_password_hasher, get_unit_of_work


class RecordingMailNotifier(MailNotifier):
    """Keeps sent messages instead of delivering them"""

    def __init__(self):
        self.sent: List[Tuple[str, str, str, str]] = []

    async def send(self, sender: str, recipient: str, subject: str, body: str) -> None:
        self.sent.append((sender, recipient, subject, body))


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def mailer():
    return RecordingMailNotifier()


@pytest_asyncio.fixture
async def client(db_session, mailer):
    from credflow.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)
    hasher = BcryptPasswordHasher(rounds=4)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_mail_notifier] = lambda: mailer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


REDIRECTS = {
    "signin": {"success_redirect": "/home", "failure_redirect": "/signin"},
    "signup": {"success_redirect": "/home", "failure_redirect": "/signup"},
    "signout": {"success_redirect": "/signin"},
    "forgot": {"success_redirect": "/signin", "failure_redirect": "/forgot"},
    "reset": {"success_redirect": "/signin", "failure_redirect": "/reset"},
}


@pytest.fixture(autouse=True)
def redirects(monkeypatch):
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "REDIRECTS", REDIRECTS)
    return REDIRECTS
