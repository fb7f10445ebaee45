import logging

from sqlmodel.ext.asyncio.session import AsyncSession

from credflow.adapter.repositories.session_repository import SessionRepository
from credflow.adapter.repositories.user_repository import UserRepository
from credflow.app.services.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """UnitOfWork over a single AsyncSession"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if exc_type is not None:
            logger.debug("Rolling back after %s", exc_type.__name__)
        # No-op when the block already committed
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
