import logging

from sqlalchemy.exc import SQLAlchemyError

from credflow.libs.result import Result, Return
from credflow.app.services.session_store import SessionStore
from credflow.app.services.unit_of_work import UnitOfWork
from .dtos import SignoutResponse

logger = logging.getLogger(__name__)


class SignoutUseCase:
    """
    Use case for signout.

    Always succeeds: destroying an absent session is a no-op, and a failed
    revocation of the server-side record still clears the client session.
    """

    def __init__(self, uow: UnitOfWork, session: SessionStore):
        self.uow = uow
        self.session = session

    async def execute(self) -> Result[SignoutResponse]:
        async with self.uow:
            try:
                await self.session.destroy()
                await self.uow.commit()
            except SQLAlchemyError as exc:
                logger.warning("Session revocation failed during signout: %s", exc)

        return Return.ok(SignoutResponse(status="success", message="Signed out"))
