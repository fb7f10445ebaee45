from uuid import UUID

from pydantic import BaseModel

from credflow.libs.result import Error, Result, Return
from credflow.app.services.clock import Clock
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind


class SessionUserResponse(BaseModel):
    """User bound to the current session"""

    session_id: str
    user_id: str
    username: str
    email: str


class LoadSessionUseCase:
    """
    Resolve the user of an established session.

    Business Rules:
    - Session must exist and not be revoked (signout revokes it)
    - Session must not be past expires_at
    - The bound user must still exist
    """

    def __init__(self, uow: UnitOfWork, clock: Clock):
        self.uow = uow
        self.clock = clock

    async def execute(self, session_id: UUID) -> Result[SessionUserResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            if session is None or session.revoked:
                return Return.err(Error(ErrorKind.NOT_FOUND, "No active session"))

            if session.is_expired(self.clock.now()):
                return Return.err(Error(ErrorKind.EXPIRED, "Session has expired"))

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                return Return.err(Error(ErrorKind.NOT_FOUND, "No active session"))

            return Return.ok(
                SessionUserResponse(
                    session_id=str(session.id),
                    user_id=str(user.id),
                    username=user.username,
                    email=user.email,
                )
            )
