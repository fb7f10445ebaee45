from datetime import datetime
from typing import Optional
from uuid import UUID

from credflow.api.utils.jwt import create_session_token, verify_session_token
from credflow.app.services.clock import Clock, add_hours
from credflow.app.services.session_store import SessionStore
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import Session, User


class CookieSessionStore(SessionStore):
    """
    Session store backed by a sessions row and a signed cookie.

    bind/destroy only record what happened; the HTTP layer reads
    issued_token / destroyed afterwards to set or clear the cookie.
    Must be used inside the unit of work's context.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Clock,
        current_token: Optional[str] = None,
        ttl_hours: int = 24 * 7,
    ):
        self.uow = uow
        self.clock = clock
        self.current_token = current_token
        self.ttl_hours = ttl_hours
        self.issued_token: Optional[str] = None
        self.expires_at: Optional[datetime] = None
        self.destroyed = False

    async def bind(self, user: User) -> None:
        expires_at = add_hours(self.clock.now(), self.ttl_hours)
        session = await self.uow.sessions.create(
            Session(user_id=user.id, expires_at=expires_at)
        )
        self.issued_token = create_session_token(session.id, user.id, expires_at)
        self.expires_at = expires_at
        self.destroyed = False

    async def destroy(self) -> None:
        self.destroyed = True
        self.issued_token = None
        if not self.current_token:
            return

        payload = verify_session_token(self.current_token)
        if payload is None:
            return
        await self.uow.sessions.revoke_by_id(UUID(payload["session_id"]))
