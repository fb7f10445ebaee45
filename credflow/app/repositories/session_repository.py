from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from credflow.domain.entities import Session


class ISessionRepository(ABC):
    """Sessions behind the signed session cookie"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        ...

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Persist a freshly bound session"""
        ...

    @abstractmethod
    async def revoke_by_id(self, session_id: UUID) -> bool:
        """
        Mark a session revoked.

        Returns:
            True if an active session was revoked, False if it was unknown
            or already revoked
        """
        ...
