from abc import ABC, abstractmethod

from credflow.domain.entities import User


class SessionStore(ABC):
    """The caller's session, mutated by signin/signup/signout"""

    @abstractmethod
    async def bind(self, user: User) -> None:
        """Attach the authenticated user to the session"""
        pass

    @abstractmethod
    async def destroy(self) -> None:
        """Tear the session down; a no-op when there is none"""
        pass
