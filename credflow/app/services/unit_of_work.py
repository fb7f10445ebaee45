from abc import ABC, abstractmethod

from credflow.app.repositories.session_repository import ISessionRepository
from credflow.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    One transaction over the user and session tables.

    Use cases enter it with `async with`, write through `users` and
    `sessions`, and call `commit()` once everything succeeded. Leaving the
    block discards whatever was not committed.
    """

    users: IUserRepository
    sessions: ISessionRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        ...

    @abstractmethod
    async def __aexit__(self, exc_type, exc, tb) -> None:
        ...

    @abstractmethod
    async def commit(self) -> None:
        ...

    @abstractmethod
    async def rollback(self) -> None:
        ...
