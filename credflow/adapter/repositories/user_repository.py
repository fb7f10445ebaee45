from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from credflow.app.repositories.user_repository import IUserRepository
from credflow.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        stmt = select(User).where(User.username == username)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(self, token: str) -> Optional[User]:
        """Get user holding the given password reset token"""
        stmt = (
            select(User)
            .where(User.reset_token == token)
            .execution_options(populate_existing=True)
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def set_reset_token_by_email(
        self, email: str, token: str, expires_at: datetime
    ) -> Optional[User]:
        """Write token and expiry in one UPDATE keyed on email"""
        stmt = (
            update(User)
            .where(User.email == email)
            .values(reset_token=token, reset_expire=expires_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        if result.rowcount == 0:
            return None

        # The row is write-locked by the UPDATE until this transaction ends
        stmt = (
            select(User)
            .where(User.email == email)
            .execution_options(populate_existing=True)
        )
        found = await self.session.exec(stmt)
        return found.one_or_none()

    async def consume_reset_token(
        self, token: str, not_after: datetime, password_hash: str
    ) -> bool:
        """Redeem the token only if it is still present and unexpired"""
        stmt = (
            update(User)
            .where(
                User.reset_token == token,
                User.reset_expire >= not_after,
            )
            .values(reset_token=None, reset_expire=None, password_hash=password_hash)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
