from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from credflow.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_reset_token(self, token: str) -> Optional[User]:
        """Get user holding the given password reset token"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def set_reset_token_by_email(
        self, email: str, token: str, expires_at: datetime
    ) -> Optional[User]:
        """
        Atomically store a reset token on the user with this email.

        A single find-and-set; returns the updated user or None if no user
        has the email.
        """
        pass

    @abstractmethod
    async def consume_reset_token(
        self, token: str, not_after: datetime, password_hash: str
    ) -> bool:
        """
        Atomically redeem a reset token.

        Sets the new password hash and clears the token pair only if the token
        is still present and reset_expire >= not_after. Returns False when no
        row matched (unknown, expired or already consumed token).
        """
        pass
