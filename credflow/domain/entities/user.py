"""
User Entity

Represents an account that can sign in and reset its password.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel


class User(SQLModel, table=True):
    """
    User entity - credentials plus the pending password reset grant.

    Business Rules:
    - Username and email are unique across all users
    - Password stored as bcrypt hash, never plaintext
    - reset_token and reset_expire are both set or both empty
    - A reset token is cleared by the one reset that consumes it
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Pending password reset (forgot-password / reset-password)
    reset_token: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=64
    )
    reset_expire: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    def has_pending_reset(self) -> bool:
        return self.reset_token is not None and self.reset_expire is not None
