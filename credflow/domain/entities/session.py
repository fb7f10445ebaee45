"""
Session Entity

Server-side record behind the signed session cookie.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Session(SQLModel, table=True):
    """
    Session entity - binds a browser to a signed-in user.

    Business Rules:
    - Bound on successful signin or signup
    - Revoked on signout; the cookie alone no longer authenticates
    - Valid until expires_at (SESSION_TTL_HOURS after binding)
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))

    __table_args__ = (
        Index("idx_sessions_user_revoked", "user_id", "revoked"),
        Index("idx_sessions_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at
