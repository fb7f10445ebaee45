from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def create_session_token(session_id: UUID, user_id: UUID, expires_at: datetime) -> str:
    """
    Create the signed session cookie value

    Args:
        session_id: Server-side session UUID
        user_id: Bound user UUID
        expires_at: Session expiry (naive UTC)

    Returns:
        JWT token string (HS256)
    """
    payload = {
        "session_id": str(session_id),
        "user_id": str(user_id),
        "exp": expires_at.replace(tzinfo=UTC),
        "iat": datetime.now(UTC),
    }
    return jwt.encode(payload, ApplicationConfig.SESSION_SECRET, algorithm="HS256")


def verify_session_token(token: str) -> Optional[dict]:
    """
    Verify and decode a session cookie value

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.SESSION_SECRET, algorithms=["HS256"]
        )
    except JWTError:
        return None
    if "session_id" not in payload or "user_id" not in payload:
        return None
    return payload
