from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from credflow.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from credflow.adapter.services.mail_notifiers import LogMailNotifier, SmtpMailNotifier
from credflow.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from credflow.api.utils.jwt import verify_session_token
from credflow.app.services.clock import Clock, SystemClock
from credflow.app.services.mail_notifier import MailNotifier
from credflow.app.services.password_hasher import PasswordHasher
from credflow.app.services.token_generator import TokenGenerator
from credflow.app.use_cases.auth import AuthFlow, AuthSettings

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_mail_notifier() -> MailNotifier:
    """SMTP in production, log transport everywhere else"""
    if ApplicationConfig.ENVIRONMENT == "production":
        return SmtpMailNotifier(
            host=ApplicationConfig.SMTP_HOST,
            port=ApplicationConfig.SMTP_PORT,
            username=ApplicationConfig.SMTP_USERNAME,
            password=ApplicationConfig.SMTP_PASSWORD,
            use_tls=ApplicationConfig.SMTP_USE_TLS,
            timeout=ApplicationConfig.SMTP_TIMEOUT,
        )
    return LogMailNotifier()


def get_clock() -> Clock:
    return SystemClock()


def get_auth_flow(
    hasher: PasswordHasher = Depends(get_password_hasher),
    mailer: MailNotifier = Depends(get_mail_notifier),
    clock: Clock = Depends(get_clock),
) -> AuthFlow:
    return AuthFlow(
        settings=AuthSettings.from_config(ApplicationConfig),
        hasher=hasher,
        tokens=TokenGenerator(),
        mailer=mailer,
        clock=clock,
    )


def get_session_token(
    session_cookie: Optional[str] = Cookie(
        default=None, alias=ApplicationConfig.SESSION_COOKIE_NAME
    ),
) -> Optional[str]:
    return session_cookie


def get_current_session_id(
    session_token: Optional[str] = Depends(get_session_token),
) -> Optional[UUID]:
    """
    Extract the session ID from the signed session cookie.

    Returns:
        Session UUID, or None when the cookie is missing, forged or expired
    """
    if not session_token:
        return None
    payload = verify_session_token(session_token)
    if payload is None:
        return None
    return UUID(payload["session_id"])
