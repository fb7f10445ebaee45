"""
Auth Flow

Turns the auth use cases into request handlers. Each operation constructor
takes redirect options and returns a handler that runs the use case and maps
its Result onto an Outcome (redirect target + message).
"""

import logging
from typing import Awaitable, Callable, Optional

from pydantic import BaseModel, ConfigDict

from credflow.libs.result import Result
from credflow.app.services.clock import Clock
from credflow.app.services.mail_notifier import MailNotifier
from credflow.app.services.password_hasher import PasswordHasher
from credflow.app.services.session_store import SessionStore
from credflow.app.services.token_generator import TokenGenerator
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind, OutcomeKind
from .dtos import SignupCommand
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .settings import AuthSettings
from .signin_use_case import SigninUseCase
from .signout_use_case import SignoutUseCase
from .signup_use_case import SignupUseCase

logger = logging.getLogger(__name__)


class RedirectOptions(BaseModel):
    """Where to send the caller; None means back to the request path"""

    model_config = ConfigDict(frozen=True)

    success_redirect: Optional[str] = None
    failure_redirect: Optional[str] = None


class AuthRequest(BaseModel):
    """Inbound request data consumed by the handlers"""

    path: str = "/"
    ip_address: Optional[str] = None
    username: str = ""
    email: str = ""
    password: str = ""
    password_confirm: str = ""
    reset_token: str = ""


class Outcome(BaseModel):
    kind: OutcomeKind
    redirect_target: str
    message: str
    cause: Optional[ErrorKind] = None

    @property
    def is_success(self) -> bool:
        return self.kind == OutcomeKind.success


OperationHandler = Callable[[AuthRequest, UnitOfWork, SessionStore], Awaitable[Outcome]]


class AuthFlow:
    """
    Entry point for the five auth operations.

    All collaborators are fixed at construction; handlers keep no state
    between requests.
    """

    def __init__(
        self,
        settings: AuthSettings,
        hasher: PasswordHasher,
        tokens: TokenGenerator,
        mailer: MailNotifier,
        clock: Clock,
    ):
        self.settings = settings
        self.hasher = hasher
        self.tokens = tokens
        self.mailer = mailer
        self.clock = clock

    def signin(self, options: RedirectOptions = RedirectOptions()) -> OperationHandler:
        async def signin(request: AuthRequest, uow: UnitOfWork, session: SessionStore) -> Outcome:
            use_case = SigninUseCase(uow, session, self.hasher)
            result = await use_case.execute(request.username, request.password)
            return self._outcome(result, request, options, "Signin success", "Signin failure")

        return signin

    def signup(self, options: RedirectOptions = RedirectOptions()) -> OperationHandler:
        async def signup(request: AuthRequest, uow: UnitOfWork, session: SessionStore) -> Outcome:
            command = SignupCommand(
                username=request.username,
                email=request.email,
                password=request.password,
                password_confirm=request.password_confirm,
            )
            result = await SignupUseCase(uow, session, self.hasher).execute(command)
            return self._outcome(result, request, options, "Signup success", "Signup failure")

        return signup

    def signout(self, options: RedirectOptions = RedirectOptions()) -> OperationHandler:
        async def signout(request: AuthRequest, uow: UnitOfWork, session: SessionStore) -> Outcome:
            result = await SignoutUseCase(uow, session).execute()
            return self._outcome(result, request, options, "Signout success", "Signout failure")

        return signout

    def forgot(self, options: RedirectOptions = RedirectOptions()) -> OperationHandler:
        async def forgot(request: AuthRequest, uow: UnitOfWork, session: SessionStore) -> Outcome:
            use_case = ForgotPasswordUseCase(
                uow, self.tokens, self.mailer, self.clock, self.settings
            )
            result = await use_case.execute(request.email, request.ip_address)
            return self._outcome(
                result, request, options, "Password request success", "Password request failure"
            )

        return forgot

    def reset(self, options: RedirectOptions = RedirectOptions()) -> OperationHandler:
        async def reset(request: AuthRequest, uow: UnitOfWork, session: SessionStore) -> Outcome:
            use_case = ResetPasswordUseCase(uow, self.hasher, self.clock)
            result = await use_case.execute(
                request.reset_token, request.password, request.password_confirm
            )
            return self._outcome(
                result, request, options, "Password reset success", "Password reset failure"
            )

        return reset

    def _outcome(
        self,
        result: Result,
        request: AuthRequest,
        options: RedirectOptions,
        success_message: str,
        failure_message: str,
    ) -> Outcome:
        if result.is_ok():
            if self.settings.notifications:
                logger.info(success_message)
            return Outcome(
                kind=OutcomeKind.success,
                redirect_target=options.success_redirect or request.path,
                message=success_message,
            )

        error = result.error
        cause = ErrorKind(error.code)
        if cause == ErrorKind.DEPENDENCY_ERROR:
            logger.error("%s: %s (%s)", failure_message, error.message, error.reason)
        elif self.settings.notifications:
            logger.info("%s: %s", failure_message, cause.value)

        return Outcome(
            kind=OutcomeKind.failure,
            redirect_target=options.failure_redirect or request.path,
            message=failure_message,
            cause=cause,
        )
