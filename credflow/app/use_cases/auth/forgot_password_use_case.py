"""
Forgot Password Use Case

Issues a password reset token and mails the reset instructions.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from credflow.libs.result import Error, Result, Return
from credflow.app.services.clock import Clock, add_hours
from credflow.app.services.mail_notifier import MailDeliveryError, MailNotifier
from credflow.app.services.token_generator import RESET_TOKEN_LENGTH, TokenGenerator
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind
from credflow.domain.validators import validate_email
from .dtos import ForgotPasswordResponse
from .settings import AuthSettings

RESET_MAIL_BODY = (
    "You have requested a password reset from the IP address {ip_address}.\n\n"
    "If this was a mistake, just ignore this email and nothing will happen.\n\n"
    "To reset your password, visit the following address. "
    "This link will expire in {ttl_hours} hours.\n\n"
    "{reset_url}"
)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - 24-character alphanumeric token from a CSPRNG
    - Token expires reset_token_ttl_hours (24) after issuance
    - Token and expiry are written by one atomic update keyed on email,
      so concurrent requests never leave a mixed token/expiry pair
    - The token is committed before the mail is sent; a mail failure
      is reported but the token stays valid
    """

    def __init__(
        self,
        uow: UnitOfWork,
        tokens: TokenGenerator,
        mailer: MailNotifier,
        clock: Clock,
        settings: AuthSettings,
    ):
        self.uow = uow
        self.tokens = tokens
        self.mailer = mailer
        self.clock = clock
        self.settings = settings

    async def execute(
        self, email: str, ip_address: Optional[str]
    ) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: Submitted email address
            ip_address: Address the request came from, quoted in the mail

        Returns:
            Result with ForgotPasswordResponse, or Error

        Errors:
            - VALIDATION: Malformed email
            - NOT_FOUND: No user with this email
            - DEPENDENCY_ERROR: Repository or mail failure
        """
        valid_email = validate_email(email)
        if valid_email is None:
            return Return.err(Error(ErrorKind.VALIDATION, "Invalid email address"))

        reset_token = self.tokens.generate(RESET_TOKEN_LENGTH)
        expires_at = add_hours(self.clock.now(), self.settings.reset_token_ttl_hours)

        try:
            async with self.uow:
                user = await self.uow.users.set_reset_token_by_email(
                    valid_email, reset_token, expires_at
                )
                if user is None:
                    return Return.err(Error(ErrorKind.NOT_FOUND, "Unknown email address"))
                recipient = user.email
                await self.uow.commit()
        except SQLAlchemyError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Storing reset token failed", str(exc))
            )

        try:
            await self.mailer.send(
                self.settings.mail_sender,
                recipient,
                self.settings.mail_subject,
                self.compose_body(reset_token, ip_address),
            )
        except MailDeliveryError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Sending reset instructions failed", str(exc))
            )

        return Return.ok(
            ForgotPasswordResponse(
                status="sent",
                message="Password reset instructions have been sent",
            )
        )

    def compose_body(self, reset_token: str, ip_address: Optional[str]) -> str:
        reset_url = f"{self.settings.server_url.rstrip('/')}/reset/{reset_token}"
        return RESET_MAIL_BODY.format(
            ip_address=ip_address or "unknown",
            ttl_hours=self.settings.reset_token_ttl_hours,
            reset_url=reset_url,
        )
