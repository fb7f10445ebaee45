"""
Reset Password Use Case

Redeems a password reset token and sets the new password.
"""

from sqlalchemy.exc import SQLAlchemyError

from credflow.libs.result import Error, Result, Return
from credflow.app.services.clock import Clock
from credflow.app.services.password_hasher import CredentialHashError, PasswordHasher
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind
from credflow.domain.validators import validate_password
from .dtos import ResetPasswordResponse


class ResetPasswordUseCase:
    """
    Use case for completing a password reset.

    Business Rules:
    - Token is valid while now <= reset_expire (the expiry instant itself
      is still accepted)
    - Expired tokens are rejected but left in place
    - Consumption is a conditional update on the token still being present
      and unexpired; of two concurrent resets only one can match
    - Success is reported only after the commit went through
    """

    def __init__(self, uow: UnitOfWork, hasher: PasswordHasher, clock: Clock):
        self.uow = uow
        self.hasher = hasher
        self.clock = clock

    async def execute(
        self, token: str, password: str, password_confirm: str
    ) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Reset token from the mailed link
            password: New password
            password_confirm: Confirmation, must equal password

        Returns:
            Result with ResetPasswordResponse, or Error

        Errors:
            - VALIDATION: Empty password or confirmation mismatch
            - NOT_FOUND: Unknown or already consumed token
            - EXPIRED: Token past reset_expire
            - DEPENDENCY_ERROR: Repository or hash failure
        """
        valid_password = validate_password(password, password_confirm)
        if valid_password is None:
            return Return.err(Error(ErrorKind.VALIDATION, "Invalid password"))

        if not token:
            return Return.err(Error(ErrorKind.NOT_FOUND, "Invalid password reset token"))

        try:
            return await self._reset(token, valid_password)
        except CredentialHashError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Password hashing failed", str(exc))
            )
        except SQLAlchemyError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Password reset failed", str(exc))
            )

    async def _reset(self, token: str, password: str) -> Result[ResetPasswordResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_reset_token(token)
            if user is None or not user.has_pending_reset():
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "Invalid password reset token")
                )

            now = self.clock.now()
            if now > user.reset_expire:
                return Return.err(
                    Error(ErrorKind.EXPIRED, "Password reset token has expired")
                )

            password_hash = self.hasher.hash(password)

            consumed = await self.uow.users.consume_reset_token(
                token, not_after=now, password_hash=password_hash
            )
            if not consumed:
                # Another request redeemed the token between lookup and update
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "Invalid password reset token")
                )

            await self.uow.commit()

            return Return.ok(
                ResetPasswordResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
