"""
Signin Use Case

Authenticates a user by username and password and binds the session.
"""

from sqlalchemy.exc import SQLAlchemyError

from credflow.libs.result import Error, Result, Return
from credflow.app.services.password_hasher import CredentialHashError, PasswordHasher
from credflow.app.services.session_store import SessionStore
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind
from credflow.domain.validators import validate_username
from .dtos import SigninResponse, UserInfo


class SigninUseCase:
    """
    Use case for user signin.

    Business Rules:
    - Malformed username, unknown username and wrong password are
      indistinguishable to the caller (no username enumeration)
    - Constant-time password comparison via bcrypt
    - A dummy hash check runs when the user does not exist
    - Session is bound only after the password matched
    """

    def __init__(self, uow: UnitOfWork, session: SessionStore, hasher: PasswordHasher):
        self.uow = uow
        self.session = session
        self.hasher = hasher

    async def execute(self, username: str, password: str) -> Result[SigninResponse]:
        """
        Execute signin use case.

        Args:
            username: Submitted username
            password: Plain text password

        Returns:
            Result with SigninResponse, or Error

        Errors:
            - NOT_FOUND: Username malformed or unknown
            - MISMATCH: Password does not match
            - DEPENDENCY_ERROR: Repository or hash failure
        """
        try:
            return await self._signin(username, password or "")
        except CredentialHashError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Password check failed", str(exc))
            )
        except SQLAlchemyError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "User lookup failed", str(exc))
            )

    async def _signin(self, username: str, password: str) -> Result[SigninResponse]:
        async with self.uow:
            valid_username = validate_username(username)
            user = None
            if valid_username is not None:
                user = await self.uow.users.get_by_username(valid_username)

            if user is None:
                # Hash dummy password to maintain constant time
                self.hasher.dummy_verify(password)
                return Return.err(
                    Error(ErrorKind.NOT_FOUND, "Invalid username or password")
                )

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error(ErrorKind.MISMATCH, "Invalid username or password")
                )

            await self.session.bind(user)
            await self.uow.commit()

            return Return.ok(SigninResponse(user=UserInfo.from_user(user)))
