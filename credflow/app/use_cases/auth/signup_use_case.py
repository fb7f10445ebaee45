from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from credflow.libs.result import Error, Result, Return
from credflow.app.services.password_hasher import CredentialHashError, PasswordHasher
from credflow.app.services.session_store import SessionStore
from credflow.app.services.unit_of_work import UnitOfWork
from credflow.domain.entities import ErrorKind, User
from credflow.domain.validators import (
    validate_email,
    validate_password,
    validate_username,
)
from .dtos import SignupCommand, SignupResponse, UserInfo


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (raw form fields)
    - Output: Result[SignupResponse]

    Business Logic:
    1. Validate username, email and password pair; fail before touching storage
    2. Reject usernames or emails that are already registered
    3. Hash password with bcrypt
    4. Create User
    5. Bind the new user to the session
    6. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork, session: SessionStore, hasher: PasswordHasher):
        self.uow = uow
        self.session = session
        self.hasher = hasher

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with username, email, password, password_confirm

        Returns:
            Result[SignupResponse] with the created user,
            or Error(VALIDATION | CONFLICT | DEPENDENCY_ERROR)
        """
        username = validate_username(command.username)
        email = validate_email(command.email)
        password = validate_password(command.password, command.password_confirm)
        if username is None or email is None or password is None:
            return Return.err(Error(ErrorKind.VALIDATION, "Invalid signup fields"))

        try:
            return await self._signup(username, email, password)
        except IntegrityError as exc:
            # Lost a race against a concurrent signup for the same name/email
            return Return.err(
                Error(ErrorKind.CONFLICT, "Username or email already registered", str(exc))
            )
        except CredentialHashError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "Password hashing failed", str(exc))
            )
        except SQLAlchemyError as exc:
            return Return.err(
                Error(ErrorKind.DEPENDENCY_ERROR, "User creation failed", str(exc))
            )

    async def _signup(self, username: str, email: str, password: str) -> Result[SignupResponse]:
        async with self.uow:
            if await self.uow.users.get_by_username(username) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "Username or email already registered")
                )
            if await self.uow.users.get_by_email(email) is not None:
                return Return.err(
                    Error(ErrorKind.CONFLICT, "Username or email already registered")
                )

            user = User(
                username=username,
                email=email,
                password_hash=self.hasher.hash(password),
            )
            user = await self.uow.users.create(user)

            await self.session.bind(user)
            await self.uow.commit()

            return Return.ok(SignupResponse(user=UserInfo.from_user(user)))
