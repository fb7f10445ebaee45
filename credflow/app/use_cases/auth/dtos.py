"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel

from credflow.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - raw signup fields as submitted

    Validation happens inside the use case so every malformed field
    ends in the same failure outcome.
    """

    username: str = ""
    email: str = ""
    password: str = ""
    password_confirm: str = ""


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """User information in authentication responses"""

    id: str
    username: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(id=str(user.id), username=user.username, email=user.email)


class SigninResponse(BaseModel):
    """Response for signin use case"""

    user: UserInfo


class SignupResponse(BaseModel):
    """Response for signup use case"""

    user: UserInfo


class SignoutResponse(BaseModel):
    """Response for signout use case"""

    status: str
    message: str


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
