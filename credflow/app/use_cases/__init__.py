"""
Use Cases

Organized into domain folders:
- auth/: Signin, signup, signout, forgot and reset password
- sessions/: Resolving the user behind a session

Import from subdirectories for better organization.
"""

from .auth import (
    AuthFlow,
    SigninUseCase,
    SignupUseCase,
    SignoutUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .sessions import LoadSessionUseCase

__all__ = [
    # Auth
    "AuthFlow",
    "SigninUseCase",
    "SignupUseCase",
    "SignoutUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Sessions
    "LoadSessionUseCase",
]
