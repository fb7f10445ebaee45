"""
Authentication Use Cases

All authentication-related business logic.
"""

from .signin_use_case import SigninUseCase
from .signup_use_case import SignupUseCase
from .signout_use_case import SignoutUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .settings import AuthSettings
from .flow import AuthFlow, AuthRequest, OperationHandler, Outcome, RedirectOptions
from .dtos import (
    SignupCommand,
    UserInfo,
    SigninResponse,
    SignupResponse,
    SignoutResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "SigninUseCase",
    "SignupUseCase",
    "SignoutUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Flow
    "AuthFlow",
    "AuthRequest",
    "AuthSettings",
    "OperationHandler",
    "Outcome",
    "RedirectOptions",
    # DTOs - Commands
    "SignupCommand",
    # DTOs - Responses
    "SigninResponse",
    "SignupResponse",
    "SignoutResponse",
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
    # DTOs - Nested Models
    "UserInfo",
]
