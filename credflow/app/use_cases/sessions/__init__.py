"""
Session Use Cases

Resolving the user behind an established session.
"""

from .load_session_use_case import LoadSessionUseCase, SessionUserResponse

__all__ = [
    "LoadSessionUseCase",
    "SessionUserResponse",
]
