"""
Domain Enums

Enumeration types shared by the auth flow.
"""

from enum import Enum


class OutcomeKind(str, Enum):
    """Result of an auth operation as seen by the caller"""

    success = "SUCCESS"
    failure = "FAILURE"


class ErrorKind(str, Enum):
    """Internal failure taxonomy; never rendered to the end user"""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    EXPIRED = "EXPIRED"
    MISMATCH = "MISMATCH"
    CONFLICT = "CONFLICT"
    DEPENDENCY_ERROR = "DEPENDENCY_ERROR"
