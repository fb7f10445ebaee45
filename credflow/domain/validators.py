"""
Input validators for the auth flow.

Each validator returns the input unchanged when it is well formed and None
otherwise. They never raise; callers treat None like a failed lookup.
"""

import re
from typing import Optional

USERNAME_PATTERN = re.compile(r"^[a-z0-9]+$", re.IGNORECASE)

_LOCAL_CHARS = r"[-a-z0-9~!$%^&*_=+}{'?]+"
_TLDS = (
    r"aero|arpa|biz|com|coop|edu|gov|info|int|mil|museum|name|net|org|pro"
    r"|travel|mobi|[a-z][a-z]"
)
_HOSTNAME = r"[a-z0-9_][-a-z0-9_]*(\.[-a-z0-9_]+)*\.(" + _TLDS + r")"
_IPV4 = r"[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}"

EMAIL_PATTERN = re.compile(
    r"^" + _LOCAL_CHARS + r"(\." + _LOCAL_CHARS + r")*"
    r"@(" + _HOSTNAME + r"|(" + _IPV4 + r"))"
    r"(:[0-9]{1,5})?$",
    re.IGNORECASE,
)


def validate_username(username: Optional[str]) -> Optional[str]:
    if not username:
        return None
    if USERNAME_PATTERN.fullmatch(username):
        return username
    return None


def validate_email(email: Optional[str]) -> Optional[str]:
    if not email:
        return None
    if EMAIL_PATTERN.fullmatch(email):
        return email
    return None


def validate_password(
    password: Optional[str], password_confirm: Optional[str]
) -> Optional[str]:
    """Accept a non-empty password that exactly matches its confirmation."""
    if not password:
        return None
    if password == password_confirm:
        return password
    return None
