"""
Reset token generation.

Tokens are drawn uniformly over the 62 alphanumeric symbols using the
secrets module (CSPRNG).
"""

import secrets
import string

RESET_TOKEN_LENGTH = 24
TOKEN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits


class TokenGenerator:
    """Issue fixed-length alphanumeric tokens."""

    def __init__(self, alphabet: str = TOKEN_ALPHABET):
        self.alphabet = alphabet

    def generate(self, length: int = RESET_TOKEN_LENGTH) -> str:
        if length < 1:
            raise ValueError("Token length must be positive")
        return "".join(secrets.choice(self.alphabet) for _ in range(length))
