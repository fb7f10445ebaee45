import base64
import hashlib

import bcrypt

from credflow.app.services.password_hasher import CredentialHashError, PasswordHasher

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    """Input handed to bcrypt; longer passwords go through SHA-256 first"""
    encoded = password.encode("utf-8")
    if len(encoded) <= BCRYPT_MAX_BYTES:
        return encoded
    return base64.b64encode(hashlib.sha256(encoded).digest())


class BcryptPasswordHasher(PasswordHasher):
    """Password hashing with bcrypt; a fresh salt per hash"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # Precomputed digest for dummy_verify
        self._dummy_hash = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(rounds))

    def hash(self, password: str) -> str:
        try:
            password_hash = bcrypt.hashpw(_password_bytes(password), bcrypt.gensalt(self.rounds))
        except ValueError as exc:
            raise CredentialHashError(str(exc)) from exc
        return password_hash.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
        except ValueError as exc:
            # Malformed salt or digest
            raise CredentialHashError(str(exc)) from exc

    def dummy_verify(self, password: str) -> None:
        try:
            bcrypt.checkpw(_password_bytes(password), self._dummy_hash)
        except ValueError as exc:
            raise CredentialHashError(str(exc)) from exc
