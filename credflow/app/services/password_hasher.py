from abc import ABC, abstractmethod


class CredentialHashError(Exception):
    """Hash computation failed or a stored digest is malformed"""


class PasswordHasher(ABC):
    """One-way adaptive password hashing - application layer"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a password against a stored digest.

        Returns False on mismatch, raises CredentialHashError when the digest
        cannot be checked at all.
        """
        pass

    @abstractmethod
    def dummy_verify(self, password: str) -> None:
        """Spend the cost of one verification without a stored digest"""
        pass
