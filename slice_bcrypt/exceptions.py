"""
Bcrypt Exceptions
=================
Error taxonomy for crypt-string parsing, salt generation and job handling.
"""

from typing import Any, Optional


class BcryptError(ValueError):
    """Base exception for all bcrypt engine errors."""

    def __init__(self, message: str, value: Optional[Any] = None):
        self.message = message
        self.value = value
        super().__init__(message)


class ParseError(BcryptError):
    """Raised when a crypt string does not follow the $2x$NN$ grammar."""
    pass


class UnsupportedVersionError(BcryptError):
    """Raised for an unknown major or minor version."""
    pass


class InvalidCostError(BcryptError):
    """Raised when the cost factor is outside [4, 31]."""
    pass


class InvalidSaltError(BcryptError):
    """Raised when the salt is too short or not valid bcrypt base64."""
    pass


class EntropySourceError(BcryptError):
    """Raised when the system random source fails."""
    pass


class JobStateError(BcryptError):
    """Raised when a finished or discarded hash job is resumed."""
    pass
