"""
SKA Exceptions
==============
Exception classes for signing and verification.
"""

from typing import Any, Optional


class SkaError(Exception):
    """Base exception for all signing errors."""

    def __init__(self, message: str, details: Any = None):
        self.message = message
        self.details = details
        super().__init__(message)


class EncodingError(SkaError):
    """Raised when text or key material cannot be turned into bytes."""
    pass


class MalformedTimestampError(SkaError, ValueError):
    """Raised when a ``valid_until`` value is not a usable Unix timestamp."""

    def __init__(self, value: Any, reason: Optional[str] = None):
        self.value = value
        message = f"Malformed timestamp: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, details=reason)
