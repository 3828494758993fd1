"""
Signature Models
================
Data models and enums for signatures and validation results.
"""

import copy
import hashlib
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from ..exceptions import EncodingError


class SignatureAlgorithm(str, Enum):
    """Keyed-hash algorithms available for signing."""
    HMAC_SHA1 = "sha1"      # 160-bit, backward-compatible default
    HMAC_SHA256 = "sha256"
    HMAC_SHA512 = "sha512"

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.value).digest_size

    @classmethod
    def from_name(cls, name: Any) -> "SignatureAlgorithm":
        """
        Resolve an algorithm from its name.

        Accepts members, ``sha256`` style values and ``HMAC_SHA256``
        style member names, ignoring case, dashes and underscores.

        Raises:
            EncodingError: If the name is not a supported algorithm
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if normalized in (member.value, member.name.lower().replace("_", "")):
                return member
        raise EncodingError(f"Unsupported signature algorithm: {name!r}")


DEFAULT_ALGORITHM = SignatureAlgorithm.HMAC_SHA1


@dataclass(frozen=True)
class ErrorCode:
    """A validation error with a numeric code."""
    code: int
    message: str

    def __str__(self) -> str:
        return self.message


INVALID_SIGNATURE = ErrorCode(1, "Invalid signature!")
SIGNATURE_TIMESTAMP_EXPIRED = ErrorCode(2, "Signature timestamp expired!")


@dataclass(frozen=True)
class SignatureValidationResult:
    """Outcome of a signature validation."""
    result: bool
    errors: Tuple[ErrorCode, ...] = ()

    def __bool__(self) -> bool:
        return self.result

    def message(self) -> str:
        """Human readable message of all errors."""
        return " ".join(str(error) for error in self.errors)


@dataclass(frozen=True)
class Signature:
    """A generated signature together with the data it covers."""
    signature: str
    auth_user: str
    valid_until: str
    extra: Dict[str, Any] = field(default_factory=dict)
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM

    def __post_init__(self):
        # Private copy, later changes to the caller's dict are not signed
        extra = copy.deepcopy(self.extra) if self.extra is not None else {}
        object.__setattr__(self, "extra", extra)

    @property
    def is_expired(self) -> bool:
        """Expired at and after ``valid_until``."""
        return not (float(self.valid_until) > time.time())
