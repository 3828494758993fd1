"""
Signatures
==========
HMAC signature generation, validation and data models.
"""

# Re-export all public APIs
from .models import (
    SignatureAlgorithm,
    DEFAULT_ALGORITHM,
    ErrorCode,
    INVALID_SIGNATURE,
    SIGNATURE_TIMESTAMP_EXPIRED,
    SignatureValidationResult,
    Signature,
)
from .hashing import (
    normalize_unix_timestamp,
    unix_timestamp_to_date,
    make_valid_until,
    get_base,
    make_hash,
    encode_digest,
)
from .validation import generate_signature, validate_signature

__all__ = [
    # Models
    "SignatureAlgorithm",
    "DEFAULT_ALGORITHM",
    "ErrorCode",
    "INVALID_SIGNATURE",
    "SIGNATURE_TIMESTAMP_EXPIRED",
    "SignatureValidationResult",
    "Signature",
    # Hashing
    "normalize_unix_timestamp",
    "unix_timestamp_to_date",
    "make_valid_until",
    "get_base",
    "make_hash",
    "encode_digest",
    # Validation
    "generate_signature",
    "validate_signature",
]
