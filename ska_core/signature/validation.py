"""
Signature Generation and Validation
===================================
Issue signatures and verify them by recomputation.
"""

import hmac
from typing import Any, Dict, Optional, Union

import structlog

from ..config import SIGNATURE_LIFETIME
from ..encoding import ValueDumper, default_value_dumper
from ..exceptions import MalformedTimestampError
from .hashing import (
    encode_digest,
    make_hash,
    make_valid_until,
    normalize_unix_timestamp,
    unix_timestamp_to_date,
)
from .models import (
    DEFAULT_ALGORITHM,
    INVALID_SIGNATURE,
    SIGNATURE_TIMESTAMP_EXPIRED,
    Signature,
    SignatureAlgorithm,
    SignatureValidationResult,
)

logger = structlog.get_logger(__name__)


def generate_signature(
    auth_user: str,
    secret_key: Union[str, bytes],
    valid_until: Optional[Union[str, int, float]] = None,
    lifetime: int = SIGNATURE_LIFETIME,
    extra: Optional[Dict[str, Any]] = None,
    value_dumper: ValueDumper = default_value_dumper,
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM,
) -> Optional[Signature]:
    """
    Generate a signature.

    Args:
        auth_user: Principal the signature is issued for
        secret_key: Shared secret
        valid_until: Expiry timestamp; ``lifetime`` seconds from now if empty
        lifetime: Signature lifetime in seconds
        extra: Additional data to sign
        value_dumper: Renders each extra value
        algorithm: Keyed-hash algorithm

    Returns:
        Signature, or None if ``valid_until`` is not a usable timestamp
        (including timestamps past year 9999, which ``datetime`` cannot
        represent although JavaScript ``Date`` accepts them)

    Raises:
        EncodingError: On an empty secret key or unencodable text
    """
    if not extra:
        extra = {}
    algorithm = SignatureAlgorithm.from_name(algorithm)

    if not valid_until:
        valid_until = make_valid_until(lifetime)
    else:
        try:
            unix_timestamp_to_date(valid_until)
            valid_until = normalize_unix_timestamp(valid_until)
        except MalformedTimestampError as e:
            logger.warning(
                "Cannot generate signature for malformed timestamp",
                auth_user=auth_user,
                error=e.message,
            )
            return None

    raw_hash = make_hash(
        auth_user,
        secret_key,
        valid_until,
        extra,
        value_dumper,
        algorithm,
    )

    return Signature(
        signature=encode_digest(raw_hash),
        auth_user=auth_user,
        valid_until=valid_until,
        extra=extra,
        algorithm=algorithm,
    )


def _signatures_match(expected: str, provided: Any) -> bool:
    if not isinstance(provided, str):
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8", "surrogatepass"))


def validate_signature(
    signature: str,
    auth_user: str,
    secret_key: Union[str, bytes],
    valid_until: Union[str, int, float],
    extra: Optional[Dict[str, Any]] = None,
    return_object: bool = False,
    value_dumper: ValueDumper = default_value_dumper,
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM,
) -> Union[bool, SignatureValidationResult]:
    """
    Validate a signature by recomputing it from the claimed data.

    Mismatch and expiry are checked independently; both can be
    reported at once.

    Args:
        signature: Signature value received from the client
        auth_user: Claimed principal
        secret_key: Shared secret
        valid_until: Claimed expiry timestamp
        extra: Claimed additional data
        return_object: Return a SignatureValidationResult instead of a bool
        value_dumper: Renders each extra value
        algorithm: Keyed-hash algorithm

    Returns:
        True/False, or SignatureValidationResult if ``return_object``
    """
    if not extra:
        extra = {}

    errors = []
    expected = None
    if valid_until:
        expected = generate_signature(
            auth_user,
            secret_key,
            valid_until,
            SIGNATURE_LIFETIME,
            extra,
            value_dumper,
            algorithm,
        )

    if expected is None:
        errors.append(INVALID_SIGNATURE)
    else:
        if not _signatures_match(expected.signature, signature):
            errors.append(INVALID_SIGNATURE)
        if expected.is_expired:
            errors.append(SIGNATURE_TIMESTAMP_EXPIRED)

    result = SignatureValidationResult(result=not errors, errors=tuple(errors))

    if not result:
        logger.debug(
            "Signature validation failed",
            auth_user=auth_user,
            errors=[error.code for error in result.errors],
        )

    if return_object:
        return result
    return result.result
