"""
Signature Hashing
=================
Base string construction and keyed hashing.

The base string is ``<valid_until>_<auth_user>[_<encoded extra>]``,
where ``valid_until`` always carries exactly one decimal digit and
the extra data is canonically ordered and URL encoded.
"""

import base64
import hashlib
import hmac
import math
import time
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from ..config import SIGNATURE_LIFETIME
from ..encoding import ValueDumper, default_value_dumper, sorted_urlencode
from ..exceptions import EncodingError, MalformedTimestampError
from .models import DEFAULT_ALGORITHM, SignatureAlgorithm

BASE_SEPARATOR = "_"

_ONE_DECIMAL = Decimal("0.1")


def _to_float(value: Any) -> float:
    if value is None or isinstance(value, bool):
        raise MalformedTimestampError(value, "not a number")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise MalformedTimestampError(value, str(e)) from e
    if not math.isfinite(number):
        raise MalformedTimestampError(value, "not finite")
    return number


def normalize_unix_timestamp(value: Union[str, int, float]) -> str:
    """
    Render a Unix timestamp with exactly one decimal digit.

    Ties round away from zero, so ``1628717009.25`` becomes
    ``1628717009.3`` for numbers and strings alike.

    Args:
        value: Timestamp as number or numeric string

    Returns:
        Fixed-point text, e.g. ``1628717009.0``

    Raises:
        MalformedTimestampError: If the value is not a finite number
    """
    number = _to_float(value)
    try:
        return str(Decimal(number).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))
    except InvalidOperation as e:
        raise MalformedTimestampError(value, "out of range") from e


def unix_timestamp_to_date(value: Union[str, int, float]) -> datetime:
    """Convert a Unix timestamp into an aware UTC datetime."""
    number = _to_float(value)
    try:
        return datetime.fromtimestamp(number, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise MalformedTimestampError(value, str(e)) from e


def make_valid_until(lifetime: int = SIGNATURE_LIFETIME) -> str:
    """Expiry timestamp ``lifetime`` seconds from now."""
    return normalize_unix_timestamp(time.time() + lifetime)


def get_base(
    auth_user: str,
    valid_until: Union[str, int, float],
    extra: Optional[Mapping[str, Any]] = None,
    value_dumper: ValueDumper = default_value_dumper,
) -> str:
    """
    Build the string that gets hashed.

    Args:
        auth_user: Principal the signature is issued for
        valid_until: Expiry timestamp
        extra: Additional signed data
        value_dumper: Renders each extra value

    Returns:
        Base string joined with underscores
    """
    base = [
        normalize_unix_timestamp(valid_until),
        "" if auth_user is None else str(auth_user),
    ]

    if extra:
        encoded_extra = sorted_urlencode(extra, quoted=True, value_dumper=value_dumper)
        if encoded_extra:
            base.append(encoded_extra)

    return BASE_SEPARATOR.join(base)


def _to_bytes(value: Union[str, bytes], what: str) -> bytes:
    if isinstance(value, bytes):
        return value
    try:
        return str(value).encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot encode {what} as UTF-8", details=str(e)) from e


def make_hash(
    auth_user: str,
    secret_key: Union[str, bytes],
    valid_until: Union[str, int, float],
    extra: Optional[Mapping[str, Any]] = None,
    value_dumper: ValueDumper = default_value_dumper,
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM,
) -> bytes:
    """
    Compute the raw HMAC digest of the base string.

    Raises:
        EncodingError: On an empty secret key or text that is not
            valid UTF-8
    """
    if not secret_key:
        raise EncodingError("Secret key must not be empty")

    algorithm = SignatureAlgorithm.from_name(algorithm)
    base = get_base(auth_user, valid_until, extra, value_dumper)

    return hmac.new(
        _to_bytes(secret_key, "secret key"),
        _to_bytes(base, "base string"),
        getattr(hashlib, algorithm.value),
    ).digest()


def encode_digest(raw: bytes) -> str:
    """Standard base64 text of a digest."""
    return base64.b64encode(raw).decode("ascii")
