"""
SKA Core Library
================
Short-lived HMAC signatures over structured request data.
"""

__version__ = "0.1.0"

# Config
from ska_core.config import (
    SIGNATURE_LIFETIME,
    DEFAULT_SIGNATURE_PARAM,
    DEFAULT_AUTH_USER_PARAM,
    DEFAULT_VALID_UNTIL_PARAM,
    DEFAULT_EXTRA_PARAM,
    SignerConfig,
)

# Exceptions
from ska_core.exceptions import SkaError, EncodingError, MalformedTimestampError

# Encoding
from ska_core.encoding import (
    ValueDumper,
    default_value_dumper,
    encode_value,
    is_object,
    canonicalize,
    sorted_urlencode,
    dict_keys,
    extract_signed_data,
)

# Signatures
from ska_core.signature import (
    SignatureAlgorithm,
    DEFAULT_ALGORITHM,
    ErrorCode,
    INVALID_SIGNATURE,
    SIGNATURE_TIMESTAMP_EXPIRED,
    SignatureValidationResult,
    Signature,
    normalize_unix_timestamp,
    unix_timestamp_to_date,
    make_valid_until,
    get_base,
    make_hash,
    encode_digest,
    generate_signature,
    validate_signature,
)

# Request Helper
from ska_core.request_helper import (
    RequestHelper,
    signature_to_dict,
    validate_signed_request_data,
)

__all__ = [
    # Config
    "SIGNATURE_LIFETIME",
    "DEFAULT_SIGNATURE_PARAM",
    "DEFAULT_AUTH_USER_PARAM",
    "DEFAULT_VALID_UNTIL_PARAM",
    "DEFAULT_EXTRA_PARAM",
    "SignerConfig",
    # Exceptions
    "SkaError",
    "EncodingError",
    "MalformedTimestampError",
    # Encoding
    "ValueDumper",
    "default_value_dumper",
    "encode_value",
    "is_object",
    "canonicalize",
    "sorted_urlencode",
    "dict_keys",
    "extract_signed_data",
    # Signatures
    "SignatureAlgorithm",
    "DEFAULT_ALGORITHM",
    "ErrorCode",
    "INVALID_SIGNATURE",
    "SIGNATURE_TIMESTAMP_EXPIRED",
    "SignatureValidationResult",
    "Signature",
    "normalize_unix_timestamp",
    "unix_timestamp_to_date",
    "make_valid_until",
    "get_base",
    "make_hash",
    "encode_digest",
    "generate_signature",
    "validate_signature",
    # Request Helper
    "RequestHelper",
    "signature_to_dict",
    "validate_signed_request_data",
]
