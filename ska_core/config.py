"""
Signer Configuration
====================
Defaults and environment-driven configuration for signing.
"""

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .request_helper import RequestHelper
    from .signature.models import SignatureAlgorithm

# Signature lifetime in seconds
SIGNATURE_LIFETIME = 600

# Default names of the request params carrying signature data
DEFAULT_SIGNATURE_PARAM = "signature"
DEFAULT_AUTH_USER_PARAM = "auth_user"
DEFAULT_VALID_UNTIL_PARAM = "valid_until"
DEFAULT_EXTRA_PARAM = "extra"


def _env(name: str, default: str):
    return field(default_factory=lambda: os.environ.get(name, default))


def _algorithm_from_env() -> "SignatureAlgorithm":
    from .signature.models import SignatureAlgorithm

    return SignatureAlgorithm.from_name(
        os.environ.get("SKA_SIGNATURE_ALGORITHM", SignatureAlgorithm.HMAC_SHA1.value)
    )


@dataclass
class SignerConfig:
    """
    Configuration for issuing and validating signatures.

    Defaults are read from ``SKA_*`` environment variables when an
    instance is created. The secret key is never part of the config.
    """
    lifetime: int = field(
        default_factory=lambda: int(os.environ.get("SKA_SIGNATURE_LIFETIME", SIGNATURE_LIFETIME))
    )
    algorithm: "SignatureAlgorithm" = field(default_factory=_algorithm_from_env)
    signature_param: str = _env("SKA_SIGNATURE_PARAM", DEFAULT_SIGNATURE_PARAM)
    auth_user_param: str = _env("SKA_AUTH_USER_PARAM", DEFAULT_AUTH_USER_PARAM)
    valid_until_param: str = _env("SKA_VALID_UNTIL_PARAM", DEFAULT_VALID_UNTIL_PARAM)
    extra_param: str = _env("SKA_EXTRA_PARAM", DEFAULT_EXTRA_PARAM)

    def request_helper(self) -> "RequestHelper":
        """Build a RequestHelper using the configured param names."""
        from .request_helper import RequestHelper

        return RequestHelper(
            signature_param=self.signature_param,
            auth_user_param=self.auth_user_param,
            valid_until_param=self.valid_until_param,
            extra_param=self.extra_param,
            algorithm=self.algorithm,
            lifetime=self.lifetime,
        )
