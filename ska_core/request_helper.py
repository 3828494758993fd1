"""
Request Helper
==============
Convert signatures to and from flat request data.

Signed request data carries four metadata params next to the signed
extra values themselves:

    {
        "signature": "WTjN2wPENDW1gCHEVPKz3IXlE0g=",
        "auth_user": "me@example.com",
        "valid_until": "1628717009.0",
        "extra": "amount,currency",
        "amount": 491605,
        "currency": "EUR",
    }

Extra keys that collide with a metadata param name overwrite it.
"""

import copy
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

import structlog

from .config import (
    DEFAULT_AUTH_USER_PARAM,
    DEFAULT_EXTRA_PARAM,
    DEFAULT_SIGNATURE_PARAM,
    DEFAULT_VALID_UNTIL_PARAM,
    SIGNATURE_LIFETIME,
)
from .encoding import ValueDumper, default_value_dumper, dict_keys, extract_signed_data
from .exceptions import EncodingError, MalformedTimestampError
from .signature import (
    DEFAULT_ALGORITHM,
    INVALID_SIGNATURE,
    Signature,
    SignatureAlgorithm,
    SignatureValidationResult,
    generate_signature,
    validate_signature,
)

logger = structlog.get_logger(__name__)

EXTRA_KEYS_SEPARATOR = ","


@dataclass
class RequestHelper:
    """Maps signatures onto request params with configurable names."""
    signature_param: str = DEFAULT_SIGNATURE_PARAM
    auth_user_param: str = DEFAULT_AUTH_USER_PARAM
    valid_until_param: str = DEFAULT_VALID_UNTIL_PARAM
    extra_param: str = DEFAULT_EXTRA_PARAM
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM
    lifetime: int = SIGNATURE_LIFETIME

    def signature_to_dict(self, signature: Signature) -> Dict[str, Any]:
        """
        Flatten a signature into request params.

        Args:
            signature: Signature to flatten

        Returns:
            Metadata params merged with the extra data
        """
        data = {
            self.signature_param: signature.signature,
            self.auth_user_param: signature.auth_user,
            self.valid_until_param: signature.valid_until,
            self.extra_param: dict_keys(signature.extra, return_string=True),
        }
        data.update(copy.deepcopy(signature.extra))
        return data

    def sign(
        self,
        auth_user: str,
        secret_key: Union[str, bytes],
        extra: Optional[Dict[str, Any]] = None,
        valid_until: Optional[Union[str, int, float]] = None,
        value_dumper: ValueDumper = default_value_dumper,
    ) -> Dict[str, Any]:
        """
        Generate a signature and flatten it into request params.

        Raises:
            MalformedTimestampError: If ``valid_until`` is not a usable timestamp
        """
        signature = generate_signature(
            auth_user,
            secret_key,
            valid_until=valid_until,
            lifetime=self.lifetime,
            extra=extra,
            value_dumper=value_dumper,
            algorithm=self.algorithm,
        )
        if signature is None:
            raise MalformedTimestampError(valid_until)
        return self.signature_to_dict(signature)

    def extra_keys(self, data: Mapping[str, Any]) -> Optional[List[str]]:
        """
        Keys listed in the extra param of ``data``.

        Returns:
            List of keys, or None if the param is neither a comma-joined
            string nor a list of strings
        """
        extra_keys = data.get(self.extra_param)
        if not extra_keys:
            return []
        if isinstance(extra_keys, str):
            return extra_keys.split(EXTRA_KEYS_SEPARATOR)
        if isinstance(extra_keys, (list, tuple)) and all(
            isinstance(key, str) for key in extra_keys
        ):
            return list(extra_keys)
        return None

    def extract_extra(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Signed extra data listed in the extra param of ``data``.

        Raises:
            EncodingError: If the extra param is malformed
        """
        extra_keys = self.extra_keys(data)
        if extra_keys is None:
            raise EncodingError(
                "Malformed extra keys param",
                details=repr(data.get(self.extra_param)),
            )
        missing = [key for key in extra_keys if key not in data]
        if missing:
            logger.debug("Signed extra keys missing from request data", missing=missing)
        return extract_signed_data(data, extra_keys)

    def validate_request_data(
        self,
        data: Mapping[str, Any],
        secret_key: Union[str, bytes],
        value_dumper: ValueDumper = default_value_dumper,
        return_object: bool = False,
    ) -> Union[bool, SignatureValidationResult]:
        """
        Validate signed request data.

        Only the keys listed in the extra param are taken into
        account; anything else in ``data`` is ignored.

        Args:
            data: Flat request data
            secret_key: Shared secret
            value_dumper: Renders each extra value
            return_object: Return a SignatureValidationResult instead of a bool

        Returns:
            True/False, or SignatureValidationResult if ``return_object``
        """
        if self.extra_keys(data) is None:
            logger.debug(
                "Rejecting request data with malformed extra keys",
                extra_param=self.extra_param,
            )
            result = SignatureValidationResult(False, (INVALID_SIGNATURE,))
            return result if return_object else result.result

        return validate_signature(
            signature=data.get(self.signature_param),
            auth_user=data.get(self.auth_user_param),
            secret_key=secret_key,
            valid_until=data.get(self.valid_until_param),
            extra=self.extract_extra(data),
            return_object=return_object,
            value_dumper=value_dumper,
            algorithm=self.algorithm,
        )


def signature_to_dict(
    auth_user: str,
    secret_key: Union[str, bytes],
    extra: Optional[Dict[str, Any]] = None,
    valid_until: Optional[Union[str, int, float]] = None,
    lifetime: int = SIGNATURE_LIFETIME,
    signature_param: str = DEFAULT_SIGNATURE_PARAM,
    auth_user_param: str = DEFAULT_AUTH_USER_PARAM,
    valid_until_param: str = DEFAULT_VALID_UNTIL_PARAM,
    extra_param: str = DEFAULT_EXTRA_PARAM,
    value_dumper: ValueDumper = default_value_dumper,
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM,
) -> Dict[str, Any]:
    """Generate a signature and flatten it into request params in one call."""
    helper = RequestHelper(
        signature_param=signature_param,
        auth_user_param=auth_user_param,
        valid_until_param=valid_until_param,
        extra_param=extra_param,
        algorithm=algorithm,
        lifetime=lifetime,
    )
    return helper.sign(auth_user, secret_key, extra, valid_until, value_dumper)


def validate_signed_request_data(
    data: Mapping[str, Any],
    secret_key: Union[str, bytes],
    signature_param: str = DEFAULT_SIGNATURE_PARAM,
    auth_user_param: str = DEFAULT_AUTH_USER_PARAM,
    valid_until_param: str = DEFAULT_VALID_UNTIL_PARAM,
    extra_param: str = DEFAULT_EXTRA_PARAM,
    value_dumper: ValueDumper = default_value_dumper,
    algorithm: SignatureAlgorithm = DEFAULT_ALGORITHM,
    return_object: bool = False,
) -> Union[bool, SignatureValidationResult]:
    """Validate signed request data in one call."""
    helper = RequestHelper(
        signature_param=signature_param,
        auth_user_param=auth_user_param,
        valid_until_param=valid_until_param,
        extra_param=extra_param,
        algorithm=algorithm,
    )
    return helper.validate_request_data(
        data,
        secret_key,
        value_dumper=value_dumper,
        return_object=return_object,
    )
