"""
Canonical Encoding
==================
Deterministic ordering and URL encoding of signed data.
"""

import copy
from typing import Any, Dict, Iterable, List, Mapping, Union
from urllib.parse import quote

from ..exceptions import EncodingError
from .dumpers import ValueDumper, default_value_dumper, is_object, is_sequence, render_scalar

# Characters ``encodeURIComponent`` leaves unescaped (besides alphanumerics)
URI_COMPONENT_SAFE = "-_.!~*'()"


def canonicalize(value: Any) -> Any:
    """
    Recursively sort mapping keys.

    Sequence order is preserved; only keys are sorted, by code point.
    Keys are converted to ``str`` first. Scalars pass through.

    Args:
        value: JSON-compatible value

    Returns:
        Structurally identical value with ordered mappings
    """
    if is_object(value):
        items = sorted(value.items(), key=lambda pair: str(pair[0]))
        return {str(key): canonicalize(item) for key, item in items}
    if is_sequence(value):
        return [canonicalize(item) for item in value]
    return value


def sorted_urlencode(
    data: Mapping[str, Any],
    quoted: bool = True,
    value_dumper: ValueDumper = default_value_dumper,
) -> str:
    """
    Encode a mapping as ``key=value&key=value`` in canonical order.

    Args:
        data: Mapping to encode
        quoted: Percent-encode the result like ``encodeURIComponent``
        value_dumper: Renders each top-level value

    Returns:
        Encoded string, empty for empty data

    Raises:
        EncodingError: If the text cannot be encoded as UTF-8
    """
    ordered = canonicalize(data)
    pairs = []
    for key, value in ordered.items():
        dumped = value_dumper(value)
        if not isinstance(dumped, str):
            dumped = render_scalar(dumped)
        pairs.append(f"{key}={dumped}")
    result = "&".join(pairs)

    if quoted:
        try:
            result = quote(result, safe=URI_COMPONENT_SAFE)
        except UnicodeEncodeError as e:
            raise EncodingError("Signed data is not valid UTF-8 text", details=str(e)) from e
    return result


def dict_keys(data: Mapping[str, Any], return_string: bool = False) -> Union[str, List[str]]:
    """
    Get sorted keys of a mapping.

    Args:
        data: Mapping
        return_string: Join the keys with commas

    Returns:
        Sorted list of keys, or the comma-joined string
    """
    keys = sorted(str(key) for key in data)
    if return_string:
        return ",".join(keys)
    return keys


def extract_signed_data(data: Mapping[str, Any], extra: Iterable[str]) -> Dict[str, Any]:
    """Filter ``data`` down to the whitelisted ``extra`` keys."""
    allowed = set(extra)
    return {
        key: copy.deepcopy(value)
        for key, value in data.items()
        if key in allowed
    }
