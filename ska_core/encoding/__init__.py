"""
Canonical Encoding
==================
Deterministic serialization of signed data.
"""

# Re-export all public APIs
from .dumpers import (
    ValueDumper,
    default_value_dumper,
    encode_value,
    format_number,
    is_object,
    render_scalar,
    to_json,
)
from .canonical import (
    canonicalize,
    sorted_urlencode,
    dict_keys,
    extract_signed_data,
    URI_COMPONENT_SAFE,
)

__all__ = [
    # Dumpers
    "ValueDumper",
    "default_value_dumper",
    "encode_value",
    "format_number",
    "is_object",
    "render_scalar",
    "to_json",
    # Canonical
    "canonicalize",
    "sorted_urlencode",
    "dict_keys",
    "extract_signed_data",
    "URI_COMPONENT_SAFE",
]
