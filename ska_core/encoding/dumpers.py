"""
Value Dumpers
=============
Render values into the text used inside the canonical string.

The rendering mirrors what a JavaScript signer produces with
``JSON.stringify`` and template-string coercion, so signatures
computed here match signatures computed by the JS client.
"""

import json
import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Callable, List, Tuple

from ..exceptions import EncodingError

ValueDumper = Callable[[Any], str]

# Largest magnitude rendered without an exponent
_PLAIN_NUMBER_LIMIT = 21

_NON_FINITE = ("NaN", "Infinity", "-Infinity")


def is_object(value: Any) -> bool:
    """Check if value is a plain mapping."""
    return isinstance(value, Mapping)


def is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _shortest_digits(value: float) -> Tuple[str, int]:
    """
    Shortest round-trip digits of a positive float.

    Returns:
        Tuple of (digits, n) where value == 0.digits * 10 ** n
    """
    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    while len(digits) > 1 and digits[0] == 0:
        digits.pop(0)
    return "".join(str(d) for d in digits), exponent + len(digits)


def format_number(value: Any) -> str:
    """
    Format a number the way ``Number.prototype.toString`` does.

    Integral floats lose their fractional part (``2.0`` -> ``2``) and
    the exponent form is only used outside ``1e-7 < |x| < 1e21``.

    Args:
        value: int or float

    Returns:
        Decimal text of the number
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int) and abs(value) < 10 ** _PLAIN_NUMBER_LIMIT:
        return str(value)

    try:
        value = float(value)
    except OverflowError:
        # Beyond the double range, Number() gives an infinity
        value = math.inf if value > 0 else -math.inf
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, n = _shortest_digits(abs(value))
    k = len(digits)

    if k <= n <= _PLAIN_NUMBER_LIMIT:
        text = digits + "0" * (n - k)
    elif 0 < n <= _PLAIN_NUMBER_LIMIT:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        exp_text = f"e{'+' if e >= 0 else '-'}{abs(e)}"
        if k == 1:
            text = digits + exp_text
        else:
            text = f"{digits[0]}.{digits[1:]}{exp_text}"
    return sign + text


def render_scalar(value: Any) -> str:
    """Render a leaf value as plain text."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, (bool, int, float, Decimal)):
        return format_number(value)
    return str(value)


def to_json(value: Any) -> str:
    """
    Compact JSON text of a value tree.

    Mapping keys are written in their current order, so callers
    canonicalize first. Strings are escaped like ``JSON.stringify``;
    non-ASCII characters are left as-is for ``encode_value``.

    Raises:
        EncodingError: If the tree holds a value JSON cannot represent
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, Decimal)):
        text = format_number(value)
        if text in _NON_FINITE:
            return "null"
        return text
    if is_object(value):
        items = [f"{to_json(str(k))}:{to_json(v)}" for k, v in value.items()]
        return "{" + ",".join(items) + "}"
    if is_sequence(value):
        return "[" + ",".join(to_json(item) for item in value) + "]"
    raise EncodingError(
        f"Cannot serialize value of type {type(value).__name__}",
        details=repr(value),
    )


def _escape_char(char: str) -> str:
    code = ord(char)
    if code > 0xFFFF:
        # UTF-16 surrogate pair
        code -= 0x10000
        units: List[int] = [0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF)]
    else:
        units = [code]
    return "".join(f"\\u{unit:04x}" for unit in units)


def encode_value(value: str) -> str:
    """
    Escape every non-ASCII character as ``\\uXXXX``.

    Only the first double backslash is collapsed into a single one;
    later pairs are left untouched.

    Args:
        value: JSON text

    Returns:
        ASCII-only text
    """
    encoded = "".join(
        _escape_char(char) if ord(char) > 127 else char
        for char in value
    )
    return encoded.replace("\\\\", "\\", 1)


def default_value_dumper(value: Any) -> str:
    """
    Default value dumper.

    Mappings and sequences become escaped compact JSON, anything
    else its plain text form.
    """
    if is_object(value) or is_sequence(value):
        return encode_value(to_json(value))
    return render_scalar(value)
