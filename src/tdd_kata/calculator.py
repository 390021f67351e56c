"""Variadic addition with numeric-string coercion."""

import math
import numbers
import re
from typing import Union

Number = numbers.Number

_INTEGER = re.compile(r"[+-]?\d+")

# Stays under sys.int_info.str_digits_check_threshold so int() never refuses a chunk.
_CHUNK_DIGITS = 640


class CoercionError(ValueError):
    """Raised in strict mode when a string is not a number."""


def _parse_long_integer(text: str) -> int:
    """Parse an integer string longer than int() accepts."""
    sign = -1 if text[0] == "-" else 1
    digits = text.lstrip("+-")
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return sign * value


def _parse_integer(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        # int() refuses integer strings past the interpreter's digit limit
        if _INTEGER.fullmatch(text) and len(text) > _CHUNK_DIGITS:
            return _parse_long_integer(text)
        raise


def coerce_number(value: Union[Number, str], strict: bool = False) -> Number:
    """Convert a number or numeric string to a number.

    Numbers (``int``, ``float``, ``Fraction``, ``Decimal``...) pass through.
    Integral strings become ``int`` however many digits they have, anything
    else ``float()`` accepts becomes ``float``. Strings that are not numbers
    become ``math.nan`` unless ``strict`` is set.

    Args:
        value: A number or a string representation of one.
        strict: Raise CoercionError instead of returning NaN.

    Returns:
        The numeric interpretation of value.

    Raises:
        CoercionError: If strict and value does not coerce to a number other than NaN.
        TypeError: If value is neither a number nor a string.
    """
    if isinstance(value, numbers.Number):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Cannot add value of type {type(value).__name__}")

    text = value.strip()
    try:
        return _parse_integer(text)
    except ValueError:
        pass

    try:
        result = float(text)
    except ValueError:
        result = math.nan

    if strict and math.isnan(result):
        raise CoercionError(f"Not a number: {value!r}")
    return result


def add(*values: Union[Number, str], strict: bool = False) -> Number:
    """Add any number of values together.

    Args:
        *values: Numbers or numeric strings.
        strict: Reject strings that coerce to NaN instead of producing NaN.

    Returns:
        The sum of all values, 0 when none are given.
    """
    return sum(coerce_number(value, strict=strict) for value in values)
