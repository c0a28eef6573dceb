"""Numeric payload validation, parsing and formatting.

A Number keeps the representation it was built with: integer literals stay
unbounded Python ints, literals with a fraction or exponent become floats.
"""

import math
import re

from ._exceptions import InvalidNumberError
from ._types import NumberLiteral

__all__ = ["format_number", "parse_number_literal", "validate_number"]

_INTEGER_PATTERN = re.compile(r"-?(?:0|[1-9][0-9]*)")
_FLOAT_PATTERN = re.compile(
    r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"
)


def validate_number(number: object) -> NumberLiteral:
    """Check that an object can be stored in a Number.

    Args:
        number: The candidate payload.

    Returns:
        The payload unchanged.

    Raises:
        TypeError: If the payload is not an int or float (bool included).
        InvalidNumberError: If the payload is a NaN or infinite float.
    """
    if isinstance(number, bool) or not isinstance(number, (int, float)):
        msg = f"number payload must be int or float, got {type(number).__name__}"
        raise TypeError(msg)
    if isinstance(number, float) and not math.isfinite(number):
        msg = f"number must be finite, got {number!r}"
        raise InvalidNumberError(msg)
    return number


def parse_number_literal(text: str) -> NumberLiteral:
    """Parse GraphQL/JSON numeric literal text.

    Args:
        text: Literal text such as "42", "-7", "3.14" or "1e10".

    Returns:
        An int when the text has no fraction or exponent part, else a float.

    Raises:
        InvalidNumberError: If the text is not a numeric literal or a float
            literal overflows.
    """
    if _INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError as e:
            # int() refuses very long digit strings on recent interpreters
            msg = f"invalid number literal: {e}"
            raise InvalidNumberError(msg) from e
    if _FLOAT_PATTERN.fullmatch(text):
        value = float(text)
        if not math.isfinite(value):
            msg = f"number literal out of range: {text!r}"
            raise InvalidNumberError(msg)
        return value
    msg = f"invalid number literal: {text!r}"
    raise InvalidNumberError(msg)


def format_number(number: NumberLiteral) -> str:
    """Return the canonical literal text of a numeric payload."""
    if isinstance(number, int):
        return str(number)
    return repr(number)
