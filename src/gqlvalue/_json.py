"""One-way conversions between values and JSON.

The two directions are not inverses. Going to JSON erases the difference
between Variable, Enum and String (all become JSON strings) and drops Upload
content (it becomes null). Coming back from JSON only ever produces literal
variants, so every JSON string becomes a String.
"""

import json
from typing import TYPE_CHECKING, NoReturn

from ._constants import MAX_NESTING_DEPTH
from ._exceptions import LimitError, ParseError
from ._value import (
    NULL,
    Boolean,
    Enum,
    List,
    Null,
    Number,
    Object,
    String,
    Upload,
    Value,
    Variable,
)

if TYPE_CHECKING:
    from ._types import JSONValue

__all__ = [
    "erase_to_json",
    "json_nesting_depth",
    "literal_from_json",
    "parse_json_value",
    "serialize_value",
]


def _to_tree(value: Value, variable_prefix: str) -> "JSONValue":
    if isinstance(value, (Null, Upload)):
        return None
    if isinstance(value, Variable):
        return variable_prefix + value.name
    if isinstance(value, (String, Boolean, Number)):
        return value.value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, List):
        return [_to_tree(item, variable_prefix) for item in value.items]
    if isinstance(value, Object):
        return {key: _to_tree(item, variable_prefix) for key, item in value.fields}
    msg = f"not a GraphQL value: {type(value).__name__}"
    raise TypeError(msg)


def erase_to_json(value: Value) -> "JSONValue":
    """Convert a value to a JSON tree, discarding what JSON cannot express.

    Variables become their bare name (without ``$``), enums become plain
    strings and uploads become None. Object keys come out in sorted order.

    Args:
        value: The value to convert.

    Returns:
        A tree of None, bool, int, float, str, list and dict.
    """
    return _to_tree(value, "")


def literal_from_json(tree: object) -> Value:
    """Convert a JSON tree to a value.

    Strings always become String; Variable and Enum are never produced.

    Args:
        tree: A tree of None, bool, int, float, str, list and dict with
            str keys. Tuples are accepted as arrays.

    Returns:
        The corresponding value.

    Raises:
        TypeError: If the tree contains something that is not JSON.
        InvalidNumberError: If the tree contains a NaN or infinite float.
    """
    if tree is None:
        return NULL
    if isinstance(tree, bool):
        return Boolean(tree)
    if isinstance(tree, (int, float)):
        return Number(tree)
    if isinstance(tree, str):
        return String(tree)
    if isinstance(tree, (list, tuple)):
        return List(tuple(literal_from_json(item) for item in tree))
    if isinstance(tree, dict):
        return Object(
            tuple((key, literal_from_json(item)) for key, item in tree.items())
        )
    msg = f"not a JSON value: {type(tree).__name__}"
    raise TypeError(msg)


def serialize_value(value: Value) -> str:
    """Serialize a value to compact JSON text.

    Matches ``erase_to_json`` except that a Variable keeps its ``$`` marker,
    so ``Variable("id")`` serializes as ``"$id"``. Non-ASCII characters are
    written as UTF-8 rather than escaped.

    Args:
        value: The value to serialize.

    Returns:
        JSON text with no whitespace between tokens.
    """
    return json.dumps(
        _to_tree(value, "$"),
        ensure_ascii=False,
        separators=(",", ":"),
        allow_nan=False,
    )


def json_nesting_depth(tree: object) -> int:
    """Return the nesting depth of a JSON tree.

    Primitives and empty containers have depth 1; each enclosing array or
    object adds one.
    """
    max_depth = 0
    stack: list[tuple[object, int]] = [(tree, 1)]
    while stack:
        current, depth = stack.pop()
        max_depth = max(max_depth, depth)
        if isinstance(current, dict):
            stack.extend((item, depth + 1) for item in current.values())
        elif isinstance(current, list):
            stack.extend((item, depth + 1) for item in current)
    return max_depth


def _reject_constant(name: str) -> NoReturn:
    msg = f"invalid JSON constant: {name}"
    raise ParseError(msg)


def parse_json_value(text: "str | bytes") -> Value:
    """Parse JSON text into a value.

    Integers stay integers and numbers with a fraction or exponent become
    floats, so ``1`` and ``1.0`` parse to different values. A key repeated
    within one object keeps its last value.

    Args:
        text: JSON text.

    Returns:
        The parsed value.

    Raises:
        ParseError: If the text is not valid JSON or contains NaN or
            Infinity.
        LimitError: If nesting exceeds MAX_NESTING_DEPTH.
        InvalidNumberError: If a number literal overflows to infinity.
    """
    try:
        tree = json.loads(text, parse_constant=_reject_constant)
    except ParseError:
        raise
    except RecursionError as e:
        msg = f"nesting depth exceeds maximum of {MAX_NESTING_DEPTH}"
        raise LimitError(msg) from e
    except ValueError as e:
        msg = f"invalid JSON: {e}"
        raise ParseError(msg) from e

    depth = json_nesting_depth(tree)
    if depth > MAX_NESTING_DEPTH:
        msg = f"nesting depth {depth} exceeds maximum of {MAX_NESTING_DEPTH}"
        raise LimitError(msg)
    return literal_from_json(tree)
