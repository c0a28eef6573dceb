"""Type aliases for gqlvalue.

This module contains ONLY TypeAlias definitions for JSON trees and numeric
payloads. It has no dependencies on other gqlvalue modules so that
_number.py, _value.py and _json.py can all import from it safely.
"""

from typing import TypeAlias

# JSON type definitions per RFC 8259
# Using string annotations for forward references to avoid runtime | issues
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""

NumberLiteral: TypeAlias = "int | float"
"""The payload of a Number value.

An int is unbounded and keeps the integer representation; a float must be
finite. bool is never a NumberLiteral even though it subclasses int.
"""
