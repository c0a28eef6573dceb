"""GraphQL values with literal rendering and JSON interop."""

from importlib.metadata import version

from ._constants import MAX_NESTING_DEPTH
from ._exceptions import (
    GqlValueError,
    InvalidNumberError,
    LimitError,
    ParseError,
    UploadError,
)
from ._json import (
    erase_to_json,
    literal_from_json,
    parse_json_value,
    serialize_value,
)
from ._printer import quote_string
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

__version__ = version("gqlvalue")

__all__ = [
    "MAX_NESTING_DEPTH",
    "NULL",
    "Boolean",
    "Enum",
    "GqlValueError",
    "InvalidNumberError",
    "LimitError",
    "List",
    "Null",
    "Number",
    "Object",
    "ParseError",
    "String",
    "Upload",
    "UploadError",
    "Value",
    "Variable",
    "__version__",
    "erase_to_json",
    "literal_from_json",
    "parse_json_value",
    "quote_string",
    "serialize_value",
]
