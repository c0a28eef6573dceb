"""The GraphQL value model.

Value is a closed set of variants: Null, Variable, Number, String, Boolean,
Enum, List, Object and Upload. Every variant is an immutable dataclass, and
each one implements the same three behaviours so they cannot drift apart:

- equality and hashing (structural, except Upload which compares by
  filename only),
- ``str()`` rendering as GraphQL literal syntax,
- ``duplicate()``, which gives nested uploads independent read cursors.

JSON conversion lives in _json.py.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from operator import itemgetter
from typing import TYPE_CHECKING, ClassVar, cast, overload

from ._number import format_number, parse_number_literal, validate_number
from ._printer import quote_string
from ._upload import duplicate_content

if TYPE_CHECKING:
    from types import TracebackType
    from typing import BinaryIO

    from ._types import NumberLiteral

__all__ = [
    "NULL",
    "Boolean",
    "Enum",
    "List",
    "Null",
    "Number",
    "Object",
    "String",
    "Upload",
    "Value",
    "Variable",
]


def _require_str(payload: object, what: str) -> None:
    if not isinstance(payload, str):
        msg = f"{what} must be a str, got {type(payload).__name__}"
        raise TypeError(msg)


def _require_value(payload: object, what: str) -> None:
    if not isinstance(payload, Value):
        msg = f"{what} must be a Value, got {type(payload).__name__}"
        raise TypeError(msg)


class Value(ABC):
    """Base class of every GraphQL value variant.

    Values are immutable. Copying a value with ``copy.copy`` or
    ``copy.deepcopy`` is the same as calling ``duplicate()``.
    """

    __slots__: ClassVar[tuple[str, ...]] = ()

    @staticmethod
    def default() -> "Null":
        """Return the fallback value used where a default is required."""
        return NULL

    def duplicate(self) -> "Value":
        """Return a copy whose upload handles are independent of this one's.

        Values that hold no upload are returned unchanged.
        """
        return self

    def __copy__(self) -> "Value":
        return self.duplicate()

    def __deepcopy__(self, memo: "dict[int, object]") -> "Value":
        return self.duplicate()

    @abstractmethod
    def __str__(self) -> str:
        """Render the value as GraphQL literal syntax."""
        ...


@dataclass(frozen=True, slots=True)
class Null(Value):
    """Absence of a value."""

    def __str__(self) -> str:
        return "null"


NULL = Null()


@dataclass(frozen=True, slots=True)
class Variable(Value):
    """A reference to an operation variable, rendered as ``$name``."""

    name: str

    def __post_init__(self) -> None:
        _require_str(self.name, "variable name")

    def __str__(self) -> str:
        return f"${self.name}"


@dataclass(frozen=True, slots=True, eq=False)
class Number(Value):
    """A numeric literal.

    The payload keeps its representation: ``Number(1)`` and ``Number(1.0)``
    are different values and render as ``1`` and ``1.0``. Integers are
    unbounded.
    """

    value: "NumberLiteral"

    def __post_init__(self) -> None:
        _ = validate_number(self.value)

    @classmethod
    def parse(cls, text: str) -> "Number":
        """Build a number from numeric literal text.

        Args:
            text: Literal text such as "42" or "-1.5e3".

        Returns:
            An integer Number when the text has no fraction or exponent
            part, otherwise a float Number.

        Raises:
            InvalidNumberError: If the text is not a numeric literal.
        """
        return cls(parse_number_literal(text))

    def is_integer(self) -> bool:
        return isinstance(self.value, int)

    def is_float(self) -> bool:
        return isinstance(self.value, float)

    def as_int(self) -> "int | None":
        """Return the integer payload, or None for a float number."""
        if isinstance(self.value, int):
            return self.value
        return None

    def as_float(self) -> "float | None":
        """Return the payload as a float, or None if it does not fit."""
        try:
            return float(self.value)
        except OverflowError:
            return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Number):
            return NotImplemented
        return type(self.value) is type(other.value) and self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self.value), self.value))

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass(frozen=True, slots=True)
class String(Value):
    """A string literal holding raw, unescaped text."""

    value: str

    def __post_init__(self) -> None:
        _require_str(self.value, "string payload")

    def __str__(self) -> str:
        return quote_string(self.value)


@dataclass(frozen=True, slots=True)
class Boolean(Value):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            msg = f"boolean payload must be a bool, got {type(self.value).__name__}"
            raise TypeError(msg)

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Enum(Value):
    """An enum literal. Never equal to a String with the same text."""

    name: str

    def __post_init__(self) -> None:
        _require_str(self.name, "enum name")

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class List(Value, Sequence[Value]):
    """An ordered, possibly empty list of values."""

    items: "tuple[Value, ...]" = ()

    def __post_init__(self) -> None:
        items = tuple(cast("Iterable[Value]", self.items))
        for item in items:
            _require_value(item, "list item")
        object.__setattr__(self, "items", items)

    def duplicate(self) -> "List":
        return List(tuple(item.duplicate() for item in self.items))

    @overload
    def __getitem__(self, index: int) -> Value: ...  # pragma: no cover

    @overload
    def __getitem__(self, index: slice) -> "List": ...  # pragma: no cover

    def __getitem__(self, index: "int | slice") -> "Value | List":
        if isinstance(index, slice):
            return List(self.items[index])
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(item) for item in self.items) + "]"


@dataclass(frozen=True, slots=True, eq=False)
class Object(Value, Mapping[str, Value]):
    """A mapping of unique field names to values, always in sorted key order.

    ``fields`` accepts a mapping or an iterable of ``(key, value)`` pairs;
    a key repeated in pairs keeps its last value. The stored form is a tuple
    of pairs sorted by key, so iteration, rendering and hashing all see the
    same order regardless of how the object was built. Equality compares by
    key lookup and ignores order.
    """

    fields: "tuple[tuple[str, Value], ...]" = ()
    _lookup: "dict[str, Value]" = field(init=False, repr=False)

    def __post_init__(self) -> None:
        source = cast("Mapping[str, Value] | Iterable[tuple[str, Value]]", self.fields)
        if isinstance(source, Mapping):
            lookup = dict(source.items())
        else:
            lookup = dict(source)
        for key, value in lookup.items():
            _require_str(key, "object key")
            _require_value(value, f"object field {key!r}")
        ordered = tuple(sorted(lookup.items(), key=itemgetter(0)))
        object.__setattr__(self, "fields", ordered)
        object.__setattr__(self, "_lookup", lookup)

    def duplicate(self) -> "Object":
        return Object(tuple((key, value.duplicate()) for key, value in self.fields))

    def __getitem__(self, key: str) -> Value:
        return self._lookup[key]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return (key for key, _ in self.fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        if len(self) != len(other):
            return False
        for key, value in self.fields:
            other_value = other._lookup.get(key)
            if other_value is None or other_value != value:
                return False
        return True

    def __hash__(self) -> int:
        return hash(self.fields)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{key}: {value}" for key, value in self.fields) + "}"


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Upload(Value):
    """A file uploaded alongside an operation.

    ``content`` is an open, readable binary file object. Two uploads are
    equal when their filenames are equal; content and content type are not
    compared. An upload has no literal syntax and renders as ``null``.

    Reading ``content`` moves its cursor, so a single Upload must not be read
    from several threads at once. Give each reader its own ``duplicate()``.
    """

    filename: str
    content: "BinaryIO"
    content_type: "str | None" = None

    def __post_init__(self) -> None:
        _require_str(self.filename, "upload filename")
        if self.content_type is not None:
            _require_str(self.content_type, "upload content type")

    def duplicate(self) -> "Upload":
        """Return an Upload with an independent handle to the same bytes.

        Raises:
            UploadError: If the content handle cannot be duplicated.
        """
        return Upload(self.filename, duplicate_content(self.content), self.content_type)

    def close(self) -> None:
        """Release the content handle."""
        self.content.close()

    def __enter__(self) -> "Upload":
        return self

    def __exit__(
        self,
        exc_type: "type[BaseException] | None",
        exc_val: "BaseException | None",
        exc_tb: "TracebackType | None",
    ) -> None:
        self.close()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Upload):
            return NotImplemented
        return self.filename == other.filename

    def __hash__(self) -> int:
        return hash((Upload, self.filename))

    def __repr__(self) -> str:
        return f"Upload({self.filename!r})"

    def __str__(self) -> str:
        return "null"
