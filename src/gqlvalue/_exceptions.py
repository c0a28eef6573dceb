"""Exception hierarchy for gqlvalue."""

__all__ = [
    "GqlValueError",
    "InvalidNumberError",
    "LimitError",
    "ParseError",
    "UploadError",
]


class GqlValueError(Exception):
    """Base class for all gqlvalue errors."""


class InvalidNumberError(GqlValueError, ValueError):
    """A numeric payload is not finite or not a numeric literal."""


class ParseError(GqlValueError, ValueError):
    """JSON text could not be turned into a value."""


class LimitError(GqlValueError):
    """Input exceeds a configured limit."""


class UploadError(GqlValueError, OSError):
    """An upload handle could not be duplicated."""
