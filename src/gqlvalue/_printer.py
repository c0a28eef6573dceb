"""GraphQL string literal quoting."""

from ._constants import MAX_PRINTABLE, MIN_PRINTABLE

__all__ = ["quote_string"]

# Characters written as themselves even though they fall outside the
# printable range or would need escaping in strict GraphQL source.
_PASSTHROUGH = frozenset("\r\n\t\"\\")


def _quote_char(char: str) -> str:
    code = ord(char)
    if char in _PASSTHROUGH or MIN_PRINTABLE <= code <= MAX_PRINTABLE:
        return char
    # Decimal digits in a four-wide field, not hexadecimal.
    return f"\\u{code:04d}"


def quote_string(text: str) -> str:
    """Quote raw text as a GraphQL string literal.

    Carriage return, line feed, tab, double quote and backslash are emitted
    unescaped. Every other character from U+0020 to U+FFFF is emitted as is.
    Remaining characters (other control characters and code points beyond
    the Basic Multilingual Plane) become ``\\u`` followed by the code point's
    decimal value zero-padded to four digits, so U+0001 is ``\\u0001`` and
    U+1F600 is ``\\u128512``.

    The output keeps compatibility with existing consumers of this format;
    it does not always parse back as strict GraphQL.

    Args:
        text: The unescaped string payload.

    Returns:
        The double-quoted literal.
    """
    return '"' + "".join(_quote_char(char) for char in text) + '"'
