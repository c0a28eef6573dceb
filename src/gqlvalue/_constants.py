"""Constants for gqlvalue."""

from typing import Final

MIN_PRINTABLE: Final[int] = 0x20
"""Lowest code point a quoted string emits literally."""

MAX_PRINTABLE: Final[int] = 0xFFFF
"""Highest code point a quoted string emits literally.

Anything above it (and any control character other than CR, LF and tab)
is written as a \\u escape.
"""

MAX_NESTING_DEPTH: Final[int] = 64
"""Maximum nesting depth accepted when parsing JSON text."""

READ_CHUNK_SIZE: Final[int] = 64 * 1024
"""Default read size for duplicated upload handles."""
