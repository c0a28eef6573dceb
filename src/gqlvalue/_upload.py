"""Independent duplication of upload content handles.

Duplicating an upload must never share a read cursor with the original.
An ``os.dup`` descriptor shares its file offset with the descriptor it was
copied from, so duplicated handles read with ``os.pread`` from a cursor of
their own and leave the shared offset untouched. Content still buffered
for writing is flushed first so the duplicate sees the same bytes.
"""

import io
import logging
import os
from typing import TYPE_CHECKING

from ._constants import READ_CHUNK_SIZE
from ._exceptions import UploadError

if TYPE_CHECKING:
    from typing import BinaryIO

__all__ = ["duplicate_content"]

logger = logging.getLogger(__name__)


class PositionalReader(io.RawIOBase):
    """Raw read-only stream over a descriptor with a private cursor."""

    def __init__(self, fd: int, position: int = 0) -> None:
        super().__init__()
        self._fd = fd
        self._position = position

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def fileno(self) -> int:
        self._check_open()
        return self._fd

    def readinto(self, buffer: "bytearray | memoryview") -> int:  # type: ignore[override]
        self._check_open()
        data = os.pread(self._fd, len(buffer), self._position)
        size = len(data)
        memoryview(buffer)[:size] = data
        self._position += size
        return size

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        self._check_open()
        if whence == io.SEEK_SET:
            position = offset
        elif whence == io.SEEK_CUR:
            position = self._position + offset
        elif whence == io.SEEK_END:
            position = os.fstat(self._fd).st_size + offset
        else:
            msg = f"invalid whence ({whence}, should be 0, 1 or 2)"
            raise ValueError(msg)
        if position < 0:
            msg = f"negative seek position {position}"
            raise ValueError(msg)
        self._position = position
        return position

    def tell(self) -> int:
        self._check_open()
        return self._position

    def close(self) -> None:
        if self.closed:
            return
        try:
            os.close(self._fd)
        finally:
            super().close()

    def _check_open(self) -> None:
        if self.closed:
            msg = "I/O operation on closed file"
            raise ValueError(msg)


def _duplicate_buffer(content: io.BytesIO) -> io.BytesIO:
    try:
        position = content.tell()
        data = content.getvalue()
    except ValueError as e:
        msg = f"cannot duplicate upload content: {e}"
        raise UploadError(msg) from e
    duplicate = io.BytesIO(data)
    _ = duplicate.seek(position)
    return duplicate


def duplicate_content(content: "BinaryIO") -> "BinaryIO":
    """Return an independent handle to the same bytes as ``content``.

    The new handle starts at the original's current position. Reading,
    seeking or closing either handle does not affect the other.

    Args:
        content: A readable binary file object. In-memory ``BytesIO``
            buffers are copied; anything else must expose a seekable OS
            file descriptor.

    Returns:
        A readable binary file object with its own cursor.

    Raises:
        UploadError: If the content is closed, not seekable, cannot be
            flushed or has no file descriptor, if the descriptor cannot be
            duplicated, or if the platform has no ``os.pread``.
    """
    if isinstance(content, io.BytesIO):
        return _duplicate_buffer(content)

    try:
        fd = content.fileno()
        seekable = content.seekable()
        if content.writable():
            content.flush()
        position = content.tell()
    except AttributeError as e:
        msg = f"upload content is not a file object: {type(content).__name__}"
        raise UploadError(msg) from e
    except (OSError, ValueError) as e:
        msg = f"cannot duplicate upload content: {e}"
        raise UploadError(msg) from e

    if not seekable:
        msg = "cannot duplicate upload content: stream is not seekable"
        raise UploadError(msg)
    if not hasattr(os, "pread"):
        msg = "cannot duplicate upload content: positional reads are not supported"
        raise UploadError(msg)

    try:
        new_fd = os.dup(fd)
    except OSError as e:
        msg = f"cannot duplicate upload descriptor {fd}: {e.strerror}"
        raise UploadError(msg) from e

    logger.debug(
        "duplicated upload descriptor %d as %d at offset %d", fd, new_fd, position
    )
    raw = PositionalReader(new_fd, position)
    return io.BufferedReader(raw, buffer_size=READ_CHUNK_SIZE)  # type: ignore[return-value]
