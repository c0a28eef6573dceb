"""Shared fixtures for unit tests."""

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path
    from typing import BinaryIO


@pytest.fixture
def open_upload_file(
    tmp_path: "Path",
) -> "Iterator[Callable[[bytes], BinaryIO]]":
    """Factory fixture that writes bytes to disk and opens them for reading.

    Every handle opened through the factory is closed at teardown.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Yields:
        A callable that takes bytes content and returns an open binary file.

    Example:
        def test_reads(open_upload_file) -> None:
            content = open_upload_file(b"hello")
            assert content.read() == b"hello"
    """
    handles: list[BinaryIO] = []
    counter = 0

    def open_file(content: bytes) -> "BinaryIO":
        nonlocal counter
        counter += 1
        path = tmp_path / f"upload_{counter}.bin"
        _ = path.write_bytes(content)
        handle = path.open("rb")
        handles.append(handle)
        return handle

    yield open_file

    for handle in handles:
        handle.close()
