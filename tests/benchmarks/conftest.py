from importlib.util import find_spec
from pathlib import Path

import pytest

_HAS_CODSPEED = find_spec("pytest_codspeed") is not None


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    test_dir = Path(__file__).parent
    skip = pytest.mark.skip(reason="pytest-codspeed is not installed")
    for item in items:
        if Path(item.path).is_relative_to(test_dir):
            item.add_marker(pytest.mark.benchmark)
            if not _HAS_CODSPEED:
                item.add_marker(skip)
