# tests/conftest.py
import pytest


def pytest_collection_modifyitems(items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        for marker in ("unit", "integration", "e2e"):
            if f"/{marker}/" in path:
                item.add_marker(getattr(pytest.mark, marker))
