"""Shared test configuration and fixtures for the component update helper test suite."""

import sys
from pathlib import Path

import httpx
import pytest

# Add backend to Python path so imports work
backend_dir = str(Path(__file__).parent.parent / "backend")
if backend_dir not in sys.path:
    sys.path.insert(0, backend_dir)


@pytest.fixture
def mock_client():
    """Build an httpx.AsyncClient whose requests are answered by `handler`."""
    def _factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _factory


@pytest.fixture
def component_update_issue():
    """Raw GitHub payload of a labelled component-update issue."""
    return {
        "number": 4711,
        "title": "[New mintty version] 3.6.5",
        "body": (
            "The mintty project released 3.6.5.\r\n\r\n"
            "https://github.com/mintty/mintty/releases/tag/3.6.5\r\n"
        ),
        "labels": [{"id": 1, "name": "component-update", "color": "ededed"}],
        "state": "open",
    }
