"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from showgraph.upstream.client import TVMazeClient  # noqa: E402

UPSTREAM_BASE_URL = "https://api.tvmaze.test"


def make_upstream_client(handler: Callable[[httpx.Request], httpx.Response]) -> TVMazeClient:
    """Build a TVMazeClient whose requests are answered by ``handler``."""
    return TVMazeClient(UPSTREAM_BASE_URL, timeout=5.0, transport=httpx.MockTransport(handler))


@pytest.fixture
def sample_show_payload() -> dict[str, Any]:
    """A trimmed /shows/{id} payload as returned by TVmaze."""
    return {
        "id": 82,
        "name": "Game of Thrones",
        "status": "Ended",
        "genres": ["Drama", "Adventure", "Fantasy"],
        "schedule": {"time": "21:00", "days": ["Sunday"]},
        "rating": {"average": 8.9},
        "network": {"id": 8, "name": "HBO"},
        "image": {
            "medium": "https://static.tvmaze.com/uploads/images/medium_portrait/190/476117.jpg",
            "original": "https://static.tvmaze.com/uploads/images/original_untouched/190/476117.jpg",
        },
        "summary": "<p>Based on the bestselling book series.</p>",
    }


@pytest.fixture
def sample_cast_payload() -> list[dict[str, Any]]:
    """A trimmed /shows/{id}/cast payload as returned by TVmaze."""
    return [
        {
            "person": {
                "id": 14075,
                "name": "Kit Harington",
                "image": {"medium": "https://static.tvmaze.com/uploads/images/medium_portrait/1/3229.jpg"},
            },
            "character": {"id": 30, "name": "Jon Snow", "image": None},
        },
        {
            "person": {"id": 14076, "name": "Emilia Clarke", "image": None},
            "character": {"id": 31, "name": "Daenerys Targaryen"},
        },
    ]


@pytest.fixture
def upstream_factory() -> Callable[[Callable[[httpx.Request], httpx.Response]], TVMazeClient]:
    """Factory for upstream clients backed by an in-process mock transport."""
    return make_upstream_client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


# Test markers
def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: mark test as integration test")
    config.addinivalue_line("markers", "unit: mark test as unit test")
