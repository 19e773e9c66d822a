"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Every test gets its own blogs file under tmp_path, so no test reads or
writes the project's data/blogs.json.
"""

import json
from pathlib import Path

import pytest

from blogapi.backend.repositories.blog import BlogStore


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def blogs_file(tmp_path: Path) -> Path:
    """Path for a blogs JSON file that does not exist yet."""
    return tmp_path / "blogs.json"


@pytest.fixture
def blog_store(blogs_file: Path) -> BlogStore:
    """An empty, loaded store backed by a temporary file."""
    store = BlogStore(blogs_file)
    store.load()
    return store


@pytest.fixture
def write_blogs(blogs_file: Path):
    """
    Write raw records to the blogs file before loading.

    Usage:
        def test_something(write_blogs, blogs_file):
            write_blogs([{"id": 1, "content": "hello"}])
    """
    def _write(records: list[dict]) -> Path:
        blogs_file.write_text(json.dumps(records, indent=2), encoding="utf-8")
        return blogs_file

    return _write

