"""Shared fixtures for siteindex tests."""

from __future__ import annotations

import pytest

from siteindex.models import FileLocation


@pytest.fixture
def file_location() -> FileLocation:
    return FileLocation(
        absolute_path="/home/blog/content/post/example.md",
        relative_directory_to_content="post",
        file_stem="example",
        file_name="example.md",
        extension="md",
    )
