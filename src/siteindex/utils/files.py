"""Utility helpers for working with content files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator, Optional

from siteindex.errors import LocationError
from siteindex.models import FileLocation

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def iter_content_paths(
    root: Path, on_error: Optional[Callable[[OSError], None]] = None
) -> Iterator[Path]:
    """Yield every file under ``root``, skipping hidden entries at any depth."""
    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error):
        # Pruning in place stops os.walk from descending into hidden directories
        dirnames[:] = sorted(name for name in dirnames if not is_hidden(name))
        for name in sorted(filenames):
            if not is_hidden(name):
                yield Path(dirpath) / name


def resolve_location(path: Path, content_root: Path) -> FileLocation:
    """Describe ``path`` relative to ``content_root``.

    Raises LocationError when the path has no name or lies (or links) outside
    the content root.
    """
    path = Path(path)
    if not path.name:
        raise LocationError(str(path), "Path has no file name.")

    absolute = path.absolute()
    try:
        relative = absolute.relative_to(Path(content_root).absolute())
        path.resolve().relative_to(Path(content_root).resolve())
    except ValueError:
        raise LocationError(str(absolute), "Path is outside of the content directory.") from None

    relative_directory = relative.parent.as_posix()
    if relative_directory == ".":
        relative_directory = ""

    return FileLocation(
        absolute_path=str(absolute),
        relative_directory_to_content=relative_directory,
        file_stem=path.stem,
        file_name=path.name,
        extension=path.suffix[1:].lower(),
    )
