"""Application configuration defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONTENT_DIR = Path("content")


@dataclass(slots=True)
class AppConfig:
    content_dir: Path = DEFAULT_CONTENT_DIR
    output_path: Path | None = None
    include_drafts: bool = False
    max_workers: int | None = None
    indent: int | None = None

    def resolve_output_path(self, base_dir: Path | None = None) -> Path | None:
        """Output file location, or None when the index goes to stdout."""
        if self.output_path is None:
            return None
        if Path(self.output_path).is_absolute() or base_dir is None:
            return Path(self.output_path)
        return base_dir / self.output_path

    def resolve_max_workers(self) -> int:
        if self.max_workers is not None and self.max_workers > 0:
            return self.max_workers
        return os.cpu_count() or 1
