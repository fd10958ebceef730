"""JSON export of page summaries."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from siteindex.models import PageIndex


def serialize_pages(pages: Iterable[PageIndex]) -> List[Dict[str, Any]]:
    """Page dicts sorted by href so output does not depend on completion order."""
    ordered = sorted(pages, key=lambda page: (page.href, page.title))
    return [page.to_dict() for page in ordered]


def dumps_index(pages: Iterable[PageIndex], *, indent: Optional[int] = None) -> str:
    return json.dumps(serialize_pages(pages), ensure_ascii=False, indent=indent)


def write_index(pages: Iterable[PageIndex], path: Path, *, indent: Optional[int] = None) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_index(pages, indent=indent), encoding="utf-8")
    return path
