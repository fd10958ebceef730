"""Markdown document loading.

Reads a content file, splits off its front matter and turns the body into
plain text for the index.
"""

from __future__ import annotations

import logging
from pathlib import Path

from siteindex.errors import IoError
from siteindex.index.page_index import build_page_index
from siteindex.ingestion.front_matter import parse_front_matter
from siteindex.models import FileLocation, PageIndex
from siteindex.utils.text import strip_markdown

LOGGER = logging.getLogger(__name__)

MARKDOWN_EXTENSION = "md"


def read_text(location: FileLocation) -> str:
    try:
        return Path(location.absolute_path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise IoError(location.absolute_path, f"File is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise IoError(location.absolute_path, exc.strerror or str(exc)) from exc


def parse_document(text: str, location: FileLocation, include_drafts: bool) -> PageIndex:
    """Build a PageIndex from the full text of a markdown document."""
    front_matter, body = parse_front_matter(text, location, include_drafts)
    return build_page_index(front_matter, strip_markdown(body), location)


def load_markdown_page(location: FileLocation, include_drafts: bool) -> PageIndex:
    LOGGER.debug("Processing %s", location)
    return parse_document(read_text(location), location, include_drafts)
