"""Assemble page summaries from parsed front matter."""

from __future__ import annotations

from typing import Optional

from siteindex.errors import ParseError
from siteindex.models import FileLocation, FrontMatter, PageIndex

FORWARD_SLASH = "/"


def build_href(slug: Optional[str], url: Optional[str], location: FileLocation) -> str:
    """Address of a page: explicit url, then slug, then the lowercased file stem."""
    if url is not None:
        return url

    relative_part = ""
    if location.relative_directory_to_content:
        relative_part = FORWARD_SLASH + location.relative_directory_to_content

    if slug is not None:
        return relative_part + FORWARD_SLASH + slug + FORWARD_SLASH

    return relative_part + FORWARD_SLASH + location.file_stem.lower() + FORWARD_SLASH


def build_page_index(front_matter: FrontMatter, content: str, location: FileLocation) -> PageIndex:
    """Create a PageIndex, failing when title or date is missing."""
    if front_matter.title is None:
        raise ParseError(location.absolute_path, "Could not read title from front matter")
    if front_matter.date is None:
        raise ParseError(location.absolute_path, "Could not read date from front matter")

    return PageIndex(
        title=front_matter.title.strip(),
        href=build_href(front_matter.slug, front_matter.url, location),
        date=front_matter.date.strip(),
        content=content,
        description=front_matter.description or "",
        categories=front_matter.categories,
        series=front_matter.series,
        tags=front_matter.tags,
        keywords=front_matter.keywords,
        draft=front_matter.draft,
    )
