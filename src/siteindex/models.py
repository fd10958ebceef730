"""Core siteindex data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, Union

from siteindex.errors import IoError, ParseError, PathError, Skip


@dataclass(frozen=True, slots=True)
class FileLocation:
    """Where a content file lives, relative to the content root."""

    absolute_path: str
    relative_directory_to_content: str
    file_stem: str
    file_name: str
    extension: str

    def __str__(self) -> str:
        return self.absolute_path


@dataclass(frozen=True, slots=True)
class FrontMatter:
    """Metadata read from a document's front matter block."""

    title: Optional[str] = None
    slug: Optional[str] = None
    date: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    draft: bool = False
    categories: Tuple[str, ...] = ()
    series: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()


_OPTIONAL_FIELDS = ("description", "categories", "series", "tags", "keywords")


@dataclass(frozen=True, slots=True)
class PageIndex:
    """Summary of one document, ready to be written to the search index."""

    title: str
    href: str
    date: str
    content: str
    description: str = ""
    categories: Tuple[str, ...] = ()
    series: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    draft: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form; empty description and list fields are omitted."""
        data: Dict[str, Any] = {
            "title": self.title,
            "href": self.href,
            "date": self.date,
            "content": self.content,
        }
        for name in _OPTIONAL_FIELDS:
            value = getattr(self, name)
            if value:
                data[name] = list(value) if isinstance(value, tuple) else value
        data["draft"] = self.draft
        return data


Outcome = Union[PageIndex, Skip, PathError, ParseError, IoError]
