"""Front matter detection and parsing.

Two dialects are supported, told apart by the first character of the first
non-blank line:

* ``+`` -- TOML between ``+++`` fences
* ``-`` -- YAML between ``---`` fences
"""

from __future__ import annotations

import re
import tomllib
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

import yaml

from siteindex.errors import ParseError, Skip
from siteindex.models import FileLocation, FrontMatter

TOML_FENCE = "+++"
YAML_FENCE = "---"

DRAFT = "draft"
TITLE = "title"
SLUG = "slug"
DATE = "date"
DESCRIPTION = "description"
URL = "url"
CATEGORIES = "categories"
SERIES = "series"
TAGS = "tags"
KEYWORDS = "keywords"


class Dialect(str, Enum):
    TOML = "toml"
    YAML = "yaml"


class _FrontMatterLoader(yaml.SafeLoader):
    """Safe loader that reads scalars the way YAML 1.2 does.

    Timestamps stay plain strings and only true/false are booleans, so
    values such as `no`, `yes` or `on` keep their text.
    """


_YAML_1_1_ONLY = ("tag:yaml.org,2002:timestamp", "tag:yaml.org,2002:bool")

_FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _YAML_1_1_ONLY]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
_FrontMatterLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def detect_dialect(text: str, location: FileLocation) -> Dialect:
    first_line = next((line for line in text.splitlines() if line.strip()), "")
    if first_line.startswith("+"):
        return Dialect.TOML
    if first_line.startswith("-"):
        return Dialect.YAML
    # TODO: JSON front matter opens with '{'
    raise ParseError(location.absolute_path, "Could not determine file front matter type.")


def parse_toml_front_matter(
    text: str, location: FileLocation, include_drafts: bool
) -> Tuple[FrontMatter, str]:
    """Return the front matter and raw body of a ``+++`` fenced document."""
    segments = text.strip().split(TOML_FENCE)
    if len(segments) < 2:
        raise ParseError(location.absolute_path, "Could not split on TOML fence.")

    try:
        data = tomllib.loads(segments[-2].strip())
    except tomllib.TOMLDecodeError:
        raise ParseError(location.absolute_path, "Could not parse TOML front matter.") from None

    front_matter = _to_front_matter(data, location, include_drafts)
    return front_matter, segments[-1].strip()


def parse_yaml_front_matter(
    text: str, location: FileLocation, include_drafts: bool
) -> Tuple[FrontMatter, str]:
    """Return the front matter and raw body of a ``---`` fenced document.

    A document with only an opening fence is accepted and has an empty body.
    """
    segments = text.strip().split(YAML_FENCE)
    if len(segments) < 2:
        raise ParseError(location.absolute_path, "Could not split on YAML fence.")

    try:
        data = yaml.load(segments[1].strip(), Loader=_FrontMatterLoader)
    except yaml.YAMLError:
        raise ParseError(location.absolute_path, "Could not parse YAML front matter.") from None
    if not isinstance(data, dict):
        raise ParseError(location.absolute_path, "Could not parse YAML front matter.")

    front_matter = _to_front_matter(data, location, include_drafts)
    body = segments[-1].strip() if len(segments) > 2 else ""
    return front_matter, body


def parse_front_matter(
    text: str, location: FileLocation, include_drafts: bool
) -> Tuple[FrontMatter, str]:
    dialect = detect_dialect(text, location)
    if dialect is Dialect.TOML:
        return parse_toml_front_matter(text, location, include_drafts)
    return parse_yaml_front_matter(text, location, include_drafts)


def _to_front_matter(
    data: Mapping[str, Any], location: FileLocation, include_drafts: bool
) -> FrontMatter:
    # Drafts are skipped before anything else is validated
    draft = data.get(DRAFT)
    is_draft = draft if isinstance(draft, bool) else False
    if is_draft and not include_drafts:
        raise Skip(location.absolute_path, "Is draft.")

    return FrontMatter(
        title=_string(data, TITLE),
        slug=_string(data, SLUG),
        date=_string(data, DATE),
        description=_string(data, DESCRIPTION),
        url=_string(data, URL),
        draft=is_draft,
        categories=_string_list(data, CATEGORIES),
        series=_string_list(data, SERIES),
        tags=_string_list(data, TAGS),
        keywords=_string_list(data, KEYWORDS),
    )


def _string(data: Mapping[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    return value if isinstance(value, str) else None


def _string_list(data: Mapping[str, Any], key: str) -> Tuple[str, ...]:
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
