"""Tests for front matter detection and parsing."""

from __future__ import annotations

import pytest

from siteindex.errors import ParseError, Skip
from siteindex.ingestion.front_matter import (
    Dialect,
    detect_dialect,
    parse_front_matter,
    parse_toml_front_matter,
    parse_yaml_front_matter,
)
from siteindex.models import FileLocation

YAML_DOCUMENT = """
---
draft: false
title: Responsive Blog Images
date: "2019-01-20T23:11:28Z"
slug: responsive-blog-images
tags:
  - Hugo
  - Images
  - Responsive
  - Blog
---
The state of images on the web is pretty rough.
"""

TOML_DOCUMENT = """
+++
date = "2016-04-17"
draft = false
title = \"\"\"Evaluating Software Design\"\"\"
slug = "evaluating-software-design"
tags = ['software development', 'revision', 'design']
banner = ""
aliases = ['/evaluating-software-design/']
+++

Design is iterative
"""


class TestDetectDialect:
    """Test first-character dialect sniffing."""

    def test_toml(self, file_location: FileLocation) -> None:
        assert detect_dialect(TOML_DOCUMENT, file_location) is Dialect.TOML

    def test_yaml(self, file_location: FileLocation) -> None:
        assert detect_dialect(YAML_DOCUMENT, file_location) is Dialect.YAML

    def test_skips_blank_lines(self, file_location: FileLocation) -> None:
        """Leading blank lines are ignored."""
        assert detect_dialect("\n   \n+++\n", file_location) is Dialect.TOML

    def test_unknown(self, file_location: FileLocation) -> None:
        """Anything else cannot be classified."""
        with pytest.raises(ParseError):
            detect_dialect("# Just a heading\n", file_location)

    def test_json_not_supported(self, file_location: FileLocation) -> None:
        with pytest.raises(ParseError):
            detect_dialect('{"title": "x"}\n', file_location)

    def test_empty_file(self, file_location: FileLocation) -> None:
        with pytest.raises(ParseError):
            detect_dialect("", file_location)


class TestParseYamlFrontMatter:
    """Test YAML front matter parsing."""

    def test_page_from_yaml(self, file_location: FileLocation) -> None:
        """Reads the fields and the body."""
        front_matter, body = parse_yaml_front_matter(YAML_DOCUMENT, file_location, False)

        assert front_matter.title == "Responsive Blog Images"
        assert front_matter.date == "2019-01-20T23:11:28Z"
        assert front_matter.slug == "responsive-blog-images"
        assert front_matter.tags == ("Hugo", "Images", "Responsive", "Blog")
        assert front_matter.series == ()
        assert front_matter.keywords == ()
        assert front_matter.categories == ()
        assert front_matter.description is None
        assert body == "The state of images on the web is pretty rough."

    def test_unquoted_date_stays_a_string(self, file_location: FileLocation) -> None:
        """Timestamps are not converted to date objects."""
        text = "---\ntitle: T\ndate: 2019-01-20\n---\nBody"

        front_matter, _ = parse_yaml_front_matter(text, file_location, False)

        assert front_matter.date == "2019-01-20"

    def test_draft_is_skipped(self, file_location: FileLocation) -> None:
        """Drafts are skipped when drafts are not included."""
        text = YAML_DOCUMENT.replace("draft: false", "draft: true")

        with pytest.raises(Skip):
            parse_yaml_front_matter(text, file_location, False)

    def test_draft_included(self, file_location: FileLocation) -> None:
        """Drafts are parsed when drafts are included."""
        text = YAML_DOCUMENT.replace("draft: false", "draft: true")

        front_matter, _ = parse_yaml_front_matter(text, file_location, True)

        assert front_matter.draft is True

    def test_draft_skipped_before_validation(self, file_location: FileLocation) -> None:
        """A draft with nothing else still yields a skip."""
        with pytest.raises(Skip):
            parse_yaml_front_matter("---\ndraft: true\n---\n", file_location, False)

    def test_ok_if_fence_not_closed(self, file_location: FileLocation) -> None:
        """Only an opening fence is accepted with an empty body."""
        text = "\n---\ndraft: false\ntitle: Responsive Blog Images\ndate: \"2019-01-20\"\ntags:\n  - Hugo\n"

        front_matter, body = parse_yaml_front_matter(text, file_location, False)

        assert front_matter.title == "Responsive Blog Images"
        assert front_matter.tags == ("Hugo",)
        assert body == ""

    def test_malformed_yaml(self, file_location: FileLocation) -> None:
        """Invalid YAML is a parse error."""
        text = "---\ntitle: [unclosed\ndate: 2019\n---\nBody"

        with pytest.raises(ParseError):
            parse_yaml_front_matter(text, file_location, False)

    def test_non_mapping_yaml(self, file_location: FileLocation) -> None:
        """A scalar or list document is a parse error."""
        with pytest.raises(ParseError):
            parse_yaml_front_matter("---\n- a\n- b\n---\nBody", file_location, False)

    def test_empty_yaml(self, file_location: FileLocation) -> None:
        """An empty metadata block is a parse error."""
        with pytest.raises(ParseError):
            parse_yaml_front_matter("---\n---\nBody", file_location, False)

    def test_non_string_entries_dropped(self, file_location: FileLocation) -> None:
        """List entries that are not strings are ignored and the rest trimmed."""
        text = "---\ntitle: T\ndate: D\ntags:\n  - 1\n  - ' spaced '\n  - {a: b}\n  - ''\ncategories: notalist\n---\n"

        front_matter, _ = parse_yaml_front_matter(text, file_location, False)

        assert front_matter.tags == ("spaced",)
        assert front_matter.categories == ()

    def test_yes_no_on_stay_strings(self, file_location: FileLocation) -> None:
        """Only true/false are booleans; yes, no and on keep their text."""
        text = "---\ntitle: No\ndate: '2020'\ndraft: yes\ntags: [on, off, Hugo]\n---\nBody"

        front_matter, _ = parse_yaml_front_matter(text, file_location, False)

        assert front_matter.title == "No"
        assert front_matter.draft is False
        assert front_matter.tags == ("on", "off", "Hugo")

    def test_true_false_are_booleans(self, file_location: FileLocation) -> None:
        """Capitalised true still marks a draft."""
        with pytest.raises(Skip):
            parse_yaml_front_matter("---\ntitle: T\ndraft: True\n---\n", file_location, False)

        front_matter, _ = parse_yaml_front_matter(
            "---\ntitle: T\ndraft: FALSE\n---\n", file_location, False
        )
        assert front_matter.draft is False

    def test_non_string_title_is_absent(self, file_location: FileLocation) -> None:
        """Scalars of other types do not count as strings."""
        front_matter, _ = parse_yaml_front_matter("---\ntitle: 42\n---\n", file_location, False)

        assert front_matter.title is None

    def test_body_is_last_segment(self, file_location: FileLocation) -> None:
        """Extra fences in the body leave only the text after the last one."""
        text = "---\ntitle: T\ndate: D\n---\nFirst part\n\n---\n\nSecond part"

        _, body = parse_yaml_front_matter(text, file_location, False)

        assert body == "Second part"


class TestParseTomlFrontMatter:
    """Test TOML front matter parsing."""

    def test_page_from_toml(self, file_location: FileLocation) -> None:
        """Reads the fields and the body."""
        front_matter, body = parse_toml_front_matter(TOML_DOCUMENT, file_location, False)

        assert front_matter.title == "Evaluating Software Design"
        assert front_matter.date == "2016-04-17"
        assert front_matter.tags == ("software development", "revision", "design")
        assert front_matter.series == ()
        assert front_matter.keywords == ()
        assert front_matter.categories == ()
        assert front_matter.description is None
        assert body == "Design is iterative"

    def test_draft_is_skipped(self, file_location: FileLocation) -> None:
        text = TOML_DOCUMENT.replace("draft = false", "draft = true")

        with pytest.raises(Skip):
            parse_toml_front_matter(text, file_location, False)

    def test_draft_skipped_before_validation(self, file_location: FileLocation) -> None:
        """A draft missing required fields is still a skip."""
        with pytest.raises(Skip):
            parse_toml_front_matter("+++\ndraft = true\n+++\n", file_location, False)

    def test_no_fence(self, file_location: FileLocation) -> None:
        """Text without any fence cannot be split."""
        with pytest.raises(ParseError):
            parse_toml_front_matter("+ title = 'x'", file_location, False)

    def test_malformed_toml(self, file_location: FileLocation) -> None:
        """Invalid TOML is a parse error."""
        text = TOML_DOCUMENT.replace('date = "2016-04-17"', 'date: "2016-04-17"')

        with pytest.raises(ParseError):
            parse_toml_front_matter(text, file_location, False)

    def test_missing_closing_fence_has_no_metadata(self, file_location: FileLocation) -> None:
        """Without a closing fence the metadata block is empty."""
        text = TOML_DOCUMENT.replace("+++\n\nDesign", "\nDesign")

        front_matter, _ = parse_toml_front_matter(text, file_location, False)

        assert front_matter.title is None

    def test_non_string_values(self, file_location: FileLocation) -> None:
        """Unquoted dates and non-string array entries are not strings."""
        text = "+++\ntitle = 'T'\ndate = 2016-04-17\nkeywords = ['a', 1, ' b ']\n+++\nBody"

        front_matter, _ = parse_toml_front_matter(text, file_location, False)

        assert front_matter.date is None
        assert front_matter.keywords == ("a", "b")


class TestParseFrontMatter:
    """Test dispatch on the detected dialect."""

    def test_dispatches_yaml(self, file_location: FileLocation) -> None:
        front_matter, _ = parse_front_matter(YAML_DOCUMENT, file_location, False)

        assert front_matter.slug == "responsive-blog-images"

    def test_dispatches_toml(self, file_location: FileLocation) -> None:
        front_matter, _ = parse_front_matter(TOML_DOCUMENT, file_location, False)

        assert front_matter.slug == "evaluating-software-design"
