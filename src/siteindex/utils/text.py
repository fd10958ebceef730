"""Text helpers for turning markdown bodies into plain text."""

from __future__ import annotations

from typing import Iterable

import markdown
from bs4 import BeautifulSoup

MARKDOWN_EXTENSIONS = ("fenced_code", "tables")


def normalize_whitespace(lines: Iterable[str]) -> str:
    """Collapse whitespace and join lines."""
    return "\n".join(line.strip() for line in lines if line.strip())


def strip_markdown(text: str) -> str:
    """Remove markdown markup, keeping the readable text.

    The body is rendered to HTML first so that links, emphasis, code fences
    and tables all lose their syntax the same way a browser would show them.
    """
    if not text.strip():
        return ""
    html = markdown.markdown(text, extensions=list(MARKDOWN_EXTENSIONS))
    soup = BeautifulSoup(html, "html.parser")
    return normalize_whitespace(soup.get_text().splitlines())
