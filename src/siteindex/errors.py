"""Outcome taxonomy for processing content files."""

from __future__ import annotations

from enum import Enum


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    SKIP = "skip"
    PATH = "path"
    PARSE = "parse"
    IO = "io"


class SiteIndexError(Exception):
    """Base class for all siteindex errors."""


class FatalSetupError(SiteIndexError):
    """The content root is missing or unreadable; nothing was processed."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason} ({path})")
        self.path = path
        self.reason = reason


class FileOutcome(SiteIndexError):
    """Non-success outcome for a single file.

    Raised inside a worker task and returned as a value at the task boundary,
    so one file never aborts its siblings.
    """

    kind: OutcomeKind
    is_error = True

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason} ({path})")
        self.path = path
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileOutcome):
            return NotImplemented
        return (self.kind, self.path, self.reason) == (other.kind, other.path, other.reason)

    def __hash__(self) -> int:
        return hash((self.kind, self.path, self.reason))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={self.path!r}, reason={self.reason!r})"


class Skip(FileOutcome):
    """Deliberate exclusion, e.g. a draft when drafts are not included."""

    kind = OutcomeKind.SKIP
    is_error = False


class PathError(FileOutcome):
    """File is not eligible for the pipeline."""

    kind = OutcomeKind.PATH


class LocationError(PathError):
    """Path cannot be expressed relative to the content root."""


class ParseError(FileOutcome):
    """Front matter is malformed or incomplete."""

    kind = OutcomeKind.PARSE


class IoError(FileOutcome):
    """File contents could not be read."""

    kind = OutcomeKind.IO
