"""Concurrent traversal of a content directory."""

from __future__ import annotations

import logging
import os
import stat
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from siteindex.errors import (
    FatalSetupError,
    FileOutcome,
    IoError,
    LocationError,
    ParseError,
    PathError,
    Skip,
)
from siteindex.ingestion.markdown_loader import MARKDOWN_EXTENSION, load_markdown_page
from siteindex.models import FileLocation, Outcome, PageIndex
from siteindex.utils.files import iter_content_paths, resolve_location

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class TraversalReport:
    """Every outcome of a traversal except skips, which are only counted."""

    outcomes: List[Outcome] = field(default_factory=list)
    skipped: int = 0

    def record(self, outcome: Outcome) -> None:
        if isinstance(outcome, Skip):
            self.skipped += 1
        else:
            self.outcomes.append(outcome)

    @property
    def pages(self) -> List[PageIndex]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, PageIndex)]

    @property
    def errors(self) -> List[FileOutcome]:
        return [
            outcome
            for outcome in self.outcomes
            if isinstance(outcome, FileOutcome) and outcome.is_error
        ]

    @property
    def has_errors(self) -> bool:
        return any(
            isinstance(outcome, FileOutcome) and outcome.is_error for outcome in self.outcomes
        )


def process_file(location: FileLocation, include_drafts: bool) -> Outcome:
    """Process one file; failures are returned, never raised."""
    try:
        if location.extension != MARKDOWN_EXTENSION:
            raise PathError(location.absolute_path, "Not a compatible file extension.")
        return load_markdown_page(location, include_drafts)
    except FileOutcome as outcome:
        return outcome


class Traverser:
    """Walks a content directory and builds page summaries in parallel."""

    def __init__(
        self,
        content_dir: Path,
        include_drafts: bool = False,
        *,
        max_workers: Optional[int] = None,
    ) -> None:
        self.content_dir = Path(content_dir)
        self.include_drafts = include_drafts
        self.max_workers = max_workers or os.cpu_count() or 1

    def traverse(self) -> TraversalReport:
        """Process every non-hidden file under the content directory.

        Raises FatalSetupError before any work starts when the content
        directory is missing or unreadable.
        """
        self._check_content_dir()
        report = TraversalReport()

        def on_walk_error(error: OSError) -> None:
            self._record(report, IoError(str(error.filename), error.strerror or str(error)))

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_location: Dict[Future[Outcome], FileLocation] = {}
            for path in iter_content_paths(self.content_dir, on_error=on_walk_error):
                try:
                    location = resolve_location(path, self.content_dir)
                except LocationError as exc:
                    self._record(report, exc)
                    continue
                future = executor.submit(process_file, location, self.include_drafts)
                future_to_location[future] = location

            for future in as_completed(future_to_location):
                try:
                    outcome = future.result()
                except Exception as exc:
                    location = future_to_location[future]
                    LOGGER.exception("Unexpected failure processing %s", location)
                    outcome = ParseError(location.absolute_path, f"Unexpected error: {exc}")
                self._record(report, outcome)

        LOGGER.debug(
            "Traversed %s: %d outcomes, %d skipped",
            self.content_dir,
            len(report.outcomes),
            report.skipped,
        )
        return report

    def _check_content_dir(self) -> None:
        path = str(self.content_dir)
        try:
            mode = os.stat(self.content_dir).st_mode
        except OSError as exc:
            raise FatalSetupError(path, f"Content directory is not accessible: {exc.strerror}") from exc
        if not stat.S_ISDIR(mode):
            raise FatalSetupError(path, "Content directory is not a directory.")
        if not os.access(self.content_dir, os.R_OK | os.X_OK):
            raise FatalSetupError(path, "Content directory is not readable.")

    @staticmethod
    def _record(report: TraversalReport, outcome: Outcome) -> None:
        if isinstance(outcome, FileOutcome):
            if outcome.is_error:
                LOGGER.error("%s", outcome)
            else:
                LOGGER.warning("%s", outcome)
        report.record(outcome)
