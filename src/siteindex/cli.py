"""Command line interface for siteindex."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from siteindex.config import AppConfig
from siteindex.errors import FatalSetupError
from siteindex.index.export import dumps_index, write_index
from siteindex.index.traverser import TraversalReport, Traverser


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="siteindex - build a JSON search index from static site content")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _run(config: AppConfig) -> TraversalReport:
    traverser = Traverser(
        config.content_dir,
        config.include_drafts,
        max_workers=config.resolve_max_workers(),
    )
    try:
        return traverser.traverse()
    except FatalSetupError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc


@app.command()
def build(
    content_dir: Path = typer.Argument(..., help="Content directory to index."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the index to this file instead of stdout."
    ),
    drafts: bool = typer.Option(False, "--drafts", help="Include draft documents."),
    workers: Optional[int] = typer.Option(None, "--workers", help="Number of worker threads."),
    indent: Optional[int] = typer.Option(None, "--indent", help="Indent the JSON output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Index every document in a content directory."""
    _setup_logging(verbose)
    config = AppConfig(
        content_dir=content_dir,
        output_path=output,
        include_drafts=drafts,
        max_workers=workers,
        indent=indent,
    )

    report = _run(config)
    pages = report.pages

    output_path = config.resolve_output_path(Path.cwd())
    if output_path is None:
        typer.echo(dumps_index(pages, indent=config.indent))
    else:
        write_index(pages, output_path, indent=config.indent)
        err_console.print(f"Wrote index to [bold]{escape(str(output_path))}[/bold]")

    err_console.print(
        f"Indexed: {len(pages)}, skipped: {report.skipped}, errors: {len(report.errors)}"
    )
    if report.has_errors:
        raise typer.Exit(code=1)


@app.command()
def check(
    content_dir: Path = typer.Argument(..., help="Content directory to check."),
    drafts: bool = typer.Option(False, "--drafts", help="Include draft documents."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Report documents that cannot be indexed."""
    _setup_logging(verbose)
    report = _run(AppConfig(content_dir=content_dir, include_drafts=drafts))

    if not report.has_errors:
        console.print(f"[green]All {len(report.pages)} documents are valid.[/green]")
        return

    errors = report.errors
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Kind")
    table.add_column("Path")
    table.add_column("Reason")
    for error in sorted(errors, key=lambda item: item.path):
        table.add_row(error.kind.value, escape(error.path), escape(error.reason))

    console.print(table)
    raise typer.Exit(code=1)
