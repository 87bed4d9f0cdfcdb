"""Command line interface for raggedy."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from raggedy.config import AppConfig
from raggedy.errors import RaggedyError
from raggedy.index.indexer import Indexer


err_console = Console(stderr=True)
app = typer.Typer(help="raggedy - dump markdown and asciidoc files as JSON")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def main(
    directory: Path = typer.Argument(..., help="Directory path to scan for markdown and asciidoc files"),
    skip_unreadable: bool = typer.Option(
        False, "--skip-unreadable", help="Warn about and leave out files that cannot be read"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan DIRECTORY recursively and print every document as a JSON array."""
    _setup_logging(verbose)
    config = AppConfig(skip_unreadable=skip_unreadable)
    indexer = Indexer(config)

    try:
        documents = indexer.index(directory)
    except RaggedyError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from exc

    records = [document.to_record() for document in documents]
    typer.echo(json.dumps(records, indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    app()
