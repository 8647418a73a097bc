"""CLI for study-map (view, check, outline)."""

from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from study_map.config import resolve_log_file, resolve_transition_delay
from study_map.core.importer.loader import read_document_file
from study_map.core.tree.navigation import count_nodes, tree_depth
from study_map.core.tree.outline import render_outline
from study_map.errors import InvalidFormatError, UnsupportedFileError
from study_map.logging_config import configure_logging
from study_map.models.node import Document

app = typer.Typer(help="Study Map: explore .ktree study notes by zooming through their levels.")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    log_file: Annotated[
        Path | None,
        typer.Option("--log-file", help="Where the viewer writes its log"),
    ] = None,
) -> None:
    ctx.obj = {"verbose": verbose, "log_file": log_file}
    configure_logging(verbose=verbose)


def _load_or_exit(path: Path) -> Document:
    """Load a document, turning loader errors into exit code 1."""
    try:
        return read_document_file(path)
    except UnsupportedFileError as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e
    except InvalidFormatError as e:
        logger.error("Invalid document {}: {}", path, e)
        raise typer.Exit(1) from e


@app.command()
def view(
    ctx: typer.Context,
    path: Annotated[
        Path | None,
        typer.Argument(help="Document to open right away"),
    ] = None,
    delay_ms: Annotated[
        int | None,
        typer.Option("--delay-ms", min=0, help="Zoom transition duration in milliseconds"),
    ] = None,
) -> None:
    """Open the interactive viewer."""
    from study_map.tui.app import StudyMapApp

    # The viewer owns the terminal, so logging moves to a file.
    log_file = ctx.obj["log_file"] or resolve_log_file()
    if log_file is not None:
        configure_logging(verbose=ctx.obj["verbose"], log_file=log_file)
    else:
        logger.remove()

    delay = delay_ms / 1000 if delay_ms is not None else resolve_transition_delay()
    StudyMapApp(initial_path=path, delay=delay).run()


@app.command()
def check(
    path: Path = typer.Argument(..., help="Document to validate"),
) -> None:
    """Validate a document and print a short summary."""
    doc = _load_or_exit(path)
    typer.echo(f"{doc.root.title}")
    typer.echo(f"  nodes: {count_nodes(doc.root)}")
    typer.echo(f"  depth: {tree_depth(doc.root)}")


@app.command()
def outline(
    path: Path = typer.Argument(..., help="Document to print"),
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
    no_summaries: bool = typer.Option(False, "--no-summaries", help="Print titles only"),
) -> None:
    """Print a document as an indented markdown outline."""
    doc = _load_or_exit(path)
    text = render_outline(doc.root, max_depth=max_depth, include_summaries=not no_summaries)
    typer.echo(text, nl=False)
