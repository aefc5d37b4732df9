"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdhtml.config import Settings, load_config
from mdhtml.core.pipeline import render_file, run_convert
from mdhtml.core.source import discover_files
from mdhtml.logger import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def convert_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (default: next to each source)")] = None,
    suffix: Annotated[Optional[str], typer.Option("--suffix", help="Suffix for written files")] = None,
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Source file encoding")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Convert a file, or every .md/.markdown file under a directory, to HTML."""
    settings = _settings(overrides={
        "output_dir": out, "output_suffix": suffix,
        "encoding": encoding, "log_level": log_level,
    })
    if not Path(path).exists():
        _fail(f"No such file or directory: {path}")

    output_dir = Path(settings.output_dir) if settings.output_dir else None
    try:
        results = run_convert(path, output_dir, settings.output_suffix, settings.encoding)
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No markdown files found at {path}.")
        raise typer.Exit(1)

    for src, dest in results:
        typer.echo(f"  {src} -> {dest}")
    typer.echo(f"Converted {len(results)} document(s)")


def render_cmd(
    path: Annotated[str, typer.Argument(help="Markdown file to render")],
    encoding: Annotated[Optional[str], typer.Option("--encoding", help="Source file encoding")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR")] = None,
    ):
    """Print the HTML for a single markdown file to stdout."""
    settings = _settings(overrides={"encoding": encoding, "log_level": log_level})
    source = Path(path)
    if not source.is_file() or not discover_files(source):
        _fail(f"Not a markdown file: {path}")

    try:
        html = render_file(source, settings.encoding)
    except (ValueError, OSError) as e:
        _fail(f"Failed to render {path}", e)
    typer.echo(html, nl=False)
