"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdrepair.config import Settings, load_config
from mdrepair.core.pipeline import run_export, run_repair


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _export(path: str, settings: Settings, name: Optional[str]) -> None:
    """Run the export step and print per-file results with a summary line."""
    output_dir = Path(settings.output_dir)
    try:
        results = run_export(
            path, output_dir, settings.output_format, name,
            settings.default_stem, settings.parser_config, settings.encoding, settings.input_encoding,
        )
    except RuntimeError as e:
        _fail(str(e))
    if not results:
        typer.echo(f"No reports found under {path}.")
        raise typer.Exit(1)
    for src, dest in results:
        typer.echo(f"  {src} -> {dest}")
    typer.echo(f"Exported {len(results)} report(s) to {output_dir}/")


def repair_cmd(
    path: Annotated[str, typer.Argument(help="Report file to repair, or '-' for stdin")],
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Repair a pasted report and print the Markdown to stdout."""
    _setup_logging(verbose)
    settings = _settings()
    try:
        repaired = run_repair(path, settings.input_encoding)
    except RuntimeError as e:
        _fail(str(e))
    typer.echo(repaired)


def export_cmd(
    path: Annotated[str, typer.Argument(help="Report file or directory to export, or '-' for stdin")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    fmt: Annotated[Optional[str], typer.Option("--format", help="md or html")] = None,
    name: Annotated[Optional[str], typer.Option("--name", help="Filename stem; defaults to the report title")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset for html output")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Repair reports and write them as .md (or .html) files."""
    _setup_logging(verbose)
    settings = _settings(overrides={"output_dir": out, "output_format": fmt, "parser_config": parser})
    _export(path, settings, name)


def render_cmd(
    path: Annotated[str, typer.Argument(help="Report file or directory to render, or '-' for stdin")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    name: Annotated[Optional[str], typer.Option("--name", help="Filename stem; defaults to the report title")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Repair reports and write print-ready HTML."""
    _setup_logging(verbose)
    settings = _settings(overrides={"output_dir": out, "output_format": "html", "parser_config": parser})
    _export(path, settings, name)
