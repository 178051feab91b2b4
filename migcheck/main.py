"""
Typer CLI entry point.

    migcheck [--dir PATH] [--command "make build"] [--format text|rich|json] [-v]

Runs one check session (see session.run_check) and maps any MigcheckError to
"Error: <message>" on stderr with exit code 1.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum
from pathlib import Path
from typing import List

import typer
from pydantic import TypeAdapter
from rich.console import Console
from rich.logging import RichHandler

from migcheck.errors import MigcheckError
from migcheck.findings.extract import collect_findings
from migcheck.findings.models import Finding, SarifReport
from migcheck.reporting.console import render_rich
from migcheck.reporting.text import render_text
from migcheck.session import Notifier, Renderer, run_check

logger = logging.getLogger(__name__)

app = typer.Typer(help="Cosmos migration check - run the CodeQL migration rule pack on a Go module.")


class OutputFormat(str, Enum):
    text = "text"
    rich = "rich"
    json = "json"


_FINDINGS_ADAPTER = TypeAdapter(List[Finding])


def render_json(report: SarifReport) -> None:
    """Print the report's findings as a JSON array."""
    findings = collect_findings(report)
    typer.echo(_FINDINGS_ADAPTER.dump_json(findings, indent=2).decode("utf-8"))


def _get_renderer(output_format: OutputFormat) -> Renderer:
    if output_format is OutputFormat.rich:
        return render_rich
    if output_format is OutputFormat.json:
        return render_json
    return render_text


def _get_notifier(output_format: OutputFormat) -> Notifier:
    # JSON output must be the only thing on stdout.
    if output_format is OutputFormat.json:
        return functools.partial(typer.echo, err=True)
    return typer.echo


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.command()
def check(
    source_dir: Path = typer.Option(
        Path("."),
        "--dir",
        help="Directory to analyze.",
    ),
    build_command: str = typer.Option(
        "",
        "--command",
        help="Custom build command for database creation.",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.text,
        "--format",
        case_sensitive=False,
        help="How to print findings. With json, progress notices go to stderr.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Create a database for the source tree, analyze it and print each finding
    with the source line it points at.
    """
    _configure_logging(verbose)

    try:
        run_check(
            source_dir,
            build_command,
            render=_get_renderer(output_format),
            notify=_get_notifier(output_format),
        )
    except MigcheckError as exc:
        logger.debug("Check failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for the `migcheck` script and `python -m migcheck.main`."""
    app()


if __name__ == "__main__":
    main()
