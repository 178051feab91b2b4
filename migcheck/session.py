"""
Check session: create the engine database in a throwaway directory, analyze
it, and render the findings.

The database directory belongs to run_check() alone. It is passed to the
analysis step explicitly and removed when run_check() returns or raises.
"""

from __future__ import annotations

import logging
import shlex
import tempfile
from pathlib import Path
from typing import Callable, Optional, Union

import typer

from migcheck.analysis import analyze
from migcheck.config import Config, get_default_config
from migcheck.engine import build_create_command, run_engine
from migcheck.errors import EngineError, WorkspaceError
from migcheck.findings.models import SarifReport
from migcheck.reporting.text import render_text

logger = logging.getLogger(__name__)

Renderer = Callable[[SarifReport], None]
Notifier = Callable[[str], None]


def run_check(
    source_dir: Union[str, Path],
    custom_build_command: str = "",
    *,
    config: Optional[Config] = None,
    render: Optional[Renderer] = None,
    notify: Optional[Notifier] = None,
) -> None:
    """
    Build a database for source_dir, run the rule pack on it and print findings.

    Args:
        source_dir: Root of the source tree handed to `database create`.
        custom_build_command: Build command for the engine to trace instead of
            its autodetected build; empty means autodetect.
        config: Engine settings; defaults to get_default_config().
        render: Callable printing the decoded report; defaults to render_text.
        notify: Callable printing progress notices; defaults to typer.echo.

    Raises:
        WorkspaceError: the temporary database directory could not be created.
        EngineError: `database create` could not run or failed.
        AnalysisFailedError, ReportReadError, ReportDecodeError: from analyze().
        SourceLineError: from rendering.
    """
    if config is None:
        config = get_default_config()
    if render is None:
        render = render_text
    if notify is None:
        notify = typer.echo

    try:
        # Leftover files the engine made undeletable must not mask the real outcome.
        workspace = tempfile.TemporaryDirectory(
            prefix=config.workspace_prefix, ignore_cleanup_errors=True
        )
    except OSError as e:
        raise WorkspaceError(f"failed to create database directory: {e}") from e

    with workspace as db_dir:
        db_path = Path(db_dir)
        logger.debug("Database directory: %s", db_path)

        command = build_create_command(config, source_dir, custom_build_command, db_path)
        if custom_build_command:
            notify(f"Using custom build command: {custom_build_command}")
        notify(shlex.join(command))

        logger.info("Creating %s database for %s", config.language, source_dir)
        try:
            run_engine(command, capture_output=True)
        except EngineError as e:
            if e.stderr:
                logger.error("%s", e.stderr.rstrip())
            raise

        report = analyze(db_path, config)
        render(report)
