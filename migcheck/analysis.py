# Analysis step: run the rule pack against a created database and decode the
# SARIF report it writes. Either a full report comes back or an error is raised.

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from migcheck.config import Config, get_default_config
from migcheck.engine import build_analyze_command, run_engine
from migcheck.errors import AnalysisFailedError, EngineError, ReportDecodeError, ReportReadError
from migcheck.findings.models import SarifReport

logger = logging.getLogger(__name__)


def analyze(db_path: Union[str, Path], config: Optional[Config] = None) -> SarifReport:
    """
    Run `database analyze` on db_path and return the decoded report.

    The engine's output goes straight to the terminal so progress is visible
    live. The report file is written inside the database directory and is
    removed along with it.

    Raises:
        AnalysisFailedError: the analyze step could not run or exited non-zero.
        ReportReadError: the report file could not be read.
        ReportDecodeError: the report file is not a valid SARIF report.
    """
    if config is None:
        config = get_default_config()

    db_path = Path(db_path)
    results_path = db_path / config.results_filename
    command = build_analyze_command(config, db_path, results_path)

    logger.info("Analyzing database %s with %s", db_path, config.rule_pack)
    try:
        run_engine(command)
    except EngineError as e:
        raise AnalysisFailedError(
            f"analysis failed: {e}",
            command=e.command,
            returncode=e.returncode,
            stderr=e.stderr,
        ) from e

    return load_report(results_path)


def load_report(results_path: Union[str, Path]) -> SarifReport:
    """Read and decode a SARIF report file."""
    results_path = Path(results_path)
    try:
        data = results_path.read_bytes()
    except OSError as e:
        raise ReportReadError(f"failed to read results {results_path}: {e}") from e

    try:
        report = SarifReport.model_validate_json(data)
    except ValidationError as e:
        raise ReportDecodeError(f"failed to decode results {results_path}: {e}") from e

    logger.info(
        "Decoded %d run(s), %d result(s) from %s",
        len(report.runs),
        sum(len(run.results) for run in report.runs),
        results_path,
    )
    return report
