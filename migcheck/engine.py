"""
Analysis engine invocations.

Builds the argument lists for the two engine steps the checker drives and
runs them as blocking subprocesses:

    codeql database create --language=go --source-root <dir> [--command <cmd>] <db>
    codeql database analyze --format=sarif-latest --output=<file> <db> <pack>

Typical usage:
    from migcheck.config import get_default_config
    from migcheck.engine import build_create_command, run_engine

    args = build_create_command(get_default_config(), Path("."), "", db_path)
    run_engine(args, capture_output=True)
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Sequence, Union

from migcheck.config import Config
from migcheck.errors import EngineError

logger = logging.getLogger(__name__)


def build_create_command(
    config: Config,
    source_dir: Union[str, Path],
    custom_build_command: str,
    db_path: Union[str, Path],
) -> List[str]:
    """
    Return the `database create` argument list.

    `--command <custom_build_command>` is included only when the build command
    is non-empty. The command string is passed as one argument; the engine
    tokenizes it itself.
    """
    command = [
        config.engine,
        "database",
        "create",
        f"--language={config.language}",
        "--source-root",
        str(source_dir),
    ]
    if custom_build_command:
        command.extend(["--command", custom_build_command])
    command.append(str(db_path))
    return command


def build_analyze_command(
    config: Config,
    db_path: Union[str, Path],
    results_path: Union[str, Path],
) -> List[str]:
    """Return the `database analyze` argument list writing SARIF to `results_path`."""
    return [
        config.engine,
        "database",
        "analyze",
        f"--format={config.sarif_format}",
        f"--output={results_path}",
        str(db_path),
        config.rule_pack,
    ]


def run_engine(args: Sequence[str], *, capture_output: bool = False) -> subprocess.CompletedProcess:
    """
    Run one engine invocation and wait for it to exit.

    With capture_output=False the engine writes straight to this process's
    stdout/stderr. With capture_output=True its output is collected and
    logged at DEBUG level.

    Raises:
        EngineError: the executable could not be launched or exited non-zero.
    """
    args = list(args)
    logger.debug("Running: %s", args)

    try:
        # Build tools print whatever bytes they like; undecodable output is replaced.
        completed = subprocess.run(
            args,
            capture_output=capture_output,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as e:
        raise EngineError(f"failed to launch {args[0]}: {e}", command=args) from e

    if capture_output:
        for stream_name, output in (("stdout", completed.stdout), ("stderr", completed.stderr)):
            if output:
                logger.debug("%s %s:\n%s", args[0], stream_name, output.rstrip())

    if completed.returncode != 0:
        raise EngineError(
            f"{' '.join(args[:3])} exited with status {completed.returncode}",
            command=args,
            returncode=completed.returncode,
            stderr=completed.stderr if capture_output else None,
        )
    return completed
