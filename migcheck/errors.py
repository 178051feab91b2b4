# Exceptions raised by the check pipeline. The CLI catches MigcheckError and
# turns it into "Error: <message>" with exit code 1.

from __future__ import annotations

from typing import Optional, Sequence


class MigcheckError(Exception):
    """Base exception for every failure the checker reports."""


class WorkspaceError(MigcheckError):
    """Raised when the temporary database directory cannot be created."""


class EngineError(MigcheckError):
    """Raised when an engine invocation cannot be launched or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr


class AnalysisFailedError(EngineError):
    """Raised when the `database analyze` step fails."""


class ReportReadError(MigcheckError):
    """Raised when the SARIF results file cannot be read."""


class ReportDecodeError(MigcheckError):
    """Raised when the SARIF results file is not a valid report."""


class SourceLineError(MigcheckError):
    """Raised when the source line a finding points at cannot be read."""
