# Plain-text reporter: the compiler-style three-line diagnostic per finding.
#
#   foo.go:3:5: unused variable
#     3: x := 1
#        ^

from __future__ import annotations

from typing import Optional

import typer

from migcheck.errors import SourceLineError
from migcheck.findings.models import SarifReport
from migcheck.source import read_specific_line


def render_text(report: SarifReport, *, color: Optional[bool] = None) -> None:
    """
    Print every (result, location) pair of the report in engine order.

    Each location's source line is read fresh from disk. The first line that
    cannot be read aborts rendering with SourceLineError. ANSI colors are
    dropped when stdout is not a terminal unless `color` forces them.
    """
    for result, location in report.iter_locations():
        uri, line, column = location.uri, location.line, location.column
        try:
            code = read_specific_line(uri, line)
        except SourceLineError as e:
            raise SourceLineError(f"failed to read file: {e}") from e

        message = typer.style(result.message.text, fg=typer.colors.RED)
        typer.echo(f"{uri}:{line}:{column}: {message}", color=color)
        typer.echo(f"  {line}: {code}", color=color)
        # Column is used verbatim as an indent, not clamped to the line length.
        caret = typer.style("^", fg=typer.colors.YELLOW)
        typer.echo(" " * max(column, 0) + caret, color=color)
