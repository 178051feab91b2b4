# Rich console output: findings with severity, rule, snippet and caret, then a summary panel.

from __future__ import annotations

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from migcheck.findings.extract import collect_findings
from migcheck.findings.models import Finding, SarifReport


# Severity → Rich style (SARIF levels)
SEVERITY_STYLE = {
    "error": "bold red",
    "warning": "bold yellow",
    "note": "bold blue",
    "none": "bold dim",
}

DEFAULT_SEVERITY_STYLE = "bold white"

SEVERITY_ORDER = ("error", "warning", "note", "none")


def _severity_style(severity: str) -> str:
    return SEVERITY_STYLE.get(severity.lower(), DEFAULT_SEVERITY_STYLE)


def render_rich(report: SarifReport, console: Optional[Console] = None) -> None:
    """Collect findings from the report and print them with Rich."""
    print_findings(collect_findings(report), console=console)


def print_findings(findings: Sequence[Finding], console: Optional[Console] = None) -> None:
    """
    Print findings in engine order, each as a header line, the flagged source
    line and a caret under the reported column, followed by a summary panel.
    """
    if console is None:
        console = Console(highlight=False)

    if not findings:
        console.print(
            Panel(
                "[green]No issues found.[/green]",
                title="Migration Check",
                border_style="green",
                box=box.ROUNDED,
            )
        )
        return

    for f in findings:
        _print_finding(f, console)

    _print_summary(findings, console)


def _print_finding(finding: Finding, console: Console) -> None:
    loc = finding.location
    header = Text.assemble(
        (f"{loc.path}:{loc.line}:{loc.column}", "bold cyan"),
        " ",
        (finding.severity.upper(), _severity_style(finding.severity)),
    )
    if finding.rule_id:
        header.append(f" [{finding.rule_id}]", style="dim")
    header.append(" ")
    header.append(finding.message, style="red")
    console.print(header, soft_wrap=True)

    if loc.snippet is not None:
        gutter = f"  {loc.line}: "
        console.print(Text(gutter, style="dim") + Text(loc.snippet), soft_wrap=True)
        console.print(Text(" " * loc.column) + Text("^", style="yellow"), soft_wrap=True)


def _print_summary(findings: Sequence[Finding], console: Console) -> None:
    """Print a compact summary of findings."""
    by_severity: dict[str, int] = {}
    for f in findings:
        s = f.severity.lower()
        by_severity[s] = by_severity.get(s, 0) + 1

    total = len(findings)
    summary_parts = [f"[bold]{total} finding{'s' if total != 1 else ''}[/bold]"]
    for sev in SEVERITY_ORDER:
        if sev in by_severity:
            summary_parts.append(
                f"[{_severity_style(sev)}]{by_severity[sev]} {sev}[/]"
            )
    others = sum(n for sev, n in by_severity.items() if sev not in SEVERITY_ORDER)
    if others:
        summary_parts.append(f"[{DEFAULT_SEVERITY_STYLE}]{others} other[/]")

    console.print()
    console.print(
        Panel(
            " | ".join(summary_parts),
            title="Summary",
            border_style="yellow",
            box=box.ROUNDED,
        )
    )
