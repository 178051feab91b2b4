"""
Turn a decoded report into Finding objects.

Walks results in the same order the text renderer prints them and attaches
the flagged source line as the location snippet. A line that cannot be read
aborts the whole collection, like rendering does.
"""

import logging
from typing import List

from migcheck.errors import SourceLineError
from migcheck.findings.models import Finding, Location, SarifReport
from migcheck.source import read_specific_line

logger = logging.getLogger(__name__)

DEFAULT_SEVERITY = "warning"


def collect_findings(report: SarifReport) -> List[Finding]:
    """Return one Finding per (result, location) pair in the report."""
    findings: List[Finding] = []
    for result, location in report.iter_locations():
        try:
            snippet = read_specific_line(location.uri, location.line)
        except SourceLineError as e:
            raise SourceLineError(f"failed to read file: {e}") from e

        region = location.physical_location.region
        findings.append(
            Finding(
                rule_id=result.rule_id,
                message=result.message.text,
                severity=result.level or DEFAULT_SEVERITY,
                location=Location(
                    path=location.uri,
                    line=location.line,
                    column=max(location.column, 0),
                    end_line=region.end_line or None,
                    snippet=snippet,
                ),
            )
        )

    logger.debug("Collected %d finding(s)", len(findings))
    return findings
