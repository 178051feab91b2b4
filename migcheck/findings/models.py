# Pydantic models: the SARIF subset the engine's report is decoded into, and
# the Finding/Location shape handed to the rich and JSON reporters.

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SarifModel(BaseModel):
    """
    Base for the SARIF subset. Unknown keys are ignored and a JSON null, for a
    key or for a whole object, decodes as the default. Scalars are strict, so
    "3" or 3.0 is not a line number.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def null_as_default(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SarifMessage(SarifModel):
    text: str = Field("", strict=True)


class SarifArtifactLocation(SarifModel):
    uri: str = Field("", strict=True)


class SarifRegion(SarifModel):
    """Start of the flagged span. Column 0 means the engine gave no column."""

    start_line: int = Field(0, alias="startLine", strict=True)
    start_column: int = Field(0, alias="startColumn", strict=True)
    end_line: int = Field(0, alias="endLine", strict=True)


class SarifPhysicalLocation(SarifModel):
    artifact_location: SarifArtifactLocation = Field(
        default_factory=SarifArtifactLocation, alias="artifactLocation"
    )
    region: SarifRegion = Field(default_factory=SarifRegion)


class SarifLocation(SarifModel):
    physical_location: SarifPhysicalLocation = Field(
        default_factory=SarifPhysicalLocation, alias="physicalLocation"
    )

    @property
    def uri(self) -> str:
        return self.physical_location.artifact_location.uri

    @property
    def line(self) -> int:
        return self.physical_location.region.start_line

    @property
    def column(self) -> int:
        return self.physical_location.region.start_column


class SarifResult(SarifModel):
    rule_id: str = Field("", alias="ruleId", strict=True)
    level: str = Field("", strict=True)
    message: SarifMessage = Field(default_factory=SarifMessage)
    locations: list[SarifLocation] = Field(default_factory=list)


class SarifRun(SarifModel):
    results: list[SarifResult] = Field(default_factory=list)


class SarifReport(SarifModel):
    """Decoded engine report: runs, in the order the engine wrote them."""

    runs: list[SarifRun] = Field(default_factory=list)

    def iter_locations(self) -> Iterator[tuple[SarifResult, SarifLocation]]:
        """Yield every (result, location) pair in run, result, location order."""
        for run in self.runs:
            for result in run.results:
                for location in result.locations:
                    yield result, location


class Location(BaseModel):
    """Where in the source a finding was reported (file, line, column)."""

    path: str
    line: int = Field(..., ge=0, description="1-based line number")
    column: int = Field(0, ge=0, description="1-based column number, 0 if unknown")
    end_line: Optional[int] = Field(None, ge=0)
    snippet: Optional[str] = None


class Finding(BaseModel):
    """A single result reported by the engine, with the source line it flags."""

    rule_id: str = ""
    message: str
    location: Location
    severity: str = Field(default="warning", description="SARIF level: error, warning, note")
