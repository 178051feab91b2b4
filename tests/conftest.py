"""Shared fixtures: a fake analysis engine standing in for the codeql executable."""

import json
import subprocess
from pathlib import Path

import pytest

from migcheck import engine

SCENARIO_REPORT = {
    "runs": [
        {
            "results": [
                {
                    "message": {"text": "unused variable"},
                    "locations": [
                        {
                            "physicalLocation": {
                                "artifactLocation": {"uri": "foo.go"},
                                "region": {"startLine": 3, "startColumn": 5},
                            }
                        }
                    ],
                }
            ]
        }
    ]
}


class FakeEngine:
    """
    Records every engine invocation and plays the engine's part.

    `database analyze` writes `report` (a dict, or raw text) to the --output
    path. Return codes of either step can be set to simulate failures.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.create_returncode = 0
        self.analyze_returncode = 0
        self.create_stderr = ""
        self.report: object = {"runs": []}
        self.db_paths: list[Path] = []

    def __call__(self, args, capture_output=False, text=False, **kwargs):
        args = list(args)
        self.calls.append(args)
        step = args[2]

        if step == "create":
            self.db_paths.append(Path(args[-1]))
            return subprocess.CompletedProcess(
                args,
                self.create_returncode,
                stdout="" if capture_output else None,
                stderr=self.create_stderr if capture_output else None,
            )

        if step == "analyze":
            if self.analyze_returncode == 0:
                output = next(a for a in args if a.startswith("--output="))
                payload = self.report if isinstance(self.report, str) else json.dumps(self.report)
                Path(output.split("=", 1)[1]).write_text(payload, encoding="utf-8")
            return subprocess.CompletedProcess(args, self.analyze_returncode)

        raise AssertionError(f"unexpected engine call: {args}")

    def step(self, name: str) -> list[str]:
        return next(c for c in self.calls if c[2] == name)


@pytest.fixture
def fake_engine(monkeypatch):
    fake = FakeEngine()
    monkeypatch.setattr(engine.subprocess, "run", fake)
    return fake


@pytest.fixture
def go_source(tmp_path, monkeypatch):
    """A working directory holding foo.go whose 3rd line is `x := 1`."""
    (tmp_path / "foo.go").write_text(
        "package main\n\nx := 1\nfunc main() {}\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def scenario_report():
    return json.loads(json.dumps(SCENARIO_REPORT))
