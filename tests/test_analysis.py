"""Tests for migcheck.analysis: the analyze step and report loading."""

import pytest

from migcheck.analysis import analyze, load_report
from migcheck.errors import AnalysisFailedError, ReportDecodeError, ReportReadError


def test_analyze_returns_decoded_report(tmp_path, fake_engine, scenario_report):
    fake_engine.report = scenario_report
    report = analyze(tmp_path)

    call = fake_engine.step("analyze")
    assert f"--output={tmp_path / 'results.json'}" in call
    assert call[-2:] == [str(tmp_path), "skip-mev/cosmos-52-ql"]
    assert report.runs[0].results[0].message.text == "unused variable"


def test_analyze_streams_engine_output(tmp_path, monkeypatch, fake_engine):
    seen = {}
    original = fake_engine.__call__

    def spy(args, capture_output=False, **kwargs):
        seen["capture_output"] = capture_output
        return original(args, capture_output=capture_output, **kwargs)

    monkeypatch.setattr("migcheck.engine.subprocess.run", spy)
    analyze(tmp_path)
    assert seen["capture_output"] is False


def test_analyze_failure_skips_decoding(tmp_path, fake_engine):
    fake_engine.analyze_returncode = 1
    with pytest.raises(AnalysisFailedError, match="analysis failed") as excinfo:
        analyze(tmp_path)
    assert excinfo.value.returncode == 1
    assert not (tmp_path / "results.json").exists()


def test_analyze_malformed_report(tmp_path, fake_engine):
    fake_engine.report = "{ this is not json"
    with pytest.raises(ReportDecodeError):
        analyze(tmp_path)


def test_load_report_missing_file(tmp_path):
    with pytest.raises(ReportReadError):
        load_report(tmp_path / "results.json")


def test_load_report_empty_object(tmp_path):
    p = tmp_path / "results.json"
    p.write_text("{}", encoding="utf-8")
    assert load_report(p).runs == []


def test_load_report_null_document(tmp_path):
    p = tmp_path / "results.json"
    p.write_text("null", encoding="utf-8")
    assert load_report(p).runs == []


def test_load_report_rejects_string_line_number(tmp_path):
    p = tmp_path / "results.json"
    p.write_text(
        '{"runs": [{"results": [{"locations": [{"physicalLocation": {"region": {"startLine": "3"}}}]}]}]}',
        encoding="utf-8",
    )
    with pytest.raises(ReportDecodeError):
        load_report(p)
