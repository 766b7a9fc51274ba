#
# tests/unit/test_cypress_report.py
#
"""
Tests for Cypress JSON reporter parsing.
"""

import json

import pytest

from testbridge.exceptions import ReportParseError
from testbridge.reports import extract_json_from_output, parse_results, summarize

NOISY_OUTPUT = """Warning: The following browser launch options were provided but are not supported by electron

 - args
[3977:0915/103024.520574:ERROR:dbus/bus.cc:408] Failed to connect to the bus: Address does not contain a colon
{
  "stats": {
    "suites": 1,
    "tests": 1,
    "passes": 0,
    "pending": 0,
    "failures": 1
  }
}"""


def _report(**overrides) -> dict:
    failing = {
        "title": "Test title",
        "fullTitle": "Full test title",
        "file": None,
        "duration": 1000,
        "currentRetry": 0,
        "err": {
            "message": "Test error message",
            "name": "CypressError",
            "codeFrame": {
                "line": 23,
                "column": 47,
                "originalFile": "test.cy.js",
                "relativeFile": "test.cy.js",
                "absoluteFile": "/path/test.cy.js",
                "frame": "test code frame",
                "language": "js",
            },
        },
    }
    report = {
        "stats": {
            "suites": 1,
            "tests": 1,
            "passes": 0,
            "pending": 0,
            "failures": 1,
            "start": "2025-09-15T10:30:26.416Z",
            "end": "2025-09-15T10:30:40.850Z",
            "duration": 14434,
        },
        "tests": [failing],
        "pending": [],
        "failures": [failing],
        "passes": [],
    }
    report.update(overrides)
    return report


class TestExtractJson:
    def test_skips_leading_noise(self) -> None:
        json_str = extract_json_from_output(NOISY_OUTPUT)
        assert json_str.startswith("{")
        assert '"stats"' in json_str

    def test_no_json(self) -> None:
        with pytest.raises(ReportParseError, match="^No JSON found in Cypress output$"):
            extract_json_from_output("Some output without JSON")


class TestParseResults:
    def test_parses_nested_error(self) -> None:
        results = parse_results(json.dumps(_report()))

        assert results.stats.suites == 1
        assert results.stats.duration == 14434
        assert len(results.tests) == 1
        test = results.tests[0]
        assert test.title == "Test title"
        assert test.full_title == "Full test title"
        assert test.file is None
        assert test.err is not None
        assert test.err.code_frame is not None
        assert test.err.code_frame.relative_file == "test.cy.js"

    def test_empty_error_object_means_no_error(self) -> None:
        passing = {"title": "ok", "fullTitle": "suite ok", "currentRetry": 0, "err": {}}
        results = parse_results(json.dumps(_report(passes=[passing])))
        assert results.passes[0].err is None
        assert results.passes[0].duration is None

    def test_error_without_code_frame(self) -> None:
        test = {
            "title": "t",
            "fullTitle": "t",
            "currentRetry": 1,
            "err": {"message": "m", "name": "AssertionError"},
        }
        results = parse_results(json.dumps(_report(failures=[test])))
        assert results.failures[0].err.code_frame is None

    def test_invalid_json(self) -> None:
        with pytest.raises(ReportParseError, match="^Failed to parse Cypress JSON: "):
            parse_results("{not json")

    def test_missing_stats_fields(self) -> None:
        with pytest.raises(ReportParseError, match="^Failed to parse Cypress JSON: "):
            parse_results(extract_json_from_output(NOISY_OUTPUT))


class TestSummarize:
    def test_lists_failures_and_totals(self) -> None:
        summary = summarize(parse_results(json.dumps(_report())))
        assert summary.splitlines() == [
            "FAIL Full test title (test.cy.js:23:47): Test error message",
            "1 tests, 0 passed, 1 failed, 0 pending in 14434ms",
        ]
