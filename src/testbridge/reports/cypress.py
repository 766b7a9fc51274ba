#
# src/testbridge/reports/cypress.py
#
"""
Parses the JSON reporter output of a Cypress run.

Cypress prints browser warnings and other noise before the JSON document,
so the report is located by its first opening brace.
"""
import json
from collections.abc import Mapping
from typing import Any

from attrs import define, field

from testbridge.exceptions import ReportParseError


@define(frozen=True, slots=True)
class CypressStats:
    suites: int
    tests: int
    passes: int
    pending: int
    failures: int
    start: str
    end: str
    duration: int


@define(frozen=True, slots=True)
class CypressCodeFrame:
    line: int
    column: int
    original_file: str
    relative_file: str
    absolute_file: str
    frame: str
    language: str


@define(frozen=True, slots=True)
class CypressError:
    message: str
    name: str
    code_frame: CypressCodeFrame | None = None


@define(frozen=True, slots=True)
class CypressTest:
    title: str
    full_title: str
    current_retry: int
    file: str | None = None
    duration: int | None = None
    err: CypressError | None = None


@define(frozen=True, slots=True)
class CypressResults:
    stats: CypressStats
    tests: tuple[CypressTest, ...] = field(factory=tuple, converter=tuple)
    pending: tuple[CypressTest, ...] = field(factory=tuple, converter=tuple)
    failures: tuple[CypressTest, ...] = field(factory=tuple, converter=tuple)
    passes: tuple[CypressTest, ...] = field(factory=tuple, converter=tuple)


def extract_json_from_output(output: str) -> str:
    """Return ``output`` from its first ``{`` onwards."""
    start = output.find("{")
    if start == -1:
        raise ReportParseError("No JSON found in Cypress output")
    return output[start:]


def _stats(data: Mapping[str, Any]) -> CypressStats:
    return CypressStats(
        suites=data["suites"],
        tests=data["tests"],
        passes=data["passes"],
        pending=data["pending"],
        failures=data["failures"],
        start=data["start"],
        end=data["end"],
        duration=data["duration"],
    )


def _code_frame(data: Mapping[str, Any]) -> CypressCodeFrame:
    return CypressCodeFrame(
        line=data["line"],
        column=data["column"],
        original_file=data["originalFile"],
        relative_file=data["relativeFile"],
        absolute_file=data["absoluteFile"],
        frame=data["frame"],
        language=data["language"],
    )


def _error(data: Mapping[str, Any]) -> CypressError:
    frame = data.get("codeFrame")
    return CypressError(
        message=data["message"],
        name=data["name"],
        code_frame=_code_frame(frame) if frame is not None else None,
    )


def _test(data: Mapping[str, Any]) -> CypressTest:
    err = data.get("err")
    # The reporter emits an empty object for tests that did not fail.
    return CypressTest(
        title=data["title"],
        full_title=data["fullTitle"],
        current_retry=data["currentRetry"],
        file=data.get("file"),
        duration=data.get("duration"),
        err=_error(err) if err else None,
    )


def parse_results(json_str: str) -> CypressResults:
    """
    Build CypressResults from the reporter's JSON document.

    Raises:
        ReportParseError: If the text is not JSON or lacks required keys.
    """
    try:
        data = json.loads(json_str)
        return CypressResults(
            stats=_stats(data["stats"]),
            tests=[_test(t) for t in data["tests"]],
            pending=[_test(t) for t in data["pending"]],
            failures=[_test(t) for t in data["failures"]],
            passes=[_test(t) for t in data["passes"]],
        )
    except json.JSONDecodeError as e:
        raise ReportParseError(f"Failed to parse Cypress JSON: {e}") from e
    except (KeyError, TypeError) as e:
        raise ReportParseError(f"Failed to parse Cypress JSON: missing or invalid field {e}") from e


def summarize(results: CypressResults) -> str:
    """One line per failing test, then the totals."""
    lines = []
    for test in results.failures:
        location = ""
        if test.err is not None and test.err.code_frame is not None:
            frame = test.err.code_frame
            location = f" ({frame.relative_file}:{frame.line}:{frame.column})"
        message = test.err.message if test.err is not None else "failed"
        lines.append(f"FAIL {test.full_title}{location}: {message}")

    stats = results.stats
    lines.append(
        f"{stats.tests} tests, {stats.passes} passed, {stats.failures} failed, "
        f"{stats.pending} pending in {stats.duration}ms"
    )
    return "\n".join(lines)

# 🔼⚙️
