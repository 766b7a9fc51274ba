#
# src/testbridge/tools/service.py
#
"""
Tool-call handling: turns tool arguments into requests, runs the compiled
command and shapes the captured output into a tool result.
"""
from collections.abc import Mapping
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, assert_never

import structlog
from attrs import define

from testbridge.compiler import (
    Rejection,
    RequestDispatcher,
    RunCargoTests,
    RunSpecFile,
    TestRunnerRequest,
)
from testbridge.exceptions import TestExecutionError
from testbridge.runner.protocols import TestRunner, TestRunResult
from testbridge.telemetry import StructLogger
from testbridge.tools.specs import RUN_CARGO_TESTS, RUN_RSPEC, TOOL_SPECS, ToolSpec

log: StructLogger = structlog.get_logger("tools.service")

SERVER_NAME = "testbridge"
SERVER_INSTRUCTIONS = (
    "Test runner server. Tools: run_rspec (run RSpec tests for a file, "
    "optionally at given lines), run_cargo_tests (run cargo test with an "
    "optional pattern and extra arguments)."
)


class ToolArgumentError(ValueError):
    """Tool arguments do not match the tool's input schema."""


@define(frozen=True, slots=True)
class ToolResult:
    """Text content returned to the client, flagged when the call failed."""
    text: str
    is_error: bool = False


def _server_version() -> str:
    try:
        return version("testbridge")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _rspec_request(arguments: Mapping[str, Any]) -> RunSpecFile:
    file = arguments.get("file")
    if not isinstance(file, str):
        raise ToolArgumentError("Argument 'file' is required and must be a string")
    return RunSpecFile(raw_location=file)


def _cargo_request(arguments: Mapping[str, Any]) -> RunCargoTests:
    pattern = arguments.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        raise ToolArgumentError("Argument 'pattern' must be a string")
    extra_args = arguments.get("args", [])
    if not isinstance(extra_args, list) or not all(isinstance(a, str) for a in extra_args):
        raise ToolArgumentError("Argument 'args' must be an array of strings")
    return RunCargoTests(pattern=pattern, extra_args=extra_args)


_REQUEST_BUILDERS = {
    RUN_RSPEC: _rspec_request,
    RUN_CARGO_TESTS: _cargo_request,
}


def describe_request(request: TestRunnerRequest) -> tuple[str, str]:
    """Framework label and target description used in result headers."""
    match request:
        case RunSpecFile(raw_location=raw_location):
            return "RSpec", raw_location
        case RunCargoTests(pattern=pattern):
            return "Cargo", pattern if pattern is not None else "all tests"
        case _:
            assert_never(request)


def format_run_result(request: TestRunnerRequest, result: TestRunResult) -> str:
    framework, target = describe_request(request)
    return (
        f"{framework} Test Results for: {target}\n"
        f"Exit Code: {result.exit_code}\n\n"
        f"Output:\n{result.stdout}\n\n"
        f"Errors:\n{result.stderr}"
    )


class TestRunnerService:
    """
    Executes tool calls against a dispatcher and a test runner.

    Holds only immutable configuration, so concurrent calls need no locking.
    """
    __test__ = False

    def __init__(self, dispatcher: RequestDispatcher, runner: TestRunner, working_dir: Path):
        self._dispatcher = dispatcher
        self._runner = runner
        self._working_dir = working_dir

    def list_tools(self) -> list[ToolSpec]:
        return list(TOOL_SPECS)

    def server_info(self) -> dict[str, Any]:
        return {
            "name": SERVER_NAME,
            "version": _server_version(),
            "instructions": SERVER_INSTRUCTIONS,
        }

    def build_request(self, name: str, arguments: Mapping[str, Any]) -> TestRunnerRequest:
        """
        Raises:
            ToolArgumentError: If the tool is unknown or arguments are malformed.
        """
        builder = _REQUEST_BUILDERS.get(name)
        if builder is None:
            raise ToolArgumentError(f"Unknown tool: {name}")
        return builder(arguments)

    async def run_request(self, request: TestRunnerRequest) -> ToolResult:
        outcome = self._dispatcher.dispatch(request)
        if isinstance(outcome, Rejection):
            log.warning(
                "Rejected test request",
                kind=outcome.kind,
                raw_input=outcome.raw_input,
                emoji_key="reject",
            )
            return ToolResult(text=outcome.describe(), is_error=True)

        try:
            result = await self._runner.run_tests(outcome, self._working_dir)
        except TestExecutionError as e:
            log.error("Test command could not be executed", error=str(e), command=e.command)
            return ToolResult(text=f"Test command failed to start: {e}", is_error=True)

        return ToolResult(text=format_run_result(request, result))

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResult:
        """Handle one tool invocation. Never raises for bad client input."""
        call_log = log.bind(tool=name)
        try:
            request = self.build_request(name, arguments or {})
        except ToolArgumentError as e:
            call_log.warning("Invalid tool call", error=str(e))
            return ToolResult(text=str(e), is_error=True)

        call_log.debug("Tool call accepted", request=repr(request))
        return await self.run_request(request)

# 🔼⚙️
