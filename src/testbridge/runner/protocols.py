#
# src/testbridge/runner/protocols.py
#
"""
Defines protocols and data structures for test execution.
"""
from pathlib import Path
from typing import Protocol, runtime_checkable

from attrs import define

from testbridge.compiler.command import CompiledCommand


@define(frozen=True, slots=True)
class TestRunResult:
    """
    Structured result from a test runner execution.
    """
    __test__ = False

    success: bool
    exit_code: int
    stdout: str
    stderr: str


@runtime_checkable
class TestRunner(Protocol):
    """
    Protocol for a runner that executes a compiled test command.
    """
    async def run_tests(
        self,
        command: CompiledCommand,
        working_dir: Path,
    ) -> TestRunResult:
        """
        Runs the compiled command in the specified directory.

        Args:
            command: The program and arguments to execute.
            working_dir: The directory from which to run the command.

        Returns:
            A TestRunResult with the outcome of the test execution.
        """
        ...

# 🔼⚙️
