#
# src/testbridge/runner/subprocess_runner.py
#
"""
A generic test runner using asyncio.subprocess.
"""
import asyncio
from pathlib import Path

import structlog

from testbridge.compiler.command import CompiledCommand
from testbridge.exceptions import TestExecutionError
from testbridge.runner.protocols import TestRunner, TestRunResult

log = structlog.get_logger("runner.subprocess")


class SubprocessTestRunner(TestRunner):
    """
    Implements the TestRunner protocol by executing a command in a subprocess.
    """
    async def run_tests(
        self,
        command: CompiledCommand,
        working_dir: Path,
    ) -> TestRunResult:
        """
        Executes the given command using asyncio.create_subprocess_exec.

        The command is never passed through a shell.
        """
        runner_log = log.bind(
            command=command.display(),
            working_dir=str(working_dir),
        )
        runner_log.info("Executing test command", emoji_key="run")

        if not Path(working_dir).is_dir():
            runner_log.error("Working directory does not exist")
            raise TestExecutionError(
                f"Working directory does not exist: '{working_dir}'", command=command.display()
            )

        try:
            process = await asyncio.create_subprocess_exec(
                *command.argv,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=working_dir,
            )
        except FileNotFoundError as e:
            runner_log.error("Test command not found", command_executable=command.program)
            raise TestExecutionError(
                f"Test command not found: '{command.program}'. Is it installed and in the system's PATH?",
                command=command.display(),
            ) from e
        except OSError as e:
            runner_log.exception("Failed to start test command")
            raise TestExecutionError(
                f"Failed to start test command: {e}", command=command.display()
            ) from e

        stdout_bytes, stderr_bytes = await process.communicate()

        exit_code = process.returncode if process.returncode is not None else -1
        success = exit_code == 0

        stdout = stdout_bytes.decode("utf-8", errors="replace")
        stderr = stderr_bytes.decode("utf-8", errors="replace")

        runner_log.info(
            "Test command finished",
            exit_code=exit_code,
            success=success,
        )
        runner_log.debug(
            "Test command output",
            stdout_len=len(stdout),
            stderr_len=len(stderr),
        )

        return TestRunResult(
            success=success,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )

# 🔼⚙️
