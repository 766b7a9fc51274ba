#
# src/testbridge/runner/factory.py
#
"""
Factory for creating TestRunner instances.
"""
import structlog

from testbridge.exceptions import ConfigurationError
from testbridge.runner.protocols import TestRunner
from testbridge.runner.subprocess_runner import SubprocessTestRunner

log = structlog.get_logger("runner.factory")

RUNNER_MAP: dict[str, type[TestRunner]] = {
    "subprocess": SubprocessTestRunner,
}


def get_test_runner(runner_name: str = "subprocess") -> TestRunner:
    """
    Factory function to get an instance of a TestRunner.
    """
    runner_key = runner_name.lower()
    runner_class = RUNNER_MAP.get(runner_key)

    if not runner_class:
        log.error("Unsupported test runner specified", runner=runner_name)
        raise ConfigurationError(
            f"Unsupported test runner: '{runner_name}'. "
            f"Available runners: {list(RUNNER_MAP.keys())}"
        )

    log.debug("Instantiating test runner", runner=runner_name)
    return runner_class()

# 🔼⚙️
