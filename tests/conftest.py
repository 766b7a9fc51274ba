from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from testbridge.compiler import RequestDispatcher
from testbridge.config import CommandConfig
from testbridge.runner import TestRunResult
from testbridge.tools import TestRunnerService


@pytest.fixture
def command_config() -> CommandConfig:
    return CommandConfig(rspec_base="bundle exec rspec", cargo_base="cargo test")


@pytest.fixture
def dispatcher(command_config: CommandConfig) -> RequestDispatcher:
    return RequestDispatcher(command_config)


@pytest.fixture
def mock_runner() -> AsyncMock:
    """Provides a mock TestRunner that reports a passing run."""
    runner = AsyncMock()
    runner.run_tests.return_value = TestRunResult(
        success=True, exit_code=0, stdout="1 example, 0 failures", stderr=""
    )
    return runner


@pytest.fixture
def service(dispatcher: RequestDispatcher, mock_runner: AsyncMock, tmp_path: Path) -> TestRunnerService:
    return TestRunnerService(dispatcher=dispatcher, runner=mock_runner, working_dir=tmp_path)
