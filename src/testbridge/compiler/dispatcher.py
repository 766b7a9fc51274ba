# src/testbridge/compiler/dispatcher.py

"""
Routes each request kind through its validator/compiler pair and shapes
failures into a single rejection type for the tool layer.
"""

from typing import assert_never

import structlog
from attrs import define, field

from testbridge.compiler.command import (
    CompiledCommand,
    compile_cargo_request,
    compile_spec_target,
)
from testbridge.compiler.location import parse_location
from testbridge.compiler.requests import RunCargoTests, RunSpecFile, TestRunnerRequest
from testbridge.compiler.validator import validate_spec_location
from testbridge.config.models import CommandConfig
from testbridge.exceptions import CommandValidationError
from testbridge.telemetry import StructLogger

log: StructLogger = structlog.get_logger("compiler.dispatcher")


@define(frozen=True, slots=True)
class Rejection:
    """Externally visible reason a request was refused."""

    kind: str = field()
    message: str = field()
    raw_input: str = field()

    def describe(self) -> str:
        return f"{self.kind}: {self.message} (input: {self.raw_input!r})"


class RequestDispatcher:
    """Compiles requests using base commands fixed at construction time."""

    def __init__(self, config: CommandConfig):
        self._config = config

    @property
    def config(self) -> CommandConfig:
        return self._config

    def compile(self, request: TestRunnerRequest) -> CompiledCommand:
        """
        Compile a request, raising on the first violated rule.

        Raises:
            CommandValidationError: If the request or base command is rejected.
        """
        match request:
            case RunSpecFile(raw_location=raw_location):
                target = validate_spec_location(parse_location(raw_location), raw_input=raw_location)
                return compile_spec_target(self._config.rspec_base, target)
            case RunCargoTests():
                return compile_cargo_request(self._config.cargo_base, request)
            case _:
                assert_never(request)

    def dispatch(self, request: TestRunnerRequest) -> CompiledCommand | Rejection:
        """Compile a request, converting validation errors into a Rejection."""
        try:
            command = self.compile(request)
        except CommandValidationError as e:
            rejection = Rejection(kind=e.kind.value, message=e.message, raw_input=e.raw_input)
            log.debug(
                "Request rejected",
                request_type=type(request).__name__,
                kind=rejection.kind,
                raw_input=rejection.raw_input,
            )
            return rejection

        log.debug(
            "Request compiled",
            request_type=type(request).__name__,
            command=command.display(),
        )
        return command


# 🔼⚙️
