#
# src/testbridge/compiler/__init__.py
#
"""
Request-to-command compiler: locate, validate, compile and dispatch.
"""
from .command import (
    LINE_NUMBER_FLAG,
    CompiledCommand,
    compile_cargo_request,
    compile_spec_target,
    split_base_command,
)
from .dispatcher import Rejection, RequestDispatcher
from .location import ParsedLocation, format_location, parse_location
from .requests import RunCargoTests, RunSpecFile, TestRunnerRequest
from .validator import Framework, ValidatedTarget, validate_spec_location

__all__ = [
    "LINE_NUMBER_FLAG",
    "CompiledCommand",
    "Framework",
    "ParsedLocation",
    "Rejection",
    "RequestDispatcher",
    "RunCargoTests",
    "RunSpecFile",
    "TestRunnerRequest",
    "ValidatedTarget",
    "compile_cargo_request",
    "compile_spec_target",
    "format_location",
    "parse_location",
    "split_base_command",
    "validate_spec_location",
]

# 🔼⚙️
