"""testbridge - compile tool-call test requests into safe RSpec and Cargo commands."""

from testbridge.compiler import (
    CompiledCommand,
    Rejection,
    RequestDispatcher,
    RunCargoTests,
    RunSpecFile,
)
from testbridge.config import CommandConfig

__all__ = [
    "CommandConfig",
    "CompiledCommand",
    "Rejection",
    "RequestDispatcher",
    "RunCargoTests",
    "RunSpecFile",
]
