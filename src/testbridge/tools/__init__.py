#
# src/testbridge/tools/__init__.py
#
"""
Tool-dispatch layer exposed to tool-calling clients.
"""
from .service import ToolArgumentError, ToolResult, TestRunnerService, format_run_result
from .specs import RUN_CARGO_TESTS, RUN_RSPEC, TOOL_SPECS, ToolSpec

__all__ = [
    "RUN_CARGO_TESTS",
    "RUN_RSPEC",
    "TOOL_SPECS",
    "TestRunnerService",
    "ToolArgumentError",
    "ToolResult",
    "ToolSpec",
    "format_run_result",
]

# 🔼⚙️
