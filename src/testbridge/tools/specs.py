#
# src/testbridge/tools/specs.py
#
"""
Tool catalogue advertised to tool-calling clients.
"""
from typing import Any

from attrs import define, field

RUN_RSPEC = "run_rspec"
RUN_CARGO_TESTS = "run_cargo_tests"


@define(frozen=True, slots=True)
class ToolSpec:
    """Name, description and JSON input schema of one tool."""
    name: str
    description: str
    input_schema: dict[str, Any] = field(factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=RUN_RSPEC,
        description=(
            "Run RSpec tests for a spec file. Append ':LINE' one or more times "
            "to run only the examples at those lines."
        ),
        input_schema={
            "type": "object",
            "properties": {
                "file": {
                    "type": "string",
                    "description": 'Test file to run (e.g., "spec/models/user_spec.rb:37")',
                },
            },
            "required": ["file"],
        },
    ),
    ToolSpec(
        name=RUN_CARGO_TESTS,
        description="Run Cargo tests, optionally filtered by a test name pattern.",
        input_schema={
            "type": "object",
            "properties": {
                "pattern": {
                    "type": "string",
                    "description": "Only run tests whose names contain this string",
                },
                "args": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": 'Extra arguments passed through unchanged (e.g., ["--", "--nocapture"])',
                },
            },
        },
    ),
)

# 🔼⚙️
