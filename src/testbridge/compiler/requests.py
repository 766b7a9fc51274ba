# src/testbridge/compiler/requests.py

"""
Request variants accepted by the dispatcher.
"""

from typing import TypeAlias

from attrs import define, field


@define(frozen=True, slots=True)
class RunSpecFile:
    """Run one RSpec file, optionally filtered by line numbers."""

    raw_location: str = field()


@define(frozen=True, slots=True)
class RunCargoTests:
    """Run ``cargo test`` with an optional name pattern and passthrough args."""

    pattern: str | None = field(default=None)
    extra_args: tuple[str, ...] = field(factory=tuple, converter=tuple)


TestRunnerRequest: TypeAlias = RunSpecFile | RunCargoTests


# 🔼⚙️
