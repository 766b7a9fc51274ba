# src/testbridge/compiler/command.py

"""
Builds argument vectors from a configured base command and a validated request.
"""

import shlex

from attrs import define, field

from testbridge.compiler.requests import RunCargoTests
from testbridge.compiler.validator import ValidatedTarget
from testbridge.exceptions import EmptyBaseCommandError

LINE_NUMBER_FLAG = "-l"


@define(frozen=True, slots=True)
class CompiledCommand:
    """A program and its arguments, ready for a process launcher."""

    program: str = field()
    arguments: tuple[str, ...] = field(factory=tuple, converter=tuple)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.arguments]

    def display(self) -> str:
        """Shell-quoted rendering, for logs and CLI output only."""
        return shlex.join(self.argv)


def split_base_command(base_command: str) -> tuple[str, tuple[str, ...]]:
    """
    Split an operator-configured base command on whitespace.

    Quoting is not interpreted: a base command whose arguments need embedded
    spaces cannot be expressed.

    Raises:
        EmptyBaseCommandError: If there is no program token.
    """
    tokens = base_command.split()
    if not tokens:
        raise EmptyBaseCommandError("Base command has no program token", raw_input=base_command)
    program, *leading = tokens
    return program, tuple(leading)


def compile_spec_target(base_command: str, target: ValidatedTarget) -> CompiledCommand:
    """Append the spec path, then one line filter per line number, in order."""
    program, arguments = split_base_command(base_command)
    line_filters: list[str] = []
    for line in target.lines:
        line_filters.extend((LINE_NUMBER_FLAG, str(line)))
    return CompiledCommand(program=program, arguments=(*arguments, target.path, *line_filters))


def compile_cargo_request(base_command: str, request: RunCargoTests) -> CompiledCommand:
    """Append the optional pattern and the extra arguments verbatim."""
    program, arguments = split_base_command(base_command)
    pattern = (request.pattern,) if request.pattern is not None else ()
    return CompiledCommand(program=program, arguments=(*arguments, *pattern, *request.extra_args))


# 🔼⚙️
