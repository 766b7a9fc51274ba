# src/testbridge/compiler/validator.py

"""
Framework-specific shape checks applied to a ParsedLocation.

Validation is a pure string check. Whether the file exists is left to the
process that eventually runs it.
"""

from enum import Enum

from attrs import define, field

from testbridge.compiler.location import ParsedLocation, format_location
from testbridge.exceptions import (
    EmptyPathError,
    InvalidLineNumberError,
    InvalidSpecSuffixError,
    OptionLikePathError,
)

RELATIVE_PREFIX = "./"
RSPEC_SUFFIX = "_spec.rb"
OPTION_PREFIX = "-"


class Framework(Enum):
    """Test frameworks a target can be validated against."""

    RSPEC = "rspec"


@define(frozen=True, slots=True)
class ValidatedTarget:
    """A location that passed the rules of ``framework``."""

    path: str = field()
    lines: tuple[int, ...] = field(converter=tuple)
    framework: Framework = field()


def validate_spec_location(location: ParsedLocation, raw_input: str | None = None) -> ValidatedTarget:
    """
    Check a location against RSpec file naming rules.

    Rules are applied in order and the first failure is raised:
    empty path, then a leading ``-`` (after stripping one leading ``./``),
    then the ``_spec.rb`` suffix, then that every line number is positive.

    ``raw_input`` is the caller's original string, reported in errors; when
    omitted the location is re-serialized.
    """
    raw = raw_input if raw_input is not None else format_location(location)

    if not location.path:
        raise EmptyPathError("Spec file path is empty", raw_input=raw)

    path = location.path
    if path.startswith(RELATIVE_PREFIX):
        path = path[len(RELATIVE_PREFIX):]
    if not path:
        raise EmptyPathError("Spec file path is empty after removing './'", raw_input=raw)

    if path.startswith(OPTION_PREFIX):
        raise OptionLikePathError(
            f"Spec file path {path!r} starts with {OPTION_PREFIX!r} and would be read as an option",
            raw_input=raw,
        )

    if not path.endswith(RSPEC_SUFFIX):
        raise InvalidSpecSuffixError(
            f"Spec file path {path!r} must end with {RSPEC_SUFFIX!r}",
            raw_input=raw,
        )

    for line in location.lines:
        if line <= 0:
            raise InvalidLineNumberError(
                f"Line number {line} is not a positive integer",
                raw_input=raw,
            )

    return ValidatedTarget(path=path, lines=location.lines, framework=Framework.RSPEC)


# 🔼⚙️
