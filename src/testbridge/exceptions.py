# src/testbridge/exceptions.py

"""
Exception hierarchy for testbridge.

Validation errors raised by the compiler stages carry an ``ErrorKind`` tag and
the offending raw input so the dispatcher can turn them into a uniform
rejection without knowing which stage failed.
"""

from enum import Enum


class TestBridgeError(Exception):
    """Base class for all testbridge errors."""

    __test__ = False


class ConfigurationError(TestBridgeError):
    """Raised when configuration cannot be loaded or is invalid."""

    pass


class TestExecutionError(TestBridgeError):
    """Raised when a compiled command cannot be executed at all."""

    __test__ = False

    def __init__(self, message: str, command: str | None = None):
        self.command = command
        super().__init__(message)


class ReportParseError(TestBridgeError):
    """Raised when test framework output cannot be parsed into a report."""

    pass


class ErrorKind(Enum):
    """Tags for request validation failures."""

    MALFORMED_LOCATION = "MalformedLocation"
    EMPTY_PATH = "EmptyPath"
    INVALID_SPEC_SUFFIX = "InvalidSpecSuffix"
    OPTION_LIKE_PATH = "OptionLikePath"
    INVALID_LINE_NUMBER = "InvalidLineNumber"
    EMPTY_BASE_COMMAND = "EmptyBaseCommand"


class CommandValidationError(TestBridgeError):
    """Base class for errors that reject a request before any process starts."""

    kind: ErrorKind

    def __init__(self, message: str, raw_input: str):
        self.raw_input = raw_input
        self.message = message
        super().__init__(f"{message} (input: {raw_input!r})")


class MalformedLocationError(CommandValidationError):
    """A segment after the path is not a plain decimal integer."""

    kind = ErrorKind.MALFORMED_LOCATION


class EmptyPathError(CommandValidationError):
    """The path segment is empty once a leading './' is removed."""

    kind = ErrorKind.EMPTY_PATH


class InvalidSpecSuffixError(CommandValidationError):
    """The path does not follow the '_spec.rb' naming convention."""

    kind = ErrorKind.INVALID_SPEC_SUFFIX


class OptionLikePathError(CommandValidationError):
    """The path starts with '-' and would reach the test framework as an option."""

    kind = ErrorKind.OPTION_LIKE_PATH


class InvalidLineNumberError(CommandValidationError):
    """A line number is zero."""

    kind = ErrorKind.INVALID_LINE_NUMBER


class EmptyBaseCommandError(CommandValidationError):
    """The configured base command has no program token."""

    kind = ErrorKind.EMPTY_BASE_COMMAND


# 🔼⚙️
