#
# tests/unit/test_location.py
#
"""
Tests for parsing and re-serializing path[:line...] locations.
"""

import pytest

from testbridge.compiler import ParsedLocation, format_location, parse_location
from testbridge.exceptions import ErrorKind, MalformedLocationError


class TestParseLocation:
    """parse_location splits a path from its line numbers."""

    @pytest.mark.parametrize(
        "raw",
        ["spec/models/user_spec.rb", "", "README", "./a/b_spec.rb", "with space_spec.rb"],
    )
    def test_plain_path_has_no_lines(self, raw: str) -> None:
        assert parse_location(raw) == ParsedLocation(path=raw, lines=())

    def test_preserves_line_order_and_count(self) -> None:
        location = parse_location("spec/models/user_spec.rb:87:37:87")
        assert location.path == "spec/models/user_spec.rb"
        assert location.lines == (87, 37, 87)

    def test_single_line(self) -> None:
        assert parse_location("a_spec.rb:12").lines == (12,)

    def test_zero_and_leading_zeros_are_structurally_valid(self) -> None:
        assert parse_location("a_spec.rb:0:007").lines == (0, 7)

    def test_large_line_number_is_kept(self) -> None:
        assert parse_location("a_spec.rb:123456789012345678901234567890").lines == (
            123456789012345678901234567890,
        )

    def test_empty_path_with_lines(self) -> None:
        assert parse_location(":5") == ParsedLocation(path="", lines=(5,))

    @pytest.mark.parametrize(
        "raw",
        [
            "file.rb:abc",
            "a_spec.rb:10:x",
            "a_spec.rb:",
            "a_spec.rb::10",
            "a_spec.rb:+10",
            "a_spec.rb:-1",
            "a_spec.rb: 10",
            "a_spec.rb:10 ",
            "a_spec.rb:1.5",
            "a_spec.rb:١٢",
            "C:\\specs\\a_spec.rb",
        ],
    )
    def test_non_digit_segment_is_malformed(self, raw: str) -> None:
        with pytest.raises(MalformedLocationError) as exc_info:
            parse_location(raw)
        assert exc_info.value.kind is ErrorKind.MALFORMED_LOCATION
        assert exc_info.value.raw_input == raw

    def test_bad_suffix_is_not_silently_dropped(self) -> None:
        with pytest.raises(MalformedLocationError, match="Segment 2"):
            parse_location("a_spec.rb:10:oops")


class TestFormatLocation:
    """format_location is the inverse of parse_location."""

    @pytest.mark.parametrize(
        "raw",
        ["spec/a_spec.rb:37:87", "spec/a_spec.rb:1", "spec/a_spec.rb", ""],
    )
    def test_reparse_yields_equal_location(self, raw: str) -> None:
        location = parse_location(raw)
        assert parse_location(format_location(location)) == location

    def test_no_lines_formats_as_bare_path(self) -> None:
        assert format_location(ParsedLocation(path="x_spec.rb")) == "x_spec.rb"

    def test_lines_are_joined_with_colons(self) -> None:
        assert format_location(ParsedLocation(path="x_spec.rb", lines=[3, 1])) == "x_spec.rb:3:1"
