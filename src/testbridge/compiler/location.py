# src/testbridge/compiler/location.py

"""
Parses caller-supplied locations of the form ``path[:line[:line...]]``.
"""

import re

from attrs import define, field

from testbridge.exceptions import MalformedLocationError

LOCATION_SEPARATOR = ":"

_LINE_SEGMENT = re.compile(r"[0-9]+")


@define(frozen=True, slots=True)
class ParsedLocation:
    """A file path plus the ordered line numbers that followed it."""

    path: str = field()
    lines: tuple[int, ...] = field(factory=tuple, converter=tuple)


def parse_location(raw: str) -> ParsedLocation:
    """
    Split a raw location into its path and line numbers.

    The first ``:``-separated segment is always the path, even when empty.
    Every following segment must be one or more ASCII digits; anything else
    rejects the whole input rather than dropping the bad suffix.

    Raises:
        MalformedLocationError: If a segment after the path is not numeric.
    """
    path, *segments = raw.split(LOCATION_SEPARATOR)
    lines: list[int] = []
    for position, segment in enumerate(segments, start=1):
        if not _LINE_SEGMENT.fullmatch(segment):
            raise MalformedLocationError(
                f"Segment {position} after the path ({segment!r}) is not a line number",
                raw_input=raw,
            )
        lines.append(int(segment))
    return ParsedLocation(path=path, lines=lines)


def format_location(location: ParsedLocation) -> str:
    """Serialize a ParsedLocation back into ``path[:line...]`` form."""
    if not location.lines:
        return location.path
    return LOCATION_SEPARATOR.join([location.path, *(str(line) for line in location.lines)])


# 🔼⚙️
