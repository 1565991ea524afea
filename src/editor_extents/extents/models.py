"""Extent value types consumed from the source parser."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]  # (line, column), both 1-based


@dataclass(frozen=True, slots=True)
class TextSpan:
    """Read-only source range.

    Line and column bounds are 1-based and inclusive on both ends. Offsets are
    0-based absolute character indexes with ``end_offset`` exclusive, so
    ``width`` is the number of characters covered.
    """

    start_line: int
    start_column: int
    end_line: int
    end_column: int
    start_offset: int = 0
    end_offset: int = 0

    @property
    def width(self) -> int:
        return self.end_offset - self.start_offset

    @property
    def start(self) -> Position:
        return (self.start_line, self.start_column)

    @property
    def end(self) -> Position:
        return (self.end_line, self.end_column)

    @classmethod
    def from_offsets(cls, text: str, start_offset: int, end_offset: int) -> "TextSpan":
        """Build a span covering ``text[start_offset:end_offset]``.

        Lines break on ``\\n`` only. The end position is the last covered
        character; an empty range ends on its start column.
        """

        start_line, start_column = _location_of(text, start_offset)
        if end_offset > start_offset:
            end_line, end_column = _location_of(text, end_offset - 1)
        else:
            end_line, end_column = start_line, start_column
        return cls(
            start_line=start_line,
            start_column=start_column,
            end_line=end_line,
            end_column=end_column,
            start_offset=start_offset,
            end_offset=end_offset,
        )


def _location_of(text: str, offset: int) -> Position:
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    return (line, offset - line_start + 1)


__all__ = ["Position", "TextSpan"]
