"""Conversions between Textual document locations and extent values.

Textual addresses text with 0-based ``(row, column)`` locations and
end-exclusive selections; extents here are 1-based and inclusive.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from textual.widgets.text_area import Document, Selection

from editor_extents.extents import Position, TextSpan

Location = Tuple[int, int]


def position_from_location(location: Location) -> Position:
    row, column = location
    return (row + 1, column + 1)


def _offset_of(lines: Sequence[str], newline: str, location: Location) -> int:
    row, column = location
    preceding = sum(len(line) for line in lines[:row]) + row * len(newline)
    return preceding + column


def span_from_selection(document: Document, selection: Selection) -> TextSpan:
    """Return the inclusive span covered by ``selection`` in ``document``.

    Reversed selections are normalised. An empty selection produces a
    zero-width span anchored at the cursor.
    """

    start, end = sorted((tuple(selection.start), tuple(selection.end)))
    lines = document.lines
    newline = document.newline
    start_offset = _offset_of(lines, newline, start)
    end_offset = _offset_of(lines, newline, end)

    start_line, start_column = position_from_location(start)
    if end_offset == start_offset:
        end_line, end_column = start_line, start_column
    else:
        # end is exclusive in Textual, so its 0-based column is the 1-based
        # column of the last selected character
        end_line, end_column = end[0] + 1, end[1]
        if end[1] == 0:
            # selection stops at a line start: last character is the previous
            # line's break
            end_line = end[0]
            end_column = len(lines[end[0] - 1]) + len(newline)

    return TextSpan(
        start_line=start_line,
        start_column=start_column,
        end_line=end_line,
        end_column=end_column,
        start_offset=start_offset,
        end_offset=end_offset,
    )


__all__ = ["Location", "position_from_location", "span_from_selection"]
