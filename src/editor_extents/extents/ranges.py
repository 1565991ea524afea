"""Comparator-driven selection and extent geometry helpers."""

from __future__ import annotations

from typing import Callable, Iterable, Literal, Optional, TypeVar

from editor_extents.runtime.telemetry import span

from .errors import ExtentArgumentError
from .models import TextSpan

T = TypeVar("T")

Comparator = Callable[[Optional[T], Optional[T]], int]
Direction = Literal["max", "min"]


def extremum_by(
    elements: Iterable[Optional[T]],
    comparator: Comparator[T],
    direction: Direction = "max",
) -> Optional[T]:
    """Return the highest (``"max"``) or lowest (``"min"``) ranked element.

    The first element seeds the result even when it is ``None``; later
    ``None`` entries are skipped. A later element only wins when it ranks
    strictly above the current pick, so the earliest of equal elements is
    kept. ``comparator`` must cope with a ``None`` left or right operand when
    the sequence can start with ``None``. Empty input returns ``None``.
    """

    if elements is None:
        raise ExtentArgumentError("elements cannot be None", argument="elements")
    if comparator is None:
        raise ExtentArgumentError("comparator cannot be None", argument="comparator")

    if direction == "min":
        return extremum_by(elements, lambda x, y: -comparator(x, y), "max")
    if direction != "max":
        raise ExtentArgumentError(
            f"Unsupported direction '{direction}'", argument="direction"
        )

    iterator = iter(elements)
    try:
        best = next(iterator)
    except StopIteration:
        return None

    for element in iterator:
        if element is not None and comparator(element, best) > 0:
            best = element
    return best


def max_element(
    elements: Iterable[Optional[T]], comparator: Comparator[T]
) -> Optional[T]:
    return extremum_by(elements, comparator, "max")


def min_element(
    elements: Iterable[Optional[T]], comparator: Comparator[T]
) -> Optional[T]:
    return extremum_by(elements, comparator, "min")


def compare_width(span_x: Optional[TextSpan], span_y: Optional[TextSpan]) -> int:
    """Order spans by ``end_offset - start_offset``; a missing span ranks lowest."""

    if span_x is None and span_y is None:
        return 0
    if span_y is None:
        return 1
    if span_x is None:
        return -1

    width_x = span_x.end_offset - span_x.start_offset
    width_y = span_y.end_offset - span_y.start_offset
    if width_x > width_y:
        return 1
    if width_x < width_y:
        return -1
    return 0


def contains_position(extent: TextSpan, line: int, column: int) -> bool:
    """Return True when 1-based ``(line, column)`` falls inside ``extent``.

    Both endpoints are inclusive. Columns only matter on the first and last
    line; any column on an interior line is inside.
    """

    if line < extent.start_line or line > extent.end_line:
        return False

    if line == extent.start_line:
        if column < extent.start_column:
            return False
        # single-line extent: the end column bounds the same line
        return line != extent.end_line or column <= extent.end_column

    if line == extent.end_line:
        return column <= extent.end_column

    return True


def find_innermost(
    extents: Iterable[Optional[TextSpan]], line: int, column: int
) -> Optional[TextSpan]:
    """Return the narrowest extent containing ``(line, column)``.

    Ties go to the extent that appears first. Returns ``None`` when no extent
    contains the position.
    """

    if extents is None:
        raise ExtentArgumentError("extents cannot be None", argument="extents")

    with span(
        "extents::find_innermost",
        component="extents",
        metadata={"line": line, "column": column},
    ) as handle:
        candidates = [
            extent
            for extent in extents
            if extent is not None and contains_position(extent, line, column)
        ]
        handle.add_metadata("candidates", len(candidates))
        return min_element(candidates, compare_width)


__all__ = [
    "Comparator",
    "Direction",
    "compare_width",
    "contains_position",
    "extremum_by",
    "find_innermost",
    "max_element",
    "min_element",
]
