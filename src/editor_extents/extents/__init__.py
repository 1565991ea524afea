"""Extent value types and range helpers."""

from .errors import ExtentArgumentError
from .models import Position, TextSpan
from .ranges import (
    Comparator,
    Direction,
    compare_width,
    contains_position,
    extremum_by,
    find_innermost,
    max_element,
    min_element,
)

__all__ = [
    "Comparator",
    "Direction",
    "ExtentArgumentError",
    "Position",
    "TextSpan",
    "compare_width",
    "contains_position",
    "extremum_by",
    "find_innermost",
    "max_element",
    "min_element",
]
