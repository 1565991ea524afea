from __future__ import annotations

from typing import Optional

import pytest

from editor_extents.extents import (
    ExtentArgumentError,
    TextSpan,
    compare_width,
    contains_position,
    extremum_by,
    find_innermost,
    max_element,
    min_element,
)


def make_span(
    start_line: int = 1,
    start_column: int = 1,
    end_line: int = 1,
    end_column: int = 1,
    *,
    start_offset: int = 0,
    end_offset: int = 0,
) -> TextSpan:
    return TextSpan(
        start_line=start_line,
        start_column=start_column,
        end_line=end_line,
        end_column=end_column,
        start_offset=start_offset,
        end_offset=end_offset,
    )


def by_value(a: Optional[int], b: Optional[int]) -> int:
    if a is None and b is None:
        return 0
    if b is None:
        return 1
    if a is None:
        return -1
    return (a > b) - (a < b)


class Item:
    def __init__(self, rank: int, label: str) -> None:
        self.rank = rank
        self.label = label


def by_rank(a: Optional[Item], b: Optional[Item]) -> int:
    return by_value(a.rank if a else None, b.rank if b else None)


def test_extremum_empty_returns_none() -> None:
    assert extremum_by([], by_value, "max") is None
    assert extremum_by([], by_value, "min") is None
    assert extremum_by(iter(()), lambda a, b: 1) is None


def test_extremum_single_element() -> None:
    assert extremum_by([5], by_value, "max") == 5
    assert extremum_by([5], by_value, "min") == 5


def test_extremum_picks_max_and_min() -> None:
    values = [3, 9, 1, 7]

    assert max_element(values, by_value) == 9
    assert min_element(values, by_value) == 1


def test_extremum_min_matches_max_with_negated_comparator() -> None:
    for values in ([4, 2, 8, 2, 6], [1], [5, 5, 5], [None, 3, 1]):
        expected = extremum_by(values, lambda a, b: -by_value(a, b), "max")
        assert extremum_by(values, by_value, "min") == expected


def test_extremum_ties_keep_first_element() -> None:
    first, second = Item(1, "first"), Item(1, "second")

    assert extremum_by([first, second], lambda a, b: 0, "max") is first
    assert extremum_by([first, second], lambda a, b: 0, "min") is first
    assert max_element([Item(0, "low"), first, second], by_rank) is first
    assert min_element([Item(2, "high"), first, second], by_rank) is first


def test_extremum_skips_none_after_seed() -> None:
    assert max_element([2, None, 5, None], by_value) == 5
    assert min_element([2, None, 5, None], by_value) == 2


def test_extremum_none_seed_is_replaced_by_ranked_element() -> None:
    assert max_element([None, 4, 6], by_value) == 6
    assert min_element([None, None], by_value) is None


def test_extremum_consumes_generators_once() -> None:
    consumed = []

    def produce():
        for value in (3, 8, 2):
            consumed.append(value)
            yield value

    assert max_element(produce(), by_value) == 8
    assert consumed == [3, 8, 2]


def test_extremum_rejects_missing_arguments() -> None:
    with pytest.raises(ExtentArgumentError) as excinfo:
        extremum_by(None, by_value)  # type: ignore[arg-type]
    assert excinfo.value.argument == "elements"

    with pytest.raises(ExtentArgumentError) as excinfo:
        extremum_by([1, 2], None)  # type: ignore[arg-type]
    assert excinfo.value.argument == "comparator"

    with pytest.raises(ExtentArgumentError):
        min_element(None, by_value)  # type: ignore[arg-type]


def test_extremum_rejects_unknown_direction() -> None:
    with pytest.raises(ExtentArgumentError) as excinfo:
        extremum_by([1], by_value, "median")  # type: ignore[arg-type]
    assert excinfo.value.argument == "direction"
    assert isinstance(excinfo.value, ValueError)


def test_extremum_propagates_comparator_errors() -> None:
    def broken(a: Optional[int], b: Optional[int]) -> int:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        max_element([1, 2], broken)


def test_compare_width_missing_spans() -> None:
    present = make_span(end_offset=3)

    assert compare_width(None, None) == 0
    assert compare_width(present, None) == 1
    assert compare_width(None, present) == -1


def test_compare_width_by_offsets() -> None:
    wide = make_span(start_offset=0, end_offset=10)
    narrow = make_span(start_offset=0, end_offset=5)
    shifted = make_span(start_offset=20, end_offset=25)

    assert compare_width(wide, narrow) == 1
    assert compare_width(narrow, wide) == -1
    assert compare_width(narrow, shifted) == 0
    assert wide.width == 10


def test_compare_width_plugs_into_selection() -> None:
    spans = [
        make_span(start_offset=0, end_offset=4),
        None,
        make_span(start_offset=2, end_offset=12),
        make_span(start_offset=5, end_offset=7),
    ]

    assert max_element(spans, compare_width) is spans[2]
    assert min_element(spans, compare_width) is spans[3]


def test_contains_position_single_line() -> None:
    extent = make_span(2, 3, 2, 8)

    assert contains_position(extent, 2, 3)
    assert contains_position(extent, 2, 8)
    assert contains_position(extent, 2, 5)
    assert not contains_position(extent, 2, 2)
    assert not contains_position(extent, 2, 9)


def test_contains_position_outside_lines() -> None:
    extent = make_span(2, 3, 4, 8)

    assert not contains_position(extent, 1, 5)
    assert not contains_position(extent, 5, 1)


def test_contains_position_multi_line() -> None:
    extent = make_span(1, 5, 3, 2)

    assert contains_position(extent, 2, 999)
    assert contains_position(extent, 2, 1)
    assert contains_position(extent, 1, 5)
    assert contains_position(extent, 1, 80)
    assert not contains_position(extent, 1, 4)
    assert contains_position(extent, 3, 1)
    assert contains_position(extent, 3, 2)
    assert not contains_position(extent, 3, 3)


def test_find_innermost_prefers_narrowest() -> None:
    text = "def f():\n    return g(x)\n"
    body = TextSpan.from_offsets(text, 0, len(text) - 1)
    call = TextSpan.from_offsets(text, text.index("g("), text.rindex(")") + 1)
    arg = TextSpan.from_offsets(text, text.index("x"), text.index("x") + 1)

    assert call.start == (2, 12) and call.end == (2, 15)
    assert find_innermost([body, call, arg], 2, 13) is call
    assert find_innermost([body, call, None, arg], 2, 14) is arg
    assert find_innermost([body, call, arg], 1, 1) is body
    assert find_innermost([call, arg], 1, 1) is None


def test_find_innermost_tie_keeps_first() -> None:
    first = make_span(1, 1, 1, 5, start_offset=0, end_offset=5)
    second = make_span(1, 1, 1, 5, start_offset=0, end_offset=5)

    assert find_innermost([first, second], 1, 3) is first


def test_from_offsets_derives_line_and_column() -> None:
    text = "alpha\nbeta\ngamma"

    extent = TextSpan.from_offsets(text, text.index("ta"), text.index("mm") + 1)

    assert extent.start == (2, 3)
    assert extent.end == (3, 3)
    assert extent.width == len("ta\ngam")


def test_from_offsets_empty_range() -> None:
    extent = TextSpan.from_offsets("ab\ncd", 4, 4)

    assert extent.start == extent.end == (2, 2)
    assert extent.width == 0


def test_find_innermost_rejects_missing_extents() -> None:
    with pytest.raises(ExtentArgumentError) as excinfo:
        find_innermost(None, 1, 1)  # type: ignore[arg-type]
    assert excinfo.value.argument == "extents"
