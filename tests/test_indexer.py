from __future__ import annotations

import pytest

from mdedit_engine.buffer import OffsetOutOfRangeError
from mdedit_engine.text import (
    LineColumn,
    find_line_breaks,
    from_location,
    line_start,
    locate,
    offset_of,
    to_location,
)

BUFFERS = ("", "plain", "ab\ncd", "\n\n", "a\nbc\n", "line1\nline2")


def test_locate_counts_lines_and_columns() -> None:
    text = "ab\ncd"

    assert locate(text, 0) == LineColumn(1, 1)
    assert locate(text, 2) == LineColumn(1, 3)
    assert locate(text, 3) == LineColumn(2, 1)
    assert locate(text, 5) == LineColumn(2, 3)


@pytest.mark.parametrize("text", BUFFERS)
def test_locate_and_offset_of_are_inverse(text: str) -> None:
    for offset in range(len(text) + 1):
        position = locate(text, offset)
        assert position.line >= 1
        assert offset_of(text, position) == offset


def test_locate_rejects_offsets_outside_buffer() -> None:
    with pytest.raises(OffsetOutOfRangeError) as excinfo:
        locate("abc", 4)
    assert excinfo.value.offset == 4

    with pytest.raises(OffsetOutOfRangeError):
        locate("abc", -1)


def test_offset_of_rejects_positions_outside_buffer() -> None:
    with pytest.raises(OffsetOutOfRangeError):
        offset_of("ab\ncd", LineColumn(3, 1))
    with pytest.raises(OffsetOutOfRangeError):
        offset_of("ab\ncd", LineColumn(1, 4))


def test_line_column_is_one_based() -> None:
    with pytest.raises(ValueError):
        LineColumn(0, 1)


def test_find_line_breaks_returns_ascending_indices() -> None:
    assert find_line_breaks("a\nb\n") == (1, 3)
    assert find_line_breaks("no breaks") == ()


def test_line_start_finds_start_of_current_line() -> None:
    text = "line1\nline2"

    assert line_start(text, 3) == 0
    assert line_start(text, 6) == 6
    assert line_start(text, 8) == 6
    assert line_start(text, 5) == 0


def test_locations_are_zero_based() -> None:
    text = "ab\ncd"

    assert to_location(text, 4) == (1, 1)
    assert from_location(text, (1, 1)) == 4
    assert from_location(text, (0, 2)) == 2
