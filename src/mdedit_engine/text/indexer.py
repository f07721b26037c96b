"""Offset <-> line/column arithmetic over plain strings."""

from __future__ import annotations

from dataclasses import dataclass

from mdedit_engine.buffer.sync import OffsetOutOfRangeError
from mdedit_engine.buffer.validation import ensure_offset

LINE_BREAK = "\n"


@dataclass(frozen=True, slots=True)
class LineColumn:
    """1-based line and column of an offset."""

    line: int
    column: int

    def __post_init__(self) -> None:
        if self.line < 1 or self.column < 1:
            raise ValueError("line and column are 1-based")


def find_line_breaks(text: str) -> tuple[int, ...]:
    return tuple(index for index, char in enumerate(text) if char == LINE_BREAK)


def locate(buffer: str, offset: int) -> LineColumn:
    """Return the position of ``offset``; ``len(buffer)`` is a valid offset."""

    ensure_offset(buffer, offset)
    segments = buffer[:offset].split(LINE_BREAK)
    return LineColumn(line=len(segments), column=len(segments[-1]) + 1)


def offset_of(buffer: str, position: LineColumn) -> int:
    """Inverse of :func:`locate`."""

    lines = buffer.split(LINE_BREAK)
    if position.line > len(lines):
        raise OffsetOutOfRangeError(
            f"Line {position.line} beyond last line {len(lines)}"
        )
    if position.column > len(lines[position.line - 1]) + 1:
        raise OffsetOutOfRangeError(
            f"Column {position.column} beyond end of line {position.line}"
        )
    offset = sum(len(line) + 1 for line in lines[: position.line - 1])
    return offset + position.column - 1


def line_start(buffer: str, offset: int) -> int:
    """Offset of the first character on the line holding ``offset``."""

    ensure_offset(buffer, offset)
    return buffer.rfind(LINE_BREAK, 0, offset) + 1


def to_location(buffer: str, offset: int) -> tuple[int, int]:
    """0-based ``(row, column)`` as used by terminal text widgets."""

    position = locate(buffer, offset)
    return (position.line - 1, position.column - 1)


def from_location(buffer: str, location: tuple[int, int]) -> int:
    row, column = location
    return offset_of(buffer, LineColumn(line=row + 1, column=column + 1))


__all__ = [
    "LINE_BREAK",
    "LineColumn",
    "find_line_breaks",
    "from_location",
    "line_start",
    "locate",
    "offset_of",
    "to_location",
]
