"""Immutable selection ranges and capture snapshots."""

from __future__ import annotations

from dataclasses import dataclass

from mdedit_engine.buffer.sync import SelectionRangeError
from mdedit_engine.buffer.validation import ensure_offset
from mdedit_engine.text.indexer import LineColumn, find_line_breaks, locate


@dataclass(frozen=True, slots=True)
class SelectionRange:
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            raise SelectionRangeError(
                "Selection start cannot be negative", offset=self.start
            )
        if self.start > self.end:
            raise SelectionRangeError(
                f"Selection start {self.start} is after end {self.end}",
                offset=self.start,
            )

    @classmethod
    def caret(cls, offset: int) -> "SelectionRange":
        return cls(offset, offset)

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, buffer: str) -> str:
        ensure_offset(buffer, self.end)
        return buffer[self.start : self.end]


@dataclass(frozen=True, slots=True)
class SelectionInfo:
    """Snapshot of a selection taken at capture time.

    Nothing here is recomputed when the buffer changes; a snapshot taken
    against an older buffer must be discarded rather than reused.
    """

    range: SelectionRange
    text: str
    start_position: LineColumn
    end_position: LineColumn
    line_breaks: tuple[int, ...]
    total_lines: int
    buffer_length: int

    @classmethod
    def build(cls, buffer: str, selection: SelectionRange) -> "SelectionInfo":
        text = selection.slice(buffer)
        return cls(
            range=selection,
            text=text,
            start_position=locate(buffer, selection.start),
            end_position=locate(buffer, selection.end),
            line_breaks=tuple(
                selection.start + index for index in find_line_breaks(text)
            ),
            total_lines=len(find_line_breaks(buffer)) + 1,
            buffer_length=len(buffer),
        )

    @property
    def start(self) -> int:
        return self.range.start

    @property
    def end(self) -> int:
        return self.range.end

    @property
    def line_span(self) -> int:
        return self.end_position.line - self.start_position.line + 1


__all__ = ["SelectionInfo", "SelectionRange"]
