"""Pure text helpers."""

from .indexer import (
    LINE_BREAK,
    LineColumn,
    find_line_breaks,
    from_location,
    line_start,
    locate,
    offset_of,
    to_location,
)

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
