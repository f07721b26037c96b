"""Offset checks shared by the indexer, tracker and transforms."""

from __future__ import annotations

from .sync import OffsetOutOfRangeError


def ensure_offset(text: str, offset: int) -> int:
    if offset < 0 or offset > len(text):
        raise OffsetOutOfRangeError(
            f"Offset {offset} outside 0..{len(text)}", offset=offset
        )
    return offset


def clamp_offset(text: str, offset: int) -> int:
    return max(0, min(offset, len(text)))
