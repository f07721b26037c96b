"""Buffer boundary: host protocols, offset validation, in-memory owner."""

from .sync import (
    BufferOwner,
    BufferValidationError,
    InputSurface,
    OffsetOutOfRangeError,
    OffsetPair,
    SelectionRangeError,
)
from .text_buffer import BufferView, MemorySurface, TextBuffer
from .validation import clamp_offset, ensure_offset

__all__ = [
    "BufferOwner",
    "BufferValidationError",
    "BufferView",
    "InputSurface",
    "MemorySurface",
    "OffsetOutOfRangeError",
    "OffsetPair",
    "SelectionRangeError",
    "TextBuffer",
    "clamp_offset",
    "ensure_offset",
]
