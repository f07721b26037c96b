"""Boundary types for syncing the engine with host text widgets."""

from __future__ import annotations

from typing import Protocol, Tuple

OffsetPair = Tuple[int, int]  # (selection_start, selection_end)


class InputSurface(Protocol):
    """The text-input widget whose selection the engine reads and restores."""

    @property
    def selection(self) -> OffsetPair:
        """Current ``(start, end)`` offsets into the widget's text value."""
        ...

    def set_selection(self, start: int, end: int) -> None:
        ...

    def focus(self) -> None:
        ...


class BufferOwner(Protocol):
    """Holder of the authoritative buffer text."""

    @property
    def current_value(self) -> str:
        ...

    def on_change(self, new_value: str) -> None:
        """Accept a committed replacement for the whole buffer."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when callers hand the engine offsets that do not fit a buffer."""

    def __init__(self, message: str, *, offset: int | None = None) -> None:
        super().__init__(message)
        self.offset = offset


class OffsetOutOfRangeError(BufferValidationError):
    """An offset or line/column position lies outside the buffer."""


class SelectionRangeError(BufferValidationError):
    """A selection range was built with ``start > end`` or a negative bound."""


__all__ = [
    "BufferOwner",
    "BufferValidationError",
    "InputSurface",
    "OffsetOutOfRangeError",
    "OffsetPair",
    "SelectionRangeError",
]
