"""In-memory buffer owner and input surface.

These back the engine's tests and any host that keeps the text outside a
widget (for instance a form model that is rendered elsewhere).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from mdedit_engine.runtime import telemetry

from .sync import OffsetPair
from .validation import clamp_offset

ChangeListener = Callable[[str], None]


@dataclass(slots=True)
class BufferView:
    version: int
    text: str


class TextBuffer:
    """Single-writer buffer owner with a version counter and change listeners."""

    def __init__(self, text: str = "", *, name: str = "default") -> None:
        self.name = name
        self._text = text
        self._version = 0
        self._listeners: List[ChangeListener] = []

    @property
    def current_value(self) -> str:
        return self._text

    @property
    def version(self) -> int:
        return self._version

    def snapshot(self) -> BufferView:
        return BufferView(version=self._version, text=self._text)

    def subscribe(self, listener: ChangeListener) -> None:
        self._listeners.append(listener)

    def on_change(self, new_value: str) -> None:
        if new_value == self._text:
            return
        before = len(self._text)
        self._text = new_value
        self._version += 1
        telemetry.record_event(
            "buffer.change",
            level="debug",
            data={
                "buffer": self.name,
                "version": self._version,
                "delta": len(new_value) - before,
            },
        )
        for listener in list(self._listeners):
            listener(new_value)


class MemorySurface:
    """Input surface that only remembers a selection and a focus flag."""

    def __init__(self, owner: TextBuffer, *, selection: Optional[OffsetPair] = None):
        self.owner = owner
        self._selection: OffsetPair = selection or (0, 0)
        self.focused = False
        self.focus_count = 0

    @property
    def selection(self) -> OffsetPair:
        return self._selection

    def set_selection(self, start: int, end: int) -> None:
        text = self.owner.current_value
        self._selection = (clamp_offset(text, start), clamp_offset(text, end))

    def select(self, start: int, end: int) -> None:
        """Simulate the user dragging a selection."""

        self.set_selection(start, end)

    def blur(self) -> None:
        self.focused = False

    def focus(self) -> None:
        self.focused = True
        self.focus_count += 1


__all__ = ["BufferView", "MemorySurface", "TextBuffer"]
