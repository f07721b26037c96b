"""Expose a Textual ``TextArea`` through the engine's surface/owner protocols.

``TextArea`` speaks 0-based ``(row, column)`` locations while the engine
works in flat offsets; the indexer converts between the two. Only the
``text``, ``selection``, ``focus`` and ``load_text`` members of the widget
are used, so anything shaped like a ``TextArea`` can be wrapped.
"""

from __future__ import annotations

from typing import Any

from textual.widgets.text_area import Selection

from mdedit_engine.buffer.sync import OffsetPair
from mdedit_engine.buffer.validation import clamp_offset
from mdedit_engine.text.indexer import from_location, to_location


class TextAreaSurface:
    def __init__(self, widget: Any) -> None:
        self.widget = widget

    @property
    def selection(self) -> OffsetPair:
        text = self.widget.text
        start, end = self.widget.selection
        first = from_location(text, tuple(start))
        second = from_location(text, tuple(end))
        return (min(first, second), max(first, second))

    def set_selection(self, start: int, end: int) -> None:
        text = self.widget.text
        self.widget.selection = Selection(
            to_location(text, clamp_offset(text, start)),
            to_location(text, clamp_offset(text, end)),
        )

    def focus(self) -> None:
        self.widget.focus()


class TextAreaOwner:
    """Treats the widget's document as the authoritative buffer."""

    def __init__(self, widget: Any) -> None:
        self.widget = widget

    @property
    def current_value(self) -> str:
        return self.widget.text

    def on_change(self, new_value: str) -> None:
        self.widget.load_text(new_value)


__all__ = ["TextAreaOwner", "TextAreaSurface"]
