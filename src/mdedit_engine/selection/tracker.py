"""Capture, restore and clear the selection of one input surface."""

from __future__ import annotations

from typing import Optional

from mdedit_engine.buffer.sync import InputSurface
from mdedit_engine.buffer.validation import clamp_offset
from mdedit_engine.runtime import telemetry

from .models import SelectionInfo, SelectionRange


class SelectionTracker:
    """Holds at most one captured selection for a single editor."""

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self._last_capture: Optional[SelectionInfo] = None

    @property
    def last_capture(self) -> Optional[SelectionInfo]:
        return self._last_capture

    def capture(
        self, buffer: str, raw_start: int, raw_end: int
    ) -> Optional[SelectionInfo]:
        start = clamp_offset(buffer, raw_start)
        end = clamp_offset(buffer, raw_end)
        if start > end:
            start, end = end, start

        with telemetry.span(
            "selection::capture",
            component="selection",
            metadata={"tracker": self.name, "start": start, "end": end},
        ) as handle:
            if start == end:
                self._last_capture = None
                handle.add_metadata("status", "caret")
                return None

            info = SelectionInfo.build(buffer, SelectionRange(start, end))
            self._last_capture = info
            handle.add_metadata("lines", info.line_span)
            handle.add_metadata(
                "span",
                f"{info.start_position.line}:{info.start_position.column}"
                f"-{info.end_position.line}:{info.end_position.column}",
            )
            return info

    def capture_from(
        self, surface: Optional[InputSurface], buffer: str
    ) -> Optional[SelectionInfo]:
        if surface is None:
            self.clear()
            return None
        start, end = surface.selection
        return self.capture(buffer, start, end)

    def restore(self, surface: Optional[InputSurface]) -> None:
        info = self._last_capture
        if surface is None or info is None:
            return
        with telemetry.span(
            "selection::restore",
            component="selection",
            metadata={"tracker": self.name, "start": info.start, "end": info.end},
        ):
            surface.set_selection(info.start, info.end)
            surface.focus()

    def clear(self) -> None:
        self._last_capture = None

    def is_stale(self, buffer: str) -> bool:
        info = self._last_capture
        return info is not None and info.buffer_length != len(buffer)


__all__ = ["SelectionTracker"]
