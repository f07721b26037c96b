"""Toolbar-style marker insertion around the live selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from mdedit_engine.buffer.sync import BufferOwner, InputSurface
from mdedit_engine.buffer.validation import clamp_offset, ensure_offset
from mdedit_engine.runtime import telemetry
from mdedit_engine.selection.models import SelectionRange


@dataclass(frozen=True, slots=True)
class ToolbarAction:
    id: str
    label: str
    before: str
    after: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ToolbarAction id cannot be empty")
        if not self.before and not self.after:
            raise ValueError(f"ToolbarAction '{self.id}' inserts nothing")


@dataclass(frozen=True, slots=True)
class ToolbarEdit:
    text: str
    selection: SelectionRange


DEFAULT_TOOLBAR: tuple[ToolbarAction, ...] = (
    ToolbarAction("bold", "굵게", "**", "**"),
    ToolbarAction("italic", "기울임", "*", "*"),
    ToolbarAction("heading", "제목", "### "),
    ToolbarAction("list", "목록", "- "),
    ToolbarAction("code", "코드", "```\n", "\n```"),
    ToolbarAction("link", "링크", "[", "](url)"),
    ToolbarAction("image", "이미지", "![alt text](", ")"),
    ToolbarAction(
        "table",
        "테이블",
        "| 헤더1 | 헤더2 |\n|-------|-------|\n| 셀1   | 셀2   |\n",
    ),
    ToolbarAction("checklist", "체크리스트", "- [ ] "),
    ToolbarAction("strikethrough", "취소선", "~~", "~~"),
)


def wrap_selection(
    buffer: str, selection: SelectionRange, before: str, after: str = ""
) -> ToolbarEdit:
    """Surround ``selection`` with markers and keep the same text selected."""

    ensure_offset(buffer, selection.end)
    selected = buffer[selection.start : selection.end]
    text = (
        buffer[: selection.start] + before + selected + after + buffer[selection.end :]
    )
    shift = len(before)
    return ToolbarEdit(
        text=text,
        selection=SelectionRange(selection.start + shift, selection.end + shift),
    )


class Toolbar:
    """Applies toolbar actions to whatever the surface currently selects."""

    def __init__(self, actions: Iterable[ToolbarAction] = DEFAULT_TOOLBAR) -> None:
        self._actions: Dict[str, ToolbarAction] = {}
        for action in actions:
            if action.id in self._actions:
                raise ValueError(f"Toolbar action '{action.id}' already registered")
            self._actions[action.id] = action

    @property
    def actions(self) -> tuple[ToolbarAction, ...]:
        return tuple(self._actions.values())

    def get(self, action_id: str) -> ToolbarAction:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Toolbar action '{action_id}' is not registered") from exc

    def press(
        self,
        action_id: str,
        surface: Optional[InputSurface],
        owner: BufferOwner,
    ) -> Optional[ToolbarEdit]:
        action = self.get(action_id)
        if surface is None:
            return None
        buffer = owner.current_value
        start, end = (clamp_offset(buffer, value) for value in surface.selection)
        if start > end:
            start, end = end, start
        with telemetry.span(
            f"toolbar::{action.id}",
            component="toolbar",
            metadata={"start": start, "end": end},
        ):
            edit = wrap_selection(
                buffer, SelectionRange(start, end), action.before, action.after
            )
            owner.on_change(edit.text)
            surface.focus()
            surface.set_selection(edit.selection.start, edit.selection.end)
        return edit


__all__ = ["DEFAULT_TOOLBAR", "Toolbar", "ToolbarAction", "ToolbarEdit", "wrap_selection"]
