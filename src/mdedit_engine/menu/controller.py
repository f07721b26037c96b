"""Context-menu state machine tying the selection tracker to the transforms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from mdedit_engine.bus import EventBus
from mdedit_engine.buffer.sync import BufferOwner, InputSurface
from mdedit_engine.runtime import telemetry
from mdedit_engine.runtime.settings import EditorSettings
from mdedit_engine.selection.tracker import SelectionTracker
from mdedit_engine.transforms import engine
from mdedit_engine.transforms.requests import TransformRequest, request_kind

from .catalog import MenuCatalog, load_default_menu

Anchor = Tuple[int, int]  # (x, y) screen coordinates


@dataclass(frozen=True, slots=True)
class MenuState:
    anchor: Optional[Anchor] = None

    @property
    def is_open(self) -> bool:
        return self.anchor is not None


CLOSED = MenuState()


@dataclass(slots=True)
class MenuResult:
    """Outcome of a controller transition."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    text: Optional[str] = None


class MenuController:
    """Owns the menu state and the selection tracker for one editor."""

    def __init__(
        self,
        *,
        catalog: Optional[MenuCatalog] = None,
        settings: Optional[EditorSettings] = None,
        bus: Optional[EventBus] = None,
        tracker: Optional[SelectionTracker] = None,
        name: str = "editor",
    ) -> None:
        self.name = name
        self.catalog = catalog if catalog is not None else load_default_menu()
        self.settings = settings or EditorSettings()
        self.bus = bus or EventBus()
        self.tracker = tracker or SelectionTracker(name=name)
        self._state = CLOSED
        self._surface: Optional[InputSurface] = None
        self._owner: Optional[BufferOwner] = None

    @property
    def state(self) -> MenuState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    def attach(self, surface: Optional[InputSurface], owner: BufferOwner) -> None:
        self._close(reason="attach")
        self._surface = surface
        self._owner = owner

    def detach(self) -> None:
        self._close(reason="detach")
        self._surface = None
        self._owner = None

    def context_trigger(self, x: int, y: int) -> MenuResult:
        if self._owner is None or self._surface is None:
            self._close(reason="unmounted")
            return MenuResult(consumed=False, status="unmounted")

        info = self.tracker.capture_from(self._surface, self._owner.current_value)
        if info is None:
            self._close(reason="no_selection")
            return MenuResult(consumed=False, status="no_selection")

        anchor = (x + self.settings.menu_offset_x, y + self.settings.menu_offset_y)
        self._state = MenuState(anchor=anchor)
        payload = {
            "editor": self.name,
            "anchor": anchor,
            "start": info.start,
            "end": info.end,
        }
        telemetry.record_event("menu.open", level="debug", data=payload)
        self.bus.emit("menu.open", payload)
        return MenuResult(consumed=True, status="open", text=info.text)

    def choose(self, request: TransformRequest) -> MenuResult:
        info = self.tracker.last_capture
        if not self.is_open or info is None or self._owner is None:
            return MenuResult(consumed=False, status="closed")

        kind = request_kind(request)
        with telemetry.span(
            "menu::choose",
            component="menu",
            metadata={"editor": self.name, "action": kind},
        ):
            self.tracker.restore(self._surface)
            updated = engine.apply(
                self._owner.current_value, info.range, info.text, request
            )
            self._owner.on_change(updated)
            self.bus.emit(
                "transform.apply",
                {"editor": self.name, "action": kind, "range": (info.start, info.end)},
            )
        self._close(reason="action")
        return MenuResult(consumed=True, status="applied", message=kind, text=updated)

    def choose_item(self, item_id: str) -> MenuResult:
        return self.choose(self.catalog.get(item_id).request)

    def dismiss(self) -> MenuResult:
        was_open = self.is_open
        self._close(reason="dismiss")
        return MenuResult(consumed=was_open, status="dismissed")

    def buffer_edited(self) -> None:
        """Drop any capture after an edit made outside the menu."""

        self._close(reason="buffer_edited")

    def _close(self, *, reason: str) -> None:
        self.tracker.clear()
        if not self._state.is_open:
            return
        self._state = CLOSED
        payload = {"editor": self.name, "reason": reason}
        telemetry.record_event("menu.close", level="debug", data=payload)
        self.bus.emit("menu.close", payload)


__all__ = ["Anchor", "CLOSED", "MenuController", "MenuResult", "MenuState"]
