"""Textual-facing adapter that wires MenuController events into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from mdedit_engine.buffer.sync import BufferOwner, InputSurface
from mdedit_engine.menu import Anchor, MenuController, MenuItem, MenuResult
from mdedit_engine.transforms import Toolbar


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    show_menu: Callable[[Anchor, Sequence[MenuItem]], None]
    hide_menu: Callable[[], None] = _noop
    update_status: Callable[[str], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualMenuAdapter:
    """Bridges a MenuController + Toolbar to a Textual-friendly surface."""

    def __init__(
        self,
        controller: MenuController,
        hooks: TextualUIHooks,
        *,
        surface: Optional[InputSurface],
        owner: BufferOwner,
        toolbar: Optional[Toolbar] = None,
    ) -> None:
        self.controller = controller
        self.hooks = hooks
        self.surface = surface
        self.owner = owner
        self.toolbar = toolbar or Toolbar()
        self.controller.attach(surface, owner)
        self._subscribe_events()

    def open_menu(self, x: int, y: int) -> MenuResult:
        self._log_state("trigger ->", x=x, y=y)
        result = self.controller.context_trigger(x, y)
        if not result.consumed:
            self.hooks.update_status("select text to format")
        return result

    def select_item(self, item_id: str) -> MenuResult:
        self._log_state("choose ->", item=item_id)
        result = self.controller.choose_item(item_id)
        if result.consumed:
            self.hooks.update_status(f"applied {result.message}")
        return result

    def dismiss(self) -> MenuResult:
        return self.controller.dismiss()

    def press_toolbar(self, action_id: str) -> None:
        self.controller.buffer_edited()
        edit = self.toolbar.press(action_id, self.surface, self.owner)
        if edit is not None:
            self.hooks.update_status(action_id)
            self._log_state(
                "toolbar <-",
                action=action_id,
                selection=(edit.selection.start, edit.selection.end),
            )

    def notify_text_changed(self) -> None:
        """Forward a user edit; any captured selection is now stale."""

        self.controller.buffer_edited()

    def _subscribe_events(self) -> None:
        bus = self.controller.bus
        bus.subscribe("menu.open", self._on_menu_open)
        bus.subscribe("menu.close", self._on_menu_close)
        bus.subscribe("transform.apply", self._on_transform)

    def _on_menu_open(self, payload: object | None) -> None:
        anchor = self.controller.state.anchor
        if anchor is None:
            return
        self._log_state("event ->", event="menu.open", payload=payload)
        self.hooks.show_menu(anchor, tuple(self.controller.catalog))

    def _on_menu_close(self, payload: object | None) -> None:
        self._log_state("event ->", event="menu.close", payload=payload)
        self.hooks.hide_menu()

    def _on_transform(self, payload: object | None) -> None:
        self._log_state("event ->", event="transform.apply", payload=payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        capture = self.controller.tracker.last_capture
        return {
            "editor": self.controller.name,
            "open": self.controller.is_open,
            "capture": (capture.start, capture.end) if capture else None,
            "length": len(self.owner.current_value),
        }


__all__ = ["TextualMenuAdapter", "TextualUIHooks"]
