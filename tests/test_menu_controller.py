from __future__ import annotations

from typing import List, Optional

from mdedit_engine.bus import EventBus
from mdedit_engine.buffer import MemorySurface, TextBuffer
from mdedit_engine.menu import MenuController
from mdedit_engine.runtime import EditorSettings
from mdedit_engine.transforms import TABLE_TEMPLATE, Header, TextStyle, TextStyleKind

BOLD = TextStyle(TextStyleKind.BOLD)


class RecordingOwner(TextBuffer):
    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.changes: List[str] = []

    def on_change(self, new_value: str) -> None:
        self.changes.append(new_value)
        super().on_change(new_value)


def make_editor(
    text: str,
    *,
    selection: tuple[int, int] = (0, 0),
    settings: Optional[EditorSettings] = None,
) -> tuple[MenuController, RecordingOwner, MemorySurface]:
    owner = RecordingOwner(text)
    surface = MemorySurface(owner, selection=selection)
    controller = MenuController(settings=settings, bus=EventBus())
    controller.attach(surface, owner)
    return controller, owner, surface


def record_events(controller: MenuController) -> List[str]:
    events: List[str] = []
    for name in ("menu.open", "menu.close", "transform.apply"):
        controller.bus.subscribe(name, lambda _payload, name=name: events.append(name))
    return events


def test_trigger_without_selection_stays_closed() -> None:
    controller, _owner, _surface = make_editor("hello", selection=(2, 2))

    result = controller.context_trigger(10, 10)

    assert result.consumed is False
    assert result.status == "no_selection"
    assert controller.is_open is False
    assert controller.tracker.last_capture is None


def test_trigger_opens_at_offset_anchor() -> None:
    settings = EditorSettings(menu_offset_x=4, menu_offset_y=2)
    controller, _owner, _surface = make_editor(
        "hello world", selection=(6, 11), settings=settings
    )

    result = controller.context_trigger(10, 20)

    assert result.status == "open"
    assert result.text == "world"
    assert controller.state.anchor == (14, 22)


def test_choose_applies_transform_and_closes() -> None:
    controller, owner, surface = make_editor("say hi now", selection=(4, 6))
    events = record_events(controller)
    controller.context_trigger(0, 0)

    result = controller.choose(BOLD)

    assert result.status == "applied"
    assert result.message == "bold"
    assert owner.changes == ["say **hi** now"]
    assert owner.current_value == "say **hi** now"
    assert controller.is_open is False
    assert controller.tracker.last_capture is None
    assert surface.focused is True
    assert events == ["menu.open", "transform.apply", "menu.close"]


def test_choose_restores_captured_range_after_focus_loss() -> None:
    controller, owner, surface = make_editor("one two three", selection=(4, 7))
    controller.context_trigger(0, 0)

    # Opening the menu steals focus and collapses the widget selection.
    surface.select(0, 0)
    surface.blur()
    controller.choose(Header(1))

    assert owner.current_value == "one # two three"
    assert surface.selection == (4, 7)


def test_choose_while_closed_is_noop() -> None:
    controller, owner, _surface = make_editor("hello", selection=(0, 5))

    result = controller.choose(BOLD)

    assert result.consumed is False
    assert result.status == "closed"
    assert owner.changes == []


def test_dismiss_closes_without_mutation() -> None:
    controller, owner, _surface = make_editor("hello", selection=(0, 5))
    events = record_events(controller)
    controller.context_trigger(1, 1)

    result = controller.dismiss()

    assert result.consumed is True
    assert controller.is_open is False
    assert controller.tracker.last_capture is None
    assert owner.changes == []
    assert events == ["menu.open", "menu.close"]
    assert controller.dismiss().consumed is False


def test_choose_item_inserts_table_above_selected_line() -> None:
    controller, owner, _surface = make_editor("line1\nline2", selection=(6, 8))
    controller.context_trigger(0, 0)

    controller.choose_item("table")

    assert owner.current_value == "line1\n" + TABLE_TEMPLATE + "\n\nline2"


def test_retrigger_replaces_capture_and_anchor() -> None:
    controller, owner, surface = make_editor("abcdefgh", selection=(0, 2))
    controller.context_trigger(1, 1)

    surface.select(4, 6)
    controller.context_trigger(5, 5)
    controller.choose(BOLD)

    assert owner.current_value == "abcd**ef**gh"


def test_buffer_edit_discards_capture() -> None:
    controller, owner, _surface = make_editor("hello", selection=(0, 5))
    controller.context_trigger(0, 0)

    owner.on_change("hello there")
    controller.buffer_edited()

    assert controller.is_open is False
    assert controller.choose(BOLD).status == "closed"
    assert owner.current_value == "hello there"


def test_attach_drops_capture_from_previous_buffer() -> None:
    controller, _owner, _surface = make_editor("first buffer", selection=(0, 5))
    controller.context_trigger(0, 0)

    second = RecordingOwner("second")
    controller.attach(MemorySurface(second), second)

    assert controller.is_open is False
    assert controller.tracker.last_capture is None


def test_trigger_before_attach_is_noop() -> None:
    controller = MenuController()

    result = controller.context_trigger(0, 0)

    assert result.status == "unmounted"
    assert controller.is_open is False


def test_detach_closes_menu() -> None:
    controller, _owner, _surface = make_editor("hello", selection=(0, 5))
    controller.context_trigger(0, 0)

    controller.detach()

    assert controller.is_open is False
    assert controller.context_trigger(0, 0).status == "unmounted"
