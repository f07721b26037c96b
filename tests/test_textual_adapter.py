from __future__ import annotations

from typing import Any, List, Sequence, Tuple

from textual.widgets.text_area import Selection

from mdedit_engine.adapters.textual import (
    TextAreaOwner,
    TextAreaSurface,
    TextualMenuAdapter,
    TextualUIHooks,
)
from mdedit_engine.adapters.textual.app import MarkdownEditorApp
from mdedit_engine.menu import MenuController, MenuItem
from mdedit_engine.transforms import Toolbar


class FakeTextArea:
    """Just the parts of ``TextArea`` the adapter touches."""

    def __init__(self, text: str, selection: Selection = Selection()) -> None:
        self.text = text
        self.selection = selection
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def load_text(self, text: str) -> None:
        self.text = text
        self.selection = Selection()


def make_adapter(
    widget: FakeTextArea,
) -> Tuple[TextualMenuAdapter, List[Any], List[str], List[str]]:
    shown: List[Any] = []
    statuses: List[str] = []
    logs: List[str] = []

    def show_menu(anchor: Tuple[int, int], items: Sequence[MenuItem]) -> None:
        shown.append((anchor, len(items)))

    hooks = TextualUIHooks(
        show_menu=show_menu,
        hide_menu=lambda: shown.append("hidden"),
        update_status=statuses.append,
        log=logs.append,
    )
    adapter = TextualMenuAdapter(
        MenuController(),
        hooks,
        surface=TextAreaSurface(widget),
        owner=TextAreaOwner(widget),
    )
    return adapter, shown, statuses, logs


def test_surface_converts_locations_to_offsets() -> None:
    widget = FakeTextArea("ab\ncd", Selection((1, 1), (0, 1)))
    surface = TextAreaSurface(widget)

    assert surface.selection == (1, 4)

    surface.set_selection(0, 5)
    assert widget.selection == Selection((0, 0), (1, 2))

    surface.focus()
    assert widget.focused is True


def test_owner_reloads_widget_text() -> None:
    widget = FakeTextArea("old")
    owner = TextAreaOwner(widget)

    owner.on_change("new")

    assert owner.current_value == "new"


def test_adapter_menu_round_trip() -> None:
    widget = FakeTextArea("hello world", Selection((0, 6), (0, 11)))
    adapter, shown, statuses, logs = make_adapter(widget)

    adapter.open_menu(3, 4)
    adapter.select_item("bold")

    assert shown == [((3, 4), 22), "hidden"]
    assert widget.text == "hello **world**"
    assert "applied bold" in statuses
    assert any(line.startswith("trigger ->") for line in logs)


def test_adapter_reports_missing_selection() -> None:
    widget = FakeTextArea("hello", Selection((0, 2), (0, 2)))
    adapter, shown, statuses, _logs = make_adapter(widget)

    result = adapter.open_menu(0, 0)

    assert result.consumed is False
    assert shown == []
    assert statuses == ["select text to format"]


def test_adapter_toolbar_wraps_selection() -> None:
    widget = FakeTextArea("hello world", Selection((0, 0), (0, 5)))
    adapter, _shown, statuses, _logs = make_adapter(widget)

    adapter.press_toolbar("bold")

    assert widget.text == "**hello** world"
    assert widget.selection == Selection((0, 2), (0, 7))
    assert statuses == ["bold"]


def test_adapter_text_change_discards_capture() -> None:
    widget = FakeTextArea("hello world", Selection((0, 0), (0, 5)))
    adapter, shown, _statuses, _logs = make_adapter(widget)
    adapter.open_menu(0, 0)

    adapter.notify_text_changed()

    assert adapter.controller.is_open is False
    assert shown[-1] == "hidden"


def test_demo_toolbar_bindings_name_known_actions() -> None:
    bindings = {
        key: action
        for key, action, _description in MarkdownEditorApp.BINDINGS
        if action.startswith("toolbar(")
    }

    assert bindings == {
        "ctrl+b": "toolbar('bold')",
        "ctrl+k": "toolbar('link')",
        "ctrl+l": "toolbar('checklist')",
    }
    toolbar = Toolbar()
    for action in bindings.values():
        assert toolbar.get(action[len("toolbar('") : -len("')")]).id
