from __future__ import annotations

import pytest

from mdedit_engine.buffer import MemorySurface, TextBuffer
from mdedit_engine.selection import SelectionRange
from mdedit_engine.transforms import DEFAULT_TOOLBAR, Toolbar, ToolbarAction, wrap_selection


def test_wrap_selection_keeps_wrapped_text_selected() -> None:
    edit = wrap_selection("hello world", SelectionRange(0, 5), "**", "**")

    assert edit.text == "**hello** world"
    assert edit.selection == SelectionRange(2, 7)
    assert edit.text[edit.selection.start : edit.selection.end] == "hello"


def test_wrap_selection_on_caret_inserts_prefix() -> None:
    edit = wrap_selection("ab", SelectionRange.caret(1), "- ")

    assert edit.text == "a- b"
    assert edit.selection == SelectionRange(3, 3)


def test_press_updates_owner_and_surface() -> None:
    buffer = TextBuffer("see docs here")
    surface = MemorySurface(buffer, selection=(4, 8))
    toolbar = Toolbar()

    edit = toolbar.press("link", surface, buffer)

    assert edit is not None
    assert buffer.current_value == "see [docs](url) here"
    assert surface.selection == (5, 9)
    assert surface.focused is True


def test_press_without_surface_is_noop() -> None:
    buffer = TextBuffer("abc")

    assert Toolbar().press("bold", None, buffer) is None
    assert buffer.current_value == "abc"


def test_unknown_action_raises() -> None:
    buffer = TextBuffer("abc")
    with pytest.raises(KeyError):
        Toolbar().press("underline", MemorySurface(buffer), buffer)


def test_toolbar_rejects_duplicates_and_empty_actions() -> None:
    with pytest.raises(ValueError):
        Toolbar([ToolbarAction("bold", "b", "**"), ToolbarAction("bold", "b", "__")])
    with pytest.raises(ValueError):
        ToolbarAction("nothing", "n", "")


def test_default_toolbar_ids_are_unique() -> None:
    ids = [action.id for action in DEFAULT_TOOLBAR]

    assert len(ids) == len(set(ids))
    assert Toolbar().get("checklist").before == "- [ ] "
