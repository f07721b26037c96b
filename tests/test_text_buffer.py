from __future__ import annotations

from typing import List

from mdedit_engine.buffer import MemorySurface, TextBuffer


def test_on_change_bumps_version_and_notifies() -> None:
    buffer = TextBuffer("abc")
    seen: List[str] = []
    buffer.subscribe(seen.append)

    buffer.on_change("abcd")

    assert buffer.current_value == "abcd"
    assert buffer.version == 1
    assert seen == ["abcd"]
    assert buffer.snapshot().text == "abcd"


def test_on_change_with_same_text_is_ignored() -> None:
    buffer = TextBuffer("abc")
    seen: List[str] = []
    buffer.subscribe(seen.append)

    buffer.on_change("abc")

    assert buffer.version == 0
    assert seen == []


def test_memory_surface_clamps_selection() -> None:
    buffer = TextBuffer("abc")
    surface = MemorySurface(buffer)

    surface.set_selection(-2, 10)

    assert surface.selection == (0, 3)
    assert surface.focused is False
    surface.focus()
    assert surface.focus_count == 1
