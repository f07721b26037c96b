"""Executable Textual app that hosts the markdown editing engine."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, OptionList, Static, TextArea
    from textual.widgets.option_list import Option
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use mdedit_engine.adapters.textual.app"
    ) from exc

from mdedit_engine.menu import Anchor, MenuController, MenuItem
from mdedit_engine.runtime import telemetry
from mdedit_engine.runtime.settings import EditorSettings, load_settings

from .controller import TextualMenuAdapter, TextualUIHooks
from .surface import TextAreaOwner, TextAreaSurface

SAMPLE_TEXT = """Select some text, then press ctrl+t to format it.

first item
second item
third item
"""


class MarkdownEditorApp(App[None]):
    """TextArea with a popup transformation menu."""

    CSS = """
	Screen {
		layers: base overlay;
	}

	#editor {
		height: 1fr;
	}

	#format-menu {
		layer: overlay;
		width: 32;
		max-height: 20;
		border: round $accent;
		background: $surface;
		display: none;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+t", "open_menu", "Format"),
        ("escape", "dismiss_menu", "Close menu"),
        ("ctrl+b", "toolbar('bold')", "Bold"),
        ("ctrl+k", "toolbar('link')", "Link"),
        ("ctrl+l", "toolbar('checklist')", "Checklist"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self, *, settings: Optional[EditorSettings] = None, text: str = SAMPLE_TEXT
    ) -> None:
        super().__init__()
        self.settings = settings or load_settings()
        self._initial_text = text
        self.adapter: TextualMenuAdapter | None = None
        self._editor: TextArea | None = None
        self._menu: OptionList | None = None
        self._status: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._editor = TextArea(self._initial_text, id="editor")
        yield self._editor
        self._menu = OptionList(id="format-menu")
        yield self._menu
        self._status = Static("", id="status-line")
        yield self._status
        yield Footer()

    def on_mount(self) -> None:
        assert self._editor is not None
        controller = MenuController(settings=self.settings, name="demo")
        hooks = TextualUIHooks(
            show_menu=self._show_menu,
            hide_menu=self._hide_menu,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualMenuAdapter(
            controller,
            hooks,
            surface=TextAreaSurface(self._editor),
            owner=TextAreaOwner(self._editor),
        )
        self._editor.focus()

    def action_open_menu(self) -> None:
        if not self.adapter or not self._editor:
            return
        offset = self._editor.cursor_screen_offset
        self.adapter.open_menu(offset.x, offset.y + 1)

    def action_dismiss_menu(self) -> None:
        if self.adapter:
            self.adapter.dismiss()

    def action_toolbar(self, action_id: str) -> None:
        if self.adapter:
            self.adapter.press_toolbar(action_id)

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if self.adapter and event.option.id:
            self.adapter.select_item(event.option.id)

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        if self.adapter and not self.adapter.controller.is_open:
            self.adapter.notify_text_changed()

    def _show_menu(self, anchor: Anchor, items: Sequence[MenuItem]) -> None:
        if not self._menu:
            return
        self._menu.clear_options()
        section = None
        for item in items:
            if item.section != section:
                section = item.section
                self._menu.add_option(Option(f"-- {section} --", disabled=True))
            self._menu.add_option(Option(f"  {item.label}", id=item.id))
        self._menu.styles.offset = anchor
        self._menu.display = True
        self._menu.focus()

    def _hide_menu(self) -> None:
        if self._menu:
            self._menu.display = False
        if self._editor:
            self._editor.focus()

    def _update_status(self, status: str) -> None:
        if self._status:
            self._status.update(status)

    def _log_line(self, line: str) -> None:
        self.log(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run the markdown editing engine Textual demo."
    )
    parser.add_argument(
        "--menu-offset-x",
        type=int,
        default=None,
        help="Horizontal offset applied to the menu anchor (env: MDEDIT_MENU_OFFSET_X)",
    )
    parser.add_argument(
        "--menu-offset-y",
        type=int,
        default=None,
        help="Vertical offset applied to the menu anchor (env: MDEDIT_MENU_OFFSET_Y)",
    )
    parser.add_argument(
        "--telemetry-preset",
        choices=telemetry.PRESETS,
        default=None,
        help="telelog preset to use (env: MDEDIT_TELEMETRY_PRESET)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    settings = load_settings().with_overrides(
        menu_offset_x=args.menu_offset_x,
        menu_offset_y=args.menu_offset_y,
        telemetry_preset=args.telemetry_preset,
    )
    if settings.telemetry_preset:
        telemetry.configure(preset=settings.telemetry_preset)
    MarkdownEditorApp(settings=settings).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
