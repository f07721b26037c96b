"""Pure markdown transformations over a selected range of a buffer."""

from __future__ import annotations

import re
from itertools import repeat
from typing import Any, Callable, Dict, Iterable

from mdedit_engine.buffer.validation import ensure_offset
from mdedit_engine.runtime import telemetry
from mdedit_engine.selection.models import SelectionRange
from mdedit_engine.text.indexer import LINE_BREAK, line_start

from .requests import (
    CARET_REQUESTS,
    Blockquote,
    Code,
    CodeKind,
    Header,
    HorizontalRule,
    Image,
    Link,
    ListItems,
    ListKind,
    Table,
    TaskList,
    TextColor,
    TextStyle,
    TextStyleKind,
    TransformRequest,
    request_kind,
)

LINK_PLACEHOLDER = "URL"
IMAGE_PLACEHOLDER = "IMAGE_URL"
HORIZONTAL_RULE = "---"
CODE_FENCE = "```"
TABLE_TEMPLATE = (
    "| 헤더1 | 헤더2 | 헤더3 |\n"
    "|-------|-------|-------|\n"
    "| 셀1   | 셀2   | 셀3   |"
)

_HEADER_PREFIX = re.compile(r"^#+\s*")
_STYLE_MARKERS: Dict[TextStyleKind, str] = {
    TextStyleKind.BOLD: "**",
    TextStyleKind.ITALIC: "*",
    TextStyleKind.STRIKETHROUGH: "~~",
}

Replacer = Callable[[str, Any], str]


def _map_lines(text: str, prefixes: Iterable[str]) -> str:
    lines = text.split(LINE_BREAK)
    return LINE_BREAK.join(prefix + line for prefix, line in zip(prefixes, lines))


def _header(text: str, request: Header) -> str:
    prefix = "#" * request.level + " "
    return LINE_BREAK.join(
        prefix + _HEADER_PREFIX.sub("", line) for line in text.split(LINE_BREAK)
    )


def _text_style(text: str, request: TextStyle) -> str:
    marker = _STYLE_MARKERS[request.style]
    return f"{marker}{text}{marker}"


def _list_items(text: str, request: ListItems) -> str:
    if request.kind is ListKind.ORDERED:
        count = text.count(LINE_BREAK) + 1
        return _map_lines(text, (f"{index}. " for index in range(1, count + 1)))
    return _map_lines(text, repeat("- "))


def _task_list(text: str, request: TaskList) -> str:
    return _map_lines(text, repeat("- [ ] "))


def _link(text: str, request: Link) -> str:
    return f"[{text}]({LINK_PLACEHOLDER})"


def _image(text: str, request: Image) -> str:
    return f"![{text}]({IMAGE_PLACEHOLDER})"


def _code(text: str, request: Code) -> str:
    if request.kind is CodeKind.INLINE:
        return f"`{text}`"
    return f"{CODE_FENCE}\n{text}\n{CODE_FENCE}"


def _blockquote(text: str, request: Blockquote) -> str:
    return _map_lines(text, repeat("> "))


def _horizontal_rule(text: str, request: HorizontalRule) -> str:
    if not text:
        return HORIZONTAL_RULE
    return f"{HORIZONTAL_RULE}\n{text}\n{HORIZONTAL_RULE}"


def _text_color(text: str, request: TextColor) -> str:
    return f'<span style="color: {request.color}">{text}</span>'


# Table has no entry; see insert_table.
_REPLACERS: Dict[type, Replacer] = {
    Header: _header,
    TextStyle: _text_style,
    ListItems: _list_items,
    TaskList: _task_list,
    Link: _link,
    Image: _image,
    Code: _code,
    Blockquote: _blockquote,
    HorizontalRule: _horizontal_rule,
    TextColor: _text_color,
}


def transform_text(selected_text: str, request: TransformRequest) -> str:
    """Return the replacement for ``selected_text`` under ``request``."""

    if isinstance(request, Table):
        raise TypeError("Table inserts at a line anchor and has no replacement text")
    replacer = _REPLACERS.get(type(request))
    if replacer is None:
        raise TypeError(f"Unknown transform request {request!r}")
    return replacer(selected_text, request)


def insert_table(buffer: str, selection: SelectionRange) -> str:
    anchor = line_start(buffer, selection.start)
    return buffer[:anchor] + TABLE_TEMPLATE + "\n\n" + buffer[anchor:]


def apply(
    buffer: str,
    selection: SelectionRange,
    selected_text: str,
    request: TransformRequest,
) -> str:
    """Return the new full buffer after applying ``request`` to ``selection``."""

    kind = request_kind(request)
    with telemetry.span(
        f"transform::{kind}",
        component="transforms",
        metadata={"start": selection.start, "end": selection.end},
    ) as handle:
        ensure_offset(buffer, selection.end)

        if not selected_text and not isinstance(request, CARET_REQUESTS):
            handle.add_metadata("status", "skipped")
            return buffer

        if isinstance(request, Table):
            return insert_table(buffer, selection)

        replacement = transform_text(selected_text, request)
        # An empty selected_text only reaches here for a caret insertion.
        end = selection.end if selected_text else selection.start
        handle.add_metadata("delta", len(replacement) - (end - selection.start))
        return buffer[: selection.start] + replacement + buffer[end:]


__all__ = [
    "CODE_FENCE",
    "HORIZONTAL_RULE",
    "IMAGE_PLACEHOLDER",
    "LINK_PLACEHOLDER",
    "TABLE_TEMPLATE",
    "apply",
    "insert_table",
    "transform_text",
]
