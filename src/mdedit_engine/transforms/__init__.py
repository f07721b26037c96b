"""Markdown transformation requests, the transform engine, and toolbar helpers."""

from .engine import (
    CODE_FENCE,
    HORIZONTAL_RULE,
    IMAGE_PLACEHOLDER,
    LINK_PLACEHOLDER,
    TABLE_TEMPLATE,
    apply,
    insert_table,
    transform_text,
)
from .requests import (
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
from .toolbar import DEFAULT_TOOLBAR, Toolbar, ToolbarAction, ToolbarEdit, wrap_selection

__all__ = [
    "Blockquote",
    "CODE_FENCE",
    "Code",
    "CodeKind",
    "DEFAULT_TOOLBAR",
    "HORIZONTAL_RULE",
    "Header",
    "HorizontalRule",
    "IMAGE_PLACEHOLDER",
    "Image",
    "LINK_PLACEHOLDER",
    "Link",
    "ListItems",
    "ListKind",
    "TABLE_TEMPLATE",
    "Table",
    "TaskList",
    "TextColor",
    "TextStyle",
    "TextStyleKind",
    "Toolbar",
    "ToolbarAction",
    "ToolbarEdit",
    "TransformRequest",
    "apply",
    "insert_table",
    "request_kind",
    "transform_text",
    "wrap_selection",
]
