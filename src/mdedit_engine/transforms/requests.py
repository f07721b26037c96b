"""Closed set of markdown transformation requests."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TextStyleKind(str, Enum):
    BOLD = "bold"
    ITALIC = "italic"
    STRIKETHROUGH = "strikethrough"


class ListKind(str, Enum):
    ORDERED = "ordered"
    UNORDERED = "unordered"


class CodeKind(str, Enum):
    INLINE = "inline"
    BLOCK = "block"


@dataclass(frozen=True, slots=True)
class Header:
    level: int = 1

    def __post_init__(self) -> None:
        if not 1 <= self.level <= 6:
            raise ValueError(f"Header level must be 1-6, got {self.level}")


@dataclass(frozen=True, slots=True)
class TextStyle:
    style: TextStyleKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", TextStyleKind(self.style))


@dataclass(frozen=True, slots=True)
class ListItems:
    kind: ListKind

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ListKind(self.kind))


@dataclass(frozen=True, slots=True)
class TaskList:
    pass


@dataclass(frozen=True, slots=True)
class Link:
    pass


@dataclass(frozen=True, slots=True)
class Image:
    pass


@dataclass(frozen=True, slots=True)
class Code:
    kind: CodeKind = CodeKind.INLINE

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", CodeKind(self.kind))


@dataclass(frozen=True, slots=True)
class Blockquote:
    pass


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    pass


@dataclass(frozen=True, slots=True)
class Table:
    pass


@dataclass(frozen=True, slots=True)
class TextColor:
    color: str

    def __post_init__(self) -> None:
        cleaned = self.color.strip()
        if not cleaned:
            raise ValueError("TextColor requires a color value")
        object.__setattr__(self, "color", cleaned)


TransformRequest = Union[
    Header,
    TextStyle,
    ListItems,
    TaskList,
    Link,
    Image,
    Code,
    Blockquote,
    HorizontalRule,
    Table,
    TextColor,
]

# Requests that still edit the buffer when nothing is selected.
CARET_REQUESTS: tuple[type, ...] = (HorizontalRule, Table)


def request_kind(request: TransformRequest) -> str:
    """Short, stable name used in telemetry and menu ids."""

    if isinstance(request, Header):
        return f"header-{request.level}"
    if isinstance(request, TextStyle):
        return request.style.value
    if isinstance(request, ListItems):
        return f"{request.kind.value}-list"
    if isinstance(request, Code):
        return "inline-code" if request.kind is CodeKind.INLINE else "code-block"
    if isinstance(request, TextColor):
        return f"color-{request.color}"
    names = {
        TaskList: "task-list",
        Link: "link",
        Image: "image",
        Blockquote: "blockquote",
        HorizontalRule: "horizontal-rule",
        Table: "table",
    }
    try:
        return names[type(request)]
    except KeyError as exc:
        raise TypeError(f"Unknown transform request {request!r}") from exc


__all__ = [
    "CARET_REQUESTS",
    "Blockquote",
    "Code",
    "CodeKind",
    "Header",
    "HorizontalRule",
    "Image",
    "Link",
    "ListItems",
    "ListKind",
    "Table",
    "TaskList",
    "TextColor",
    "TextStyle",
    "TextStyleKind",
    "TransformRequest",
    "request_kind",
]
