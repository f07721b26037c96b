"""Menu items offered by the transformation menu, grouped into sections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

from mdedit_engine.transforms.requests import (
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
)


@dataclass(frozen=True, slots=True)
class MenuItem:
    id: str
    label: str
    section: str
    request: TransformRequest

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("MenuItem id cannot be empty")
        if not self.section:
            raise ValueError(f"MenuItem '{self.id}' needs a section")


class MenuItemConflictError(RuntimeError):
    """Raised when an item id is registered twice."""

    def __init__(self, item: MenuItem, existing: MenuItem) -> None:
        super().__init__(f"Menu item '{item.id}' already registered")
        self.item = item
        self.existing = existing


class MenuCatalog:
    """Ordered registry of menu items; sections keep insertion order."""

    def __init__(self) -> None:
        self._items: Dict[str, MenuItem] = {}
        self._sections: Dict[str, List[str]] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def register(self, item: MenuItem, *, replace: bool = False) -> MenuItem:
        existing = self._items.get(item.id)
        if existing is not None:
            if not replace:
                raise MenuItemConflictError(item, existing)
            self._sections[existing.section].remove(existing.id)
            if not self._sections[existing.section]:
                del self._sections[existing.section]
        self._items[item.id] = item
        self._sections.setdefault(item.section, []).append(item.id)
        return item

    def get(self, item_id: str) -> MenuItem:
        try:
            return self._items[item_id]
        except KeyError as exc:
            raise KeyError(f"Menu item '{item_id}' is not registered") from exc

    def find(self, item_id: str) -> Optional[MenuItem]:
        return self._items.get(item_id)

    def sections(self) -> tuple[str, ...]:
        return tuple(self._sections)

    def iter_section(self, section: str) -> Iterator[MenuItem]:
        for item_id in self._sections.get(section, []):
            yield self._items[item_id]

    def __iter__(self) -> Iterator[MenuItem]:
        for section in self._sections:
            yield from self.iter_section(section)


TEXT_COLORS: tuple[tuple[str, str, str], ...] = (
    ("red", "빨간색", "#ef4444"),
    ("blue", "파란색", "#3b82f6"),
    ("green", "초록색", "#10b981"),
    ("yellow", "노란색", "#f59e0b"),
    ("purple", "보라색", "#8b5cf6"),
    ("gray", "회색", "#6b7280"),
)


def _default_items() -> Iterator[MenuItem]:
    for level in (1, 2, 3):
        yield MenuItem(f"header-{level}", f"제목 {level}", "제목", Header(level))

    yield MenuItem("bold", "굵게", "텍스트 스타일", TextStyle(TextStyleKind.BOLD))
    yield MenuItem("italic", "기울임", "텍스트 스타일", TextStyle(TextStyleKind.ITALIC))
    yield MenuItem(
        "strikethrough",
        "취소선",
        "텍스트 스타일",
        TextStyle(TextStyleKind.STRIKETHROUGH),
    )

    for name, label, value in TEXT_COLORS:
        yield MenuItem(f"color-{name}", label, "글자 색상", TextColor(value))

    yield MenuItem(
        "unordered-list", "순서 없는 목록", "목록", ListItems(ListKind.UNORDERED)
    )
    yield MenuItem("ordered-list", "순서 있는 목록", "목록", ListItems(ListKind.ORDERED))
    yield MenuItem("task-list", "체크리스트", "목록", TaskList())

    yield MenuItem("link", "링크", "요소", Link())
    yield MenuItem("image", "이미지", "요소", Image())
    yield MenuItem("inline-code", "인라인 코드", "요소", Code(CodeKind.INLINE))
    yield MenuItem("code-block", "코드 블록", "요소", Code(CodeKind.BLOCK))
    yield MenuItem("blockquote", "인용", "요소", Blockquote())
    yield MenuItem("horizontal-rule", "수평선", "요소", HorizontalRule())
    yield MenuItem("table", "표", "요소", Table())


def load_default_menu(catalog: Optional[MenuCatalog] = None) -> MenuCatalog:
    catalog = catalog if catalog is not None else MenuCatalog()
    for item in _default_items():
        catalog.register(item)
    return catalog


__all__ = [
    "MenuCatalog",
    "MenuItem",
    "MenuItemConflictError",
    "TEXT_COLORS",
    "load_default_menu",
]
