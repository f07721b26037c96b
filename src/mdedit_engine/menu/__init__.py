"""Transformation menu: item catalog and the open/closed controller."""

from .catalog import (
    TEXT_COLORS,
    MenuCatalog,
    MenuItem,
    MenuItemConflictError,
    load_default_menu,
)
from .controller import CLOSED, Anchor, MenuController, MenuResult, MenuState

__all__ = [
    "Anchor",
    "CLOSED",
    "MenuCatalog",
    "MenuController",
    "MenuItem",
    "MenuItemConflictError",
    "MenuResult",
    "MenuState",
    "TEXT_COLORS",
    "load_default_menu",
]
