"""Textual host adapter for the markdown editing engine."""

from .controller import TextualMenuAdapter, TextualUIHooks
from .surface import TextAreaOwner, TextAreaSurface

__all__ = ["TextAreaOwner", "TextAreaSurface", "TextualMenuAdapter", "TextualUIHooks"]
