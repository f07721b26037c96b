"""UI-agnostic markdown selection editing engine."""

__all__ = [
    "adapters",
    "buffer",
    "bus",
    "menu",
    "runtime",
    "selection",
    "text",
    "transforms",
]

__version__ = "0.1.0"
