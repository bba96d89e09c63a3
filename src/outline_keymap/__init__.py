"""Keybinding resolution for a terminal outline editor."""

__all__ = [
    "actions",
    "adapters",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
