"""Textual bindings for the keymap resolver."""

from .controller import (
    TextualKeymapAdapter,
    TextualUIHooks,
    translate_key,
    translate_mouse,
)

__all__ = [
    "TextualKeymapAdapter",
    "TextualUIHooks",
    "translate_key",
    "translate_mouse",
]
