"""Keymap table, built-in bindings, keyfile overrides and event resolution."""

from .models import Binding, Key, KeyKind
from .events import (
    InputEvent,
    KeyEvent,
    MouseButton,
    MouseHold,
    MousePress,
    MouseRelease,
    UnsupportedEvent,
)
from .registry import Keymap, KeymapStats
from .defaults import DEFAULT_BINDINGS, default_keymap
from .keyfile import (
    KEYFILE_ENV_VAR,
    KeyfileReadError,
    KeyfileSyntaxError,
    KeymapConfigError,
    MalformedLineError,
    UnresolvedBindingError,
    keyfile_from_env,
    load_keymap,
    parse_key_spec,
    parse_keyfile_text,
    read_keyfile,
)
from .resolver import KeymapResolver

__all__ = [
    "Binding",
    "Key",
    "KeyKind",
    "InputEvent",
    "KeyEvent",
    "MouseButton",
    "MouseHold",
    "MousePress",
    "MouseRelease",
    "UnsupportedEvent",
    "Keymap",
    "KeymapStats",
    "DEFAULT_BINDINGS",
    "default_keymap",
    "KEYFILE_ENV_VAR",
    "KeyfileReadError",
    "KeyfileSyntaxError",
    "KeymapConfigError",
    "MalformedLineError",
    "UnresolvedBindingError",
    "keyfile_from_env",
    "load_keymap",
    "parse_key_spec",
    "parse_keyfile_text",
    "read_keyfile",
    "KeymapResolver",
]
