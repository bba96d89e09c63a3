"""Dataclasses describing keys and the bindings that map them to actions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union, cast

from outline_keymap.actions import Action, Mode, action_label


class KeyKind(str, Enum):
    """Shape of a physical key press."""

    CHAR = "char"
    CTRL = "ctrl"
    ALT = "alt"
    FUNCTION = "function"
    ESC = "esc"
    PAGE_UP = "pgup"
    PAGE_DOWN = "pgdn"
    DELETE = "del"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    INSERT = "insert"
    BACKTAB = "backtab"


_CHAR_KINDS = frozenset({KeyKind.CHAR, KeyKind.CTRL, KeyKind.ALT})

_CHAR_TOKENS = {" ": "space", "\n": "enter", "\t": "tab"}


@dataclass(frozen=True, slots=True)
class Key:
    """Single normalized key press; equality is structural."""

    kind: KeyKind
    value: Union[str, int, None] = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"{self.kind.value} key requires one character")
        elif self.kind is KeyKind.FUNCTION:
            if (
                not isinstance(self.value, int)
                or isinstance(self.value, bool)
                or self.value < 1
            ):
                raise ValueError("function key requires a positive number")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} key takes no value")

    @classmethod
    def char(cls, value: str) -> "Key":
        return cls(KeyKind.CHAR, value)

    @classmethod
    def ctrl(cls, value: str) -> "Key":
        return cls(KeyKind.CTRL, value)

    @classmethod
    def alt(cls, value: str) -> "Key":
        return cls(KeyKind.ALT, value)

    @classmethod
    def function(cls, number: int) -> "Key":
        return cls(KeyKind.FUNCTION, number)

    @classmethod
    def named(cls, kind: KeyKind) -> "Key":
        return cls(kind)

    @property
    def is_char(self) -> bool:
        return self.kind is KeyKind.CHAR

    @property
    def token(self) -> str:
        """Render the key the way a keyfile spells it (``F<n>`` for function keys)."""

        if self.kind is KeyKind.CHAR:
            char = cast(str, self.value)
            return _CHAR_TOKENS.get(char, char)
        if self.kind is KeyKind.CTRL:
            return f"C-{self.value}"
        if self.kind is KeyKind.ALT:
            return f"A-{self.value}"
        if self.kind is KeyKind.FUNCTION:
            return f"F{self.value}"
        return self.kind.value


ESC = Key.named(KeyKind.ESC)
PAGE_UP = Key.named(KeyKind.PAGE_UP)
PAGE_DOWN = Key.named(KeyKind.PAGE_DOWN)
DELETE = Key.named(KeyKind.DELETE)
BACKSPACE = Key.named(KeyKind.BACKSPACE)
UP = Key.named(KeyKind.UP)
DOWN = Key.named(KeyKind.DOWN)
LEFT = Key.named(KeyKind.LEFT)
RIGHT = Key.named(KeyKind.RIGHT)
HOME = Key.named(KeyKind.HOME)
END = Key.named(KeyKind.END)
INSERT = Key.named(KeyKind.INSERT)
BACKTAB = Key.named(KeyKind.BACKTAB)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a key in a given mode with an action."""

    mode: Mode
    key: Key
    action: Action
    source: Optional[str] = None

    @property
    def signature(self) -> tuple[Mode, Key]:
        return (self.mode, self.key)

    def describe(self) -> str:
        return f"{action_label(self.action)}: {self.key.token}  [{self.mode.value}]"


__all__ = [
    "Binding",
    "Key",
    "KeyKind",
    "ESC",
    "PAGE_UP",
    "PAGE_DOWN",
    "DELETE",
    "BACKSPACE",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "HOME",
    "END",
    "INSERT",
    "BACKTAB",
]
