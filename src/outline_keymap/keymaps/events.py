"""Input events consumed from the terminal driver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from outline_keymap.actions.core import check_position

from .models import Key


class MouseButton(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """A key press, plain or modified."""

    key: Key


@dataclass(frozen=True, slots=True)
class MousePress:
    """Button press at a zero-based column/row."""

    button: MouseButton
    x: int
    y: int

    def __post_init__(self) -> None:
        check_position(self.x, self.y)


@dataclass(frozen=True, slots=True)
class MouseRelease:
    x: int
    y: int

    def __post_init__(self) -> None:
        check_position(self.x, self.y)


@dataclass(frozen=True, slots=True)
class MouseHold:
    """Pointer moved while a button stays down."""

    x: int
    y: int

    def __post_init__(self) -> None:
        check_position(self.x, self.y)


@dataclass(frozen=True, slots=True)
class UnsupportedEvent:
    """Anything the driver reports that has no counterpart above."""

    description: str


InputEvent = Union[KeyEvent, MousePress, MouseRelease, MouseHold, UnsupportedEvent]


__all__ = [
    "InputEvent",
    "KeyEvent",
    "MouseButton",
    "MouseHold",
    "MousePress",
    "MouseRelease",
    "UnsupportedEvent",
]
