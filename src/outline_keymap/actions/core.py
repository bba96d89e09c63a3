"""Modes and payload-carrying actions shared by every keymap."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .command import Command


class Mode(str, Enum):
    """Interaction state the host editor is in."""

    NORMAL = "normal"
    INSERT = "insert"


def check_position(x: int, y: int) -> None:
    """Reject anything but a zero-based (column, row) pair of ints."""

    for name, value in (("x", x), ("y", y)):
        _check_coordinate(name, value)


def _check_coordinate(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int")
    if value < 0:
        raise ValueError(f"{name} must be zero or positive")


@dataclass(frozen=True, slots=True)
class SwitchMode:
    """Request a transition into ``mode``."""

    mode: Mode


@dataclass(frozen=True, slots=True)
class InsertChar:
    """Insert ``char`` literally; produced for unbound printable keys."""

    mode: Mode
    char: str

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError("InsertChar requires exactly one character")


@dataclass(frozen=True, slots=True)
class _MouseAction:
    x: int
    y: int

    def __post_init__(self) -> None:
        check_position(self.x, self.y)


@dataclass(frozen=True, slots=True)
class LeftClick(_MouseAction):
    """Primary (or middle/wheel) button press at a zero-based cell."""


@dataclass(frozen=True, slots=True)
class RightClick(_MouseAction):
    """Right button press at a zero-based cell."""


@dataclass(frozen=True, slots=True)
class Release(_MouseAction):
    """Button release at a zero-based cell."""


Action = Union["Command", SwitchMode, InsertChar, LeftClick, RightClick, Release]


def action_label(action: Action) -> str:
    """Human readable label used by help screens and log lines."""

    if isinstance(action, SwitchMode):
        return f"mode({action.mode.value})"
    if isinstance(action, InsertChar):
        return f"char({action.mode.value}, {action.char!r})"
    if isinstance(action, LeftClick):
        return f"left_click({action.x}, {action.y})"
    if isinstance(action, RightClick):
        return f"right_click({action.x}, {action.y})"
    if isinstance(action, Release):
        return f"release({action.x}, {action.y})"
    return action.value


__all__ = [
    "Action",
    "InsertChar",
    "LeftClick",
    "Mode",
    "Release",
    "RightClick",
    "SwitchMode",
    "action_label",
    "check_position",
]
