"""Closed vocabulary of modes and abstract editor commands."""

from .core import (
    Action,
    InsertChar,
    LeftClick,
    Mode,
    Release,
    RightClick,
    SwitchMode,
    action_label,
)
from .command import Command, parse_action_name

__all__ = [
    "Action",
    "Command",
    "InsertChar",
    "LeftClick",
    "Mode",
    "Release",
    "RightClick",
    "SwitchMode",
    "action_label",
    "parse_action_name",
]
