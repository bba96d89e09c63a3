"""Nullary editor commands and the names used for them in keyfiles."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Command(str, Enum):
    """Abstract command the host editor executes; values are keyfile names."""

    UNSELECT = "unselect"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    DELETE_SELECTED = "delete"
    SELECT_UP = "select_up"
    SELECT_DOWN = "select_down"
    SELECT_LEFT = "select_left"
    SELECT_RIGHT = "select_right"
    ERASE_CHAR = "erase"
    CREATE_SIBLING = "create_sibling"
    CREATE_CHILD = "create_child"
    CREATE_FREE_NODE = "create_free_node"
    EXEC_SELECTED = "execute"
    DRILL_DOWN = "drill_down"
    POP_UP = "pop_up"
    PREFIX_JUMP = "jump"
    TOGGLE_COMPLETED = "toggle_completed"
    TOGGLE_HIDE_COMPLETED = "toggle_hide_completed"
    ARROW = "arrow"
    AUTO_ARRANGE = "auto_arrange"
    TOGGLE_COLLAPSED = "toggle_collapsed"
    QUIT = "quit"
    SAVE = "save"
    TOGGLE_SHOW_LOGS = "toggle_show_logs"
    ENTER_CMD = "enter_command"
    FIND_TASK = "find_task"
    YANK_PASTE_NODE = "yank_paste_node"
    RAISE_SELECTED = "raise_selected"
    LOWER_SELECTED = "lower_selected"
    SEARCH = "search"
    UNDO_DELETE = "undo_delete"
    HELP = "help"
    SELECT_PARENT = "select_parent"
    SELECT_NEXT_SIBLING = "select_next_sibling"
    SELECT_PREV_SIBLING = "select_prev_sibling"


COMMANDS_BY_NAME: Mapping[str, Command] = MappingProxyType(
    {command.value: command for command in Command}
)


def parse_action_name(name: str) -> Optional[Command]:
    """Map a keyfile action name to its command, or ``None`` if unknown.

    Matching is exact: ``"Quit"`` and ``" quit"`` are not recognized.
    """

    return COMMANDS_BY_NAME.get(name)


__all__ = ["Command", "COMMANDS_BY_NAME", "parse_action_name"]
