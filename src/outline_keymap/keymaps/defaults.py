"""Built-in bindings every keymap starts from."""

from __future__ import annotations

from outline_keymap.actions import Command, Mode, SwitchMode
from outline_keymap.runtime.telemetry import span

from .models import BACKSPACE, DELETE, ESC, PAGE_DOWN, PAGE_UP, Binding, Key
from .registry import Keymap

DEFAULT_SOURCE = "default"

_N = Mode.NORMAL
_I = Mode.INSERT


def _bind(mode: Mode, key: Key, action) -> Binding:
    return Binding(mode=mode, key=key, action=action, source=DEFAULT_SOURCE)


# Folded in order: C-p is listed twice and select_prev_sibling wins.
DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind(_N, Key.char("i"), SwitchMode(Mode.INSERT)),
    _bind(_N, Key.char("A"), SwitchMode(Mode.INSERT)),
    _bind(_I, ESC, SwitchMode(Mode.NORMAL)),
    _bind(_N, PAGE_UP, Command.SCROLL_UP),
    _bind(_N, PAGE_DOWN, Command.SCROLL_DOWN),
    _bind(_N, DELETE, Command.DELETE_SELECTED),
    _bind(_N, Key.char("k"), Command.SELECT_UP),
    _bind(_N, Key.char("j"), Command.SELECT_DOWN),
    _bind(_N, Key.char("h"), Command.SELECT_LEFT),
    _bind(_N, Key.char("l"), Command.SELECT_RIGHT),
    _bind(_I, BACKSPACE, Command.ERASE_CHAR),
    _bind(_N, Key.function(1), Command.PREFIX_JUMP),
    _bind(_N, Key.char("o"), Command.CREATE_SIBLING),
    _bind(_N, Key.char("\t"), Command.CREATE_CHILD),
    _bind(_N, Key.char("n"), Command.CREATE_FREE_NODE),
    _bind(_N, Key.ctrl("k"), Command.EXEC_SELECTED),
    _bind(_N, Key.ctrl("w"), Command.DRILL_DOWN),
    _bind(_N, Key.ctrl("q"), Command.POP_UP),
    _bind(_N, Key.char("f"), Command.PREFIX_JUMP),
    _bind(_N, Key.ctrl("a"), Command.TOGGLE_COMPLETED),
    _bind(_N, Key.ctrl("h"), Command.TOGGLE_HIDE_COMPLETED),
    _bind(_N, Key.ctrl("r"), Command.ARROW),
    _bind(_N, Key.ctrl("p"), Command.AUTO_ARRANGE),
    _bind(_N, Key.char(" "), Command.TOGGLE_COLLAPSED),
    _bind(_N, Key.ctrl("c"), Command.QUIT),
    _bind(_N, Key.ctrl("x"), Command.SAVE),
    _bind(_N, Key.ctrl("l"), Command.TOGGLE_SHOW_LOGS),
    _bind(_N, Key.char(":"), Command.ENTER_CMD),
    _bind(_N, Key.ctrl("v"), Command.FIND_TASK),
    _bind(_N, Key.char("y"), Command.YANK_PASTE_NODE),
    _bind(_N, Key.char("K"), Command.RAISE_SELECTED),
    _bind(_N, Key.char("J"), Command.LOWER_SELECTED),
    _bind(_N, Key.char("/"), Command.SEARCH),
    _bind(_N, Key.char("u"), Command.UNDO_DELETE),
    _bind(_N, Key.ctrl("?"), Command.HELP),
    _bind(_N, Key.alt("P"), Command.SELECT_PARENT),
    _bind(_N, Key.ctrl("n"), Command.SELECT_NEXT_SIBLING),
    _bind(_N, Key.ctrl("p"), Command.SELECT_PREV_SIBLING),
)


def default_keymap(*, logger_name: str | None = None) -> Keymap:
    """Build a fresh keymap holding only the built-in bindings."""

    with span(
        "keymaps::defaults",
        logger_name=logger_name,
        component="keymaps",
        metadata={"entries": len(DEFAULT_BINDINGS)},
    ):
        return Keymap(DEFAULT_BINDINGS, logger_name=logger_name)


__all__ = ["DEFAULT_BINDINGS", "DEFAULT_SOURCE", "default_keymap"]
