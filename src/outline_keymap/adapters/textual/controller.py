"""Textual adapter that turns Textual input into resolved actions."""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Optional

from outline_keymap.actions import Action, Mode, SwitchMode, action_label
from outline_keymap.keymaps import (
    InputEvent,
    Key,
    KeyEvent,
    KeyKind,
    KeymapResolver,
    MouseButton,
    MouseHold,
    MousePress,
    MouseRelease,
    UnsupportedEvent,
)

TEXTUAL_NAMED_KEYS: Mapping[str, Key] = MappingProxyType(
    {
        "escape": Key.named(KeyKind.ESC),
        "pageup": Key.named(KeyKind.PAGE_UP),
        "pagedown": Key.named(KeyKind.PAGE_DOWN),
        "delete": Key.named(KeyKind.DELETE),
        "backspace": Key.named(KeyKind.BACKSPACE),
        "up": Key.named(KeyKind.UP),
        "down": Key.named(KeyKind.DOWN),
        "left": Key.named(KeyKind.LEFT),
        "right": Key.named(KeyKind.RIGHT),
        "home": Key.named(KeyKind.HOME),
        "end": Key.named(KeyKind.END),
        "insert": Key.named(KeyKind.INSERT),
        "shift+tab": Key.named(KeyKind.BACKTAB),
        "enter": Key.char("\n"),
        "tab": Key.char("\t"),
        "space": Key.char(" "),
    }
)

# Textual numbers buttons 1 (left), 2 (middle), 3 (right).
TEXTUAL_BUTTONS: Mapping[int, MouseButton] = MappingProxyType(
    {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}
)

_FUNCTION_KEY = re.compile(r"f(\d+)")


def translate_key(key: str, character: Optional[str] = None) -> InputEvent:
    """Map a Textual key name (plus its character, if any) to a ``KeyEvent``."""

    named = TEXTUAL_NAMED_KEYS.get(key)
    if named is not None:
        return KeyEvent(named)

    prefix, _, rest = key.rpartition("+")
    if len(rest) == 1:
        if prefix == "ctrl":
            return KeyEvent(Key.ctrl(rest))
        if prefix in {"alt", "meta"}:
            return KeyEvent(Key.alt(rest))
        if prefix in {"alt+shift", "meta+shift", "shift+alt", "shift+meta"}:
            return KeyEvent(Key.alt(rest.upper()))

    function = _FUNCTION_KEY.fullmatch(key)
    if function:
        return KeyEvent(Key.function(int(function.group(1))))

    if character is not None and len(character) == 1 and character.isprintable():
        return KeyEvent(Key.char(character))

    return UnsupportedEvent(f"textual key {key!r}")


def translate_mouse(
    kind: Literal["down", "up", "move"], button: int, x: int, y: int
) -> Optional[InputEvent]:
    """Map a Textual mouse event; plain motion and off-screen cells yield ``None``."""

    if x < 0 or y < 0:
        return None
    if kind == "down":
        return MousePress(TEXTUAL_BUTTONS.get(button, MouseButton.LEFT), x, y)
    if kind == "up":
        return MouseRelease(x, y)
    if button:
        return MouseHold(x, y)
    return None


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    show_action: Callable[[Optional[Action]], None]
    update_mode: Callable[[Mode], None] = _noop
    log: Callable[[str], None] = _noop


class TextualKeymapAdapter:
    """Owns the current mode and feeds Textual input through the resolver."""

    def __init__(
        self,
        resolver: KeymapResolver,
        hooks: TextualUIHooks,
        *,
        mode: Mode = Mode.NORMAL,
    ) -> None:
        self.resolver = resolver
        self.hooks = hooks
        self.mode = mode
        self.hooks.update_mode(self.mode)

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> Optional[Action]:
        return self.dispatch(translate_key(key, character))

    def handle_textual_mouse(
        self, kind: Literal["down", "up", "move"], button: int, x: int, y: int
    ) -> Optional[Action]:
        event = translate_mouse(kind, button, x, y)
        if event is None:
            return None
        return self.dispatch(event)

    def dispatch(self, event: InputEvent) -> Optional[Action]:
        self.hooks.log(f"event -> {event!r} mode={self.mode.value}")
        action = self.resolver.resolve(event, self.mode)
        if isinstance(action, SwitchMode) and action.mode is not self.mode:
            self.mode = action.mode
            self.hooks.update_mode(self.mode)
        label = action_label(action) if action is not None else "none"
        self.hooks.log(f"action <- {label}")
        self.hooks.show_action(action)
        return action


__all__ = [
    "TEXTUAL_BUTTONS",
    "TEXTUAL_NAMED_KEYS",
    "TextualKeymapAdapter",
    "TextualUIHooks",
    "translate_key",
    "translate_mouse",
]
