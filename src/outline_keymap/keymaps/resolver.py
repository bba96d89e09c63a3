"""Turns input events into actions for the current mode."""

from __future__ import annotations

from typing import Optional, cast

from outline_keymap.actions import (
    Action,
    InsertChar,
    LeftClick,
    Mode,
    Release,
    RightClick,
    action_label,
)
from outline_keymap.runtime import telemetry

from .events import (
    InputEvent,
    KeyEvent,
    MouseButton,
    MouseHold,
    MousePress,
    MouseRelease,
)
from .registry import Keymap


class KeymapResolver:
    """Resolves events against a keymap.

    Plain characters without a binding become ``InsertChar``. Mouse events
    never consult the keymap. Other unbound keys and unknown events resolve
    to ``None`` and are reported as warnings.
    """

    def __init__(self, keymap: Keymap, *, logger_name: str | None = None) -> None:
        self._keymap = keymap
        self._logger_name = logger_name

    @property
    def keymap(self) -> Keymap:
        return self._keymap

    def resolve(self, event: InputEvent, mode: Mode) -> Optional[Action]:
        with telemetry.span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode.value, "event": type(event).__name__},
        ) as handle:
            action = self._dispatch(event, mode)
            handle.add_metadata(
                "action", action_label(action) if action is not None else "none"
            )
            return action

    def describe(self) -> str:
        return self._keymap.describe()

    def _dispatch(self, event: InputEvent, mode: Mode) -> Optional[Action]:
        if isinstance(event, KeyEvent):
            key = event.key
            action = self._keymap.lookup(mode, key)
            if action is not None:
                return action
            if key.is_char:
                return InsertChar(mode, cast(str, key.value))
            telemetry.record_event(
                "keymaps.unbound_key",
                level="warning",
                data={"mode": mode.value, "key": key.token},
                logger_name=self._logger_name,
            )
            return None

        if isinstance(event, MousePress):
            if event.button is MouseButton.RIGHT:
                return RightClick(event.x, event.y)
            return LeftClick(event.x, event.y)
        if isinstance(event, MouseRelease):
            return Release(event.x, event.y)
        if isinstance(event, MouseHold):
            return None

        telemetry.record_event(
            "keymaps.unknown_event",
            level="warning",
            data={"mode": mode.value, "event": repr(event)},
            logger_name=self._logger_name,
        )
        return None


__all__ = ["KeymapResolver"]
