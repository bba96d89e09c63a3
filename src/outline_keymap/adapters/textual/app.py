"""Textual app for exploring the active keymap, plus the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the explorer is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use outline_keymap.adapters.textual.app"
    ) from exc

from outline_keymap.actions import Action, Command, Mode, action_label
from outline_keymap.keymaps import (
    Keymap,
    KeymapConfigError,
    KeymapResolver,
    keyfile_from_env,
    load_keymap,
)

from .controller import TextualKeymapAdapter, TextualUIHooks


@dataclass
class UIState:
    mode_text: str = ""
    action_text: str = ""


class KeymapExplorerApp(App[None]):
    """Shows the loaded bindings and the action each input resolves to."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#bindings-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#action-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#mode-line {
		height: 1;
		background: $surface-darken-2;
		padding: 0 1;
	}
	"""

    def __init__(self, keymap: Keymap, *, mode: Mode = Mode.NORMAL) -> None:
        super().__init__()
        self._state = UIState()
        self._keymap = keymap
        self._initial_mode = mode
        self.adapter: TextualKeymapAdapter | None = None
        self._action_widget: Static | None = None
        self._mode_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="bindings-area"):
            yield Static(
                self._keymap.describe(), id="bindings-view", markup=False
            )
        self._action_widget = Static("", id="action-line", markup=False)
        self._mode_widget = Static("", id="mode-line")
        yield self._action_widget
        yield self._mode_widget
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualUIHooks(
            show_action=self._show_action,
            update_mode=self._update_mode,
            log=self.log.debug,
        )
        self.adapter = TextualKeymapAdapter(
            KeymapResolver(self._keymap), hooks, mode=self._initial_mode
        )

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key(event.key, character=event.character)
        event.stop()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        if self.adapter:
            self.adapter.handle_textual_mouse("down", event.button, event.x, event.y)

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.adapter:
            self.adapter.handle_textual_mouse("up", event.button, event.x, event.y)

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.adapter:
            self.adapter.handle_textual_mouse("move", event.button, event.x, event.y)

    def _show_action(self, action: Optional[Action]) -> None:
        if action is Command.QUIT:
            self.exit()
            return
        self._state.action_text = action_label(action) if action is not None else "-"
        if self._action_widget:
            self._action_widget.update(f"action: {self._state.action_text}")

    def _update_mode(self, mode: Mode) -> None:
        self._state.mode_text = mode.value.upper()
        if self._mode_widget:
            self._mode_widget.update(self._state.mode_text)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Inspect the outline editor keymap (defaults plus KEYFILE)."
    )
    parser.add_argument(
        "--keyfile",
        default=keyfile_from_env(),
        help="Keyfile with binding overrides (default: $KEYFILE)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in Mode],
        default=Mode.NORMAL.value,
        help="Mode the explorer starts in and keyfile bindings apply to",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--print-bindings",
        action="store_true",
        help="Print every binding and exit",
    )
    output.add_argument(
        "--check",
        action="store_true",
        help="Validate the keyfile and exit",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    mode = Mode(args.mode)
    try:
        keymap = load_keymap(args.keyfile, mode=mode)
    except KeymapConfigError as exc:
        print(f"outline-keymap: {exc}", file=sys.stderr)
        return 2

    if args.print_bindings:
        sys.stdout.write(keymap.describe())
        return 0
    if args.check:
        print(f"ok: {keymap.stats().binding_count} bindings")
        return 0

    KeymapExplorerApp(keymap, mode=mode).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual demo
    sys.exit(main())
