import pytest

from outline_keymap.actions import Command, Mode, SwitchMode
from outline_keymap.keymaps import (
    DEFAULT_BINDINGS,
    Binding,
    Key,
    Keymap,
    default_keymap,
)
from outline_keymap.keymaps.models import BACKSPACE, ESC


def make_binding(
    key: Key,
    action=Command.SAVE,
    *,
    mode: Mode = Mode.NORMAL,
    source: str | None = None,
) -> Binding:
    return Binding(mode=mode, key=key, action=action, source=source)


def test_keymap_lookup_hit_and_miss() -> None:
    keymap = Keymap([make_binding(Key.ctrl("x"))])

    assert keymap.lookup(Mode.NORMAL, Key.ctrl("x")) is Command.SAVE
    assert keymap.lookup(Mode.INSERT, Key.ctrl("x")) is None
    assert keymap.lookup(Mode.NORMAL, Key.char("x")) is None


def test_keymap_last_write_wins() -> None:
    keymap = Keymap(
        [
            make_binding(Key.ctrl("p"), Command.AUTO_ARRANGE),
            make_binding(Key.ctrl("p"), Command.SELECT_PREV_SIBLING),
        ]
    )

    assert len(keymap) == 1
    assert keymap.lookup(Mode.NORMAL, Key.ctrl("p")) is Command.SELECT_PREV_SIBLING


def test_with_bindings_returns_new_keymap() -> None:
    base = Keymap([make_binding(Key.ctrl("c"), Command.QUIT)])

    merged = base.with_bindings([make_binding(Key.ctrl("c"), Command.SAVE)])

    assert merged.lookup(Mode.NORMAL, Key.ctrl("c")) is Command.SAVE
    assert base.lookup(Mode.NORMAL, Key.ctrl("c")) is Command.QUIT


def test_get_binding_and_contains() -> None:
    binding = make_binding(ESC, SwitchMode(Mode.NORMAL), mode=Mode.INSERT)
    keymap = Keymap([binding])

    assert (Mode.INSERT, ESC) in keymap
    assert keymap.get_binding(Mode.INSERT, ESC) == binding
    with pytest.raises(KeyError):
        keymap.get_binding(Mode.NORMAL, ESC)


def test_iter_bindings_by_mode() -> None:
    keymap = default_keymap()

    insert = list(keymap.iter_bindings(Mode.INSERT))

    assert {binding.key for binding in insert} == {ESC, BACKSPACE}
    assert all(binding.mode is Mode.INSERT for binding in insert)
    assert len(list(keymap.iter_bindings())) == len(keymap)


def test_default_keymap_resolves_duplicate_to_later_entry() -> None:
    keymap = default_keymap()

    assert len(DEFAULT_BINDINGS) == len(keymap) + 1
    assert keymap.lookup(Mode.NORMAL, Key.ctrl("p")) is Command.SELECT_PREV_SIBLING
    assert Command.AUTO_ARRANGE not in {binding.action for binding in keymap}


def test_default_keymap_sample_entries() -> None:
    keymap = default_keymap()

    assert keymap.lookup(Mode.NORMAL, Key.char("i")) == SwitchMode(Mode.INSERT)
    assert keymap.lookup(Mode.INSERT, ESC) == SwitchMode(Mode.NORMAL)
    assert keymap.lookup(Mode.NORMAL, Key.ctrl("c")) is Command.QUIT
    assert keymap.lookup(Mode.NORMAL, Key.function(1)) is Command.PREFIX_JUMP
    assert keymap.lookup(Mode.NORMAL, Key.alt("P")) is Command.SELECT_PARENT
    assert keymap.lookup(Mode.NORMAL, Key.char("\t")) is Command.CREATE_CHILD


def test_stats() -> None:
    stats = default_keymap().stats()

    assert stats.binding_count == len(DEFAULT_BINDINGS) - 1
    assert stats.modes == (Mode.NORMAL, Mode.INSERT)
    assert Keymap().stats().modes == ()


def test_describe_lists_every_binding() -> None:
    keymap = default_keymap()

    lines = keymap.describe().splitlines()

    assert lines[0] == "Configured Hotkeys:"
    assert len(lines) == len(keymap) + 1
    assert "    quit: C-c  [normal]" in lines
    assert "    mode(normal): esc  [insert]" in lines
    assert str(keymap) == keymap.describe()
