import pytest

from outline_keymap.actions import Command, Mode
from outline_keymap.keymaps import Binding, Key, KeyKind
from outline_keymap.keymaps.models import ESC, PAGE_UP


def test_keys_are_structurally_equal() -> None:
    assert Key.char("a") == Key(KeyKind.CHAR, "a")
    assert Key.ctrl("c") != Key.char("c")
    assert Key.alt("P") != Key.alt("p")
    assert hash(Key.function(1)) == hash(Key.function(1))
    assert Key.named(KeyKind.ESC) == ESC


@pytest.mark.parametrize(
    "kind, value",
    [
        (KeyKind.CHAR, ""),
        (KeyKind.CHAR, "ab"),
        (KeyKind.CTRL, None),
        (KeyKind.FUNCTION, 0),
        (KeyKind.FUNCTION, "1"),
        (KeyKind.ESC, "x"),
    ],
)
def test_key_rejects_bad_payload(kind: KeyKind, value: object) -> None:
    with pytest.raises(ValueError):
        Key(kind, value)  # type: ignore[arg-type]


def test_key_tokens() -> None:
    assert Key.char("j").token == "j"
    assert Key.char(" ").token == "space"
    assert Key.char("\n").token == "enter"
    assert Key.char("\t").token == "tab"
    assert Key.ctrl("x").token == "C-x"
    assert Key.alt("P").token == "A-P"
    assert Key.function(1).token == "F1"
    assert PAGE_UP.token == "pgup"


def test_binding_describe() -> None:
    binding = Binding(mode=Mode.NORMAL, key=Key.ctrl("c"), action=Command.QUIT)

    assert binding.signature == (Mode.NORMAL, Key.ctrl("c"))
    assert binding.describe() == "quit: C-c  [normal]"
