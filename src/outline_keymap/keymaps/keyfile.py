"""Parser for user keyfiles that override the built-in bindings.

A keyfile holds one ``<action_name>: <key_spec>`` binding per line; blank
lines and lines starting with ``#`` are ignored::

    # leave with C-c instead of the default
    quit: C-c
    save: C-x
"""

from __future__ import annotations

import os
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from outline_keymap.actions import Mode, parse_action_name
from outline_keymap.runtime import telemetry

from .defaults import default_keymap
from .models import (
    BACKSPACE,
    DELETE,
    DOWN,
    ESC,
    LEFT,
    PAGE_DOWN,
    PAGE_UP,
    RIGHT,
    UP,
    Binding,
    Key,
)
from .registry import Keymap

KEYFILE_ENV_VAR = "KEYFILE"

PathLike = Union[str, "os.PathLike[str]"]

NAMED_KEY_SPECS: Mapping[str, Key] = MappingProxyType(
    {
        "esc": ESC,
        "pgup": PAGE_UP,
        "pgdn": PAGE_DOWN,
        "del": DELETE,
        "backspace": BACKSPACE,
        "up": UP,
        "down": DOWN,
        "left": LEFT,
        "right": RIGHT,
        "space": Key.char(" "),
        "enter": Key.char("\n"),
        "tab": Key.char("\t"),
    }
)


class KeymapConfigError(RuntimeError):
    """Base class for failures while building a keymap from a keyfile."""


class KeyfileReadError(KeymapConfigError):
    """Raised when the keyfile cannot be opened or decoded."""

    def __init__(self, path: PathLike, reason: object) -> None:
        super().__init__(f"could not read keyfile {os.fspath(path)!r}: {reason}")
        self.path = os.fspath(path)


class KeyfileSyntaxError(KeymapConfigError):
    """A keyfile line that could not be turned into a binding."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class MalformedLineError(KeyfileSyntaxError):
    """Raised when a line does not contain exactly one ``:`` separator."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"expected exactly one ':' on line {line_number}: {line}",
            line_number,
            line,
        )


class UnresolvedBindingError(KeyfileSyntaxError):
    """Raised when the action name or the key spec is not recognized."""

    def __init__(self, line_number: int, line: str) -> None:
        super().__init__(
            f"invalid config at line {line_number}: {line}", line_number, line
        )


def parse_key_spec(token: str) -> Optional[Key]:
    """Translate a keyfile key spec into a ``Key``; ``None`` if unrecognized.

    ``A-`` and ``C-`` prefixes select Alt and Control and use the character
    right after the prefix. Matching is case-sensitive.
    """

    named = NAMED_KEY_SPECS.get(token)
    if named is not None:
        return named
    if len(token) == 1:
        return Key.char(token)
    if len(token) > 2:
        if token.startswith("A-"):
            return Key.alt(token[2])
        if token.startswith("C-"):
            return Key.ctrl(token[2])
    return None


def _iter_lines(text: str) -> Iterator[str]:
    # Only "\n" ends a line; form feeds and unicode separators stay inside it.
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def _is_skipped(line: str) -> bool:
    return not line.strip() or line.startswith("#")


def parse_keyfile_text(
    text: str,
    base: Keymap,
    *,
    mode: Mode = Mode.NORMAL,
    source: str = "keyfile",
    logger_name: str | None = None,
) -> Keymap:
    """Apply every binding in ``text`` on top of ``base``.

    Bindings land in ``mode``. ``base`` is left untouched; the merged keymap
    is only built once the whole text has parsed, so a bad line never
    leaves a partially applied override behind.
    """

    with telemetry.span(
        "keymaps::parse_keyfile",
        logger_name=logger_name,
        component="keymaps",
        metadata={"source": source, "mode": mode.value},
    ) as handle:
        overrides: list[Binding] = []
        for line_number, line in enumerate(_iter_lines(text), start=1):
            if _is_skipped(line):
                continue

            if line.count(":") != 1:
                _report(source, line_number, line, "malformed", logger_name)
                raise MalformedLineError(line_number, line)

            raw_action, raw_key = (part.strip() for part in line.split(":", 1))
            action = parse_action_name(raw_action)
            key = parse_key_spec(raw_key)
            if action is None or key is None:
                _report(source, line_number, line, "unresolved", logger_name)
                raise UnresolvedBindingError(line_number, line)

            overrides.append(
                Binding(
                    mode=mode,
                    key=key,
                    action=action,
                    source=f"{source}:{line_number}",
                )
            )

        handle.add_metadata("overrides", len(overrides))
        return base.with_bindings(overrides)


def _report(
    source: str, line_number: int, line: str, reason: str, logger_name: str | None
) -> None:
    telemetry.record_event(
        "keymaps.keyfile_error",
        level="error",
        data={"source": source, "line": line_number, "text": line, "reason": reason},
        logger_name=logger_name,
    )


def read_keyfile(
    path: PathLike,
    *,
    base: Keymap | None = None,
    mode: Mode = Mode.NORMAL,
    logger_name: str | None = None,
) -> Keymap:
    """Read ``path`` and apply it on top of ``base`` (the defaults if omitted)."""

    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        telemetry.record_event(
            "keymaps.keyfile_error",
            level="error",
            data={"source": os.fspath(path), "reason": str(exc)},
            logger_name=logger_name,
        )
        raise KeyfileReadError(path, exc) from exc

    if base is None:
        base = default_keymap(logger_name=logger_name)
    return parse_keyfile_text(
        text, base, mode=mode, source=os.fspath(path), logger_name=logger_name
    )


def load_keymap(
    keyfile: Optional[PathLike] = None,
    *,
    mode: Mode = Mode.NORMAL,
    logger_name: str | None = None,
) -> Keymap:
    """Build the startup keymap: defaults, plus ``keyfile`` when one is given."""

    if keyfile is None:
        return default_keymap(logger_name=logger_name)
    return read_keyfile(keyfile, mode=mode, logger_name=logger_name)


def keyfile_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the keyfile path named by ``KEYFILE``, if set."""

    env = os.environ if environ is None else environ
    return env.get(KEYFILE_ENV_VAR)


__all__ = [
    "KEYFILE_ENV_VAR",
    "NAMED_KEY_SPECS",
    "KeyfileReadError",
    "KeyfileSyntaxError",
    "KeymapConfigError",
    "MalformedLineError",
    "UnresolvedBindingError",
    "keyfile_from_env",
    "load_keymap",
    "parse_key_spec",
    "parse_keyfile_text",
    "read_keyfile",
]
