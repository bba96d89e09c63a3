"""Immutable binding table keyed by (mode, key)."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

from outline_keymap.actions import Action, Mode
from outline_keymap.runtime.telemetry import span

from .models import Binding, Key


@dataclass(frozen=True, slots=True)
class KeymapStats:
    """Lightweight snapshot describing a keymap."""

    binding_count: int
    modes: tuple[Mode, ...]


class Keymap:
    """Read-only table with at most one binding per (mode, key).

    Bindings are folded in order, so a later binding for the same
    (mode, key) pair replaces an earlier one.
    """

    def __init__(
        self, bindings: Iterable[Binding] = (), *, logger_name: str | None = None
    ) -> None:
        table: Dict[tuple[Mode, Key], Binding] = {}
        for binding in bindings:
            table[binding.signature] = binding
        self._table: Mapping[tuple[Mode, Key], Binding] = MappingProxyType(table)
        self._logger_name = logger_name

    def lookup(self, mode: Mode, key: Key) -> Optional[Action]:
        binding = self._table.get((mode, key))
        return binding.action if binding else None

    def get_binding(self, mode: Mode, key: Key) -> Binding:
        try:
            return self._table[(mode, key)]
        except KeyError as exc:
            raise KeyError(
                f"No binding for {key.token!r} in {mode.value} mode"
            ) from exc

    def iter_bindings(self, mode: Optional[Mode] = None) -> Iterator[Binding]:
        for binding in self._table.values():
            if mode is None or binding.mode is mode:
                yield binding

    def with_bindings(self, bindings: Iterable[Binding]) -> "Keymap":
        """Return a new keymap where ``bindings`` take precedence."""

        overrides = tuple(bindings)
        with span(
            "keymaps::merge",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"base": len(self), "overrides": len(overrides)},
        ):
            return Keymap(
                (*self._table.values(), *overrides), logger_name=self._logger_name
            )

    def stats(self) -> KeymapStats:
        modes = {binding.mode for binding in self._table.values()}
        return KeymapStats(
            binding_count=len(self._table),
            modes=tuple(mode for mode in Mode if mode in modes),
        )

    def describe(self) -> str:
        """Text listing of every binding, suitable for a help screen."""

        lines = ["Configured Hotkeys:"]
        lines.extend(f"    {binding.describe()}" for binding in self._table.values())
        return "\n".join(lines) + "\n"

    def __contains__(self, signature: object) -> bool:
        return signature in self._table

    def __iter__(self) -> Iterator[Binding]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return f"Keymap(bindings={len(self)})"


__all__ = ["Keymap", "KeymapStats"]
