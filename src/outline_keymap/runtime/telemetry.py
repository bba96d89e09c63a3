"""Keymap telemetry on top of telelog.

Keymap construction and resolution only need three things from here:
``get_logger`` for a configured logger, ``record_event`` for the warnings
and errors the keymap layers report, and ``span`` to profile a block.
Logger settings come from ``OUTLINE_KEYMAP_*`` environment variables.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "OUTLINE_KEYMAP_"
DEFAULT_LOGGER_NAME = "outline_keymap"
DEFAULT_LEVEL = "WARNING"

_LOGGER_CACHE: MutableMapping[str, Any] = {}


def _flag(raw: Optional[str]) -> bool:
    return raw is not None and raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class TelemetrySettings:
    """Logger settings; the host owns the terminal, so only warnings show."""

    logger_name: str = DEFAULT_LOGGER_NAME
    level: str = DEFAULT_LEVEL
    console: bool = True
    color: bool = True
    json: bool = False
    log_file: str = ""

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "TelemetrySettings":
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            return env.get(f"{ENV_PREFIX}{name}")

        return cls(
            logger_name=get("LOGGER") or DEFAULT_LOGGER_NAME,
            level=(get("LOG_LEVEL") or DEFAULT_LEVEL).upper(),
            console=not _flag(get("DISABLE_CONSOLE")),
            color=not _flag(get("NO_COLOR")),
            json=_flag(get("LOG_JSON")),
            log_file=get("LOG_FILE") or "",
        )

    def build_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.color)
        if self.json:
            config.with_json_format(True)
        if self.log_file:
            config.with_file_output(self.log_file)
        config.with_profiling(True)
        return config


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger``; ``name`` defaults to the settings'."""

    settings = TelemetrySettings.from_env()
    logger_name = name or settings.logger_name
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, settings.build_config()
        )
    return _LOGGER_CACHE[logger_name]


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in payload.items()])
        return
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit a structured ``event::<name>`` line."""

    _emit(
        get_logger(logger_name),
        level,
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata."""

    logger: Any
    span_name: str
    component: str
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {
            "span": self.span_name,
            "component": self.component,
            **self.metadata,
            "reason": reason,
        }
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    component: str,
    logger_name: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block under ``component``.

    Metadata is pushed as logger context for the duration of the block. An
    exception escaping the block is reported through ``SpanHandle.fail``
    and re-raised.
    """

    log = get_logger(logger_name)
    context = {key: _stringify(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log, span_name=name, component=component, metadata=dict(context)
    )
    try:
        with log.track_component(component), log.profile(name):
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "ENV_PREFIX",
    "SpanHandle",
    "TelemetrySettings",
    "get_logger",
    "record_event",
    "span",
]
