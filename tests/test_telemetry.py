from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, List

import pytest

from outline_keymap.runtime import telemetry
from outline_keymap.runtime.telemetry import TelemetrySettings


class RecordingConfig:
    def __init__(self) -> None:
        self.calls: List[tuple[str, Any]] = []

    def __getattr__(self, name: str) -> Any:
        return lambda value: self.calls.append((name, value))


class RecordingLogger:
    def __init__(self) -> None:
        self.lines: List[tuple[str, Any]] = []
        self.context: dict[str, str] = {}
        self.entered: List[str] = []

    def warning_with(self, message: str, pairs: Any) -> None:
        self.lines.append((message, pairs))

    def error_with(self, message: str, pairs: Any) -> None:
        self.lines.append((message, pairs))

    def info(self, message: str) -> None:
        self.lines.append((message, None))

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.entered.append(f"component:{name}")
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.entered.append(f"profile:{name}")
        yield


@pytest.fixture
def logger(monkeypatch: pytest.MonkeyPatch) -> RecordingLogger:
    recording = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: recording)
    return recording


def test_settings_defaults() -> None:
    settings = TelemetrySettings.from_env({})

    assert settings == TelemetrySettings()
    assert settings.logger_name == "outline_keymap"
    assert settings.level == "WARNING"
    assert settings.console is True


def test_settings_from_env() -> None:
    settings = TelemetrySettings.from_env(
        {
            "OUTLINE_KEYMAP_LOGGER": "editor.keys",
            "OUTLINE_KEYMAP_LOG_LEVEL": "debug",
            "OUTLINE_KEYMAP_DISABLE_CONSOLE": "yes",
            "OUTLINE_KEYMAP_LOG_JSON": "1",
            "OUTLINE_KEYMAP_LOG_FILE": "/tmp/keys.log",
        }
    )

    assert settings.logger_name == "editor.keys"
    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.json is True
    assert settings.log_file == "/tmp/keys.log"


def test_build_config_applies_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeTelelog:
        Config = RecordingConfig

    monkeypatch.setattr(telemetry, "tl", FakeTelelog)

    config = TelemetrySettings(console=False, log_file="/tmp/keys.log").build_config()

    assert config.calls == [
        ("with_min_level", "WARNING"),
        ("with_console_output", False),
        ("with_file_output", "/tmp/keys.log"),
        ("with_profiling", True),
    ]


def test_record_event_prefers_structured_method(logger: RecordingLogger) -> None:
    telemetry.record_event("keymaps.unbound_key", level="warning", data={"key": "up"})
    telemetry.record_event("keymaps.loaded", data={"count": 3})

    assert logger.lines[0] == (
        "event::keymaps.unbound_key",
        [("event", "keymaps.unbound_key"), ("key", "up")],
    )
    assert logger.lines[1][0].startswith("event::keymaps.loaded ")


def test_record_event_unknown_level(logger: RecordingLogger) -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("x", level="chatty")


def test_span_pushes_and_clears_context(logger: RecordingLogger) -> None:
    with telemetry.span(
        "keymaps::resolve", component="keymaps", metadata={"mode": "normal"}
    ) as handle:
        assert logger.context == {"mode": "normal"}
        handle.add_metadata("action", "quit")

    assert logger.context == {}
    assert logger.entered == ["component:keymaps", "profile:keymaps::resolve"]
    assert handle.metadata == {"mode": "normal", "action": "quit"}
    assert logger.lines == []


def test_span_reports_failure(logger: RecordingLogger) -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span("keymaps::parse_keyfile", component="keymaps"):
            raise RuntimeError("bad line")

    message, pairs = logger.lines[-1]
    assert message == "span::fail"
    assert ("reason", "bad line") in pairs
    assert logger.context == {}
