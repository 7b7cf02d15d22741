"""Shared fixtures for the gdxlog test-suite."""

from __future__ import annotations

from typing import Callable

import pytest

import gdxlog.logger
from gdxlog import ApplicationType, GdxLogger, HostBackend, LoggerConfig, Priority


class RecordingBackend(HostBackend):
    """Backend that keeps every write in memory."""

    def __init__(self, application_type: ApplicationType = ApplicationType.DESKTOP) -> None:
        self.type = application_type
        self.writes: list[tuple[Priority, str, str]] = []

    def application_type(self) -> ApplicationType:
        return self.type

    def log(self, tag: str, message: str) -> None:
        self.writes.append((Priority.LOG, tag, message))

    def debug(self, tag: str, message: str) -> None:
        self.writes.append((Priority.DEBUG, tag, message))

    def error(self, tag: str, message: str) -> None:
        self.writes.append((Priority.ERROR, tag, message))

    @property
    def messages(self) -> list[str]:
        return [message for _, _, message in self.writes]


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def android_backend() -> RecordingBackend:
    return RecordingBackend(ApplicationType.ANDROID)


@pytest.fixture
def make_logger() -> Callable[..., GdxLogger]:
    """Build a logger over a backend with optional config overrides."""

    def _make(backend: HostBackend, **overrides: int) -> GdxLogger:
        return GdxLogger(backend, LoggerConfig(**overrides))

    return _make


@pytest.fixture
def unbound(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear the process-wide logger for the duration of a test."""
    monkeypatch.setattr(gdxlog.logger, "_instance", None)
