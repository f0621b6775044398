"""Shared pytest fixtures and test helpers for emailcheck tests."""

from __future__ import annotations

import io
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from emailcheck.config.settings import EmailCheckSettings


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no EMAILCHECK_* env vars.

    Keeps a developer's own emailcheck.toml or environment from leaking
    into settings discovery.
    """
    import os

    for key in list(os.environ):
        if key.startswith("EMAILCHECK_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test (the CLI reconfigures it)."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("emailcheck")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> EmailCheckSettings:
    """Default settings with no config file."""
    return EmailCheckSettings.from_cli(search_root=tmp_path)


class EchoRecorder:
    """Collects everything a service writes through its ``echo`` callable."""

    def __init__(self) -> None:
        self.buffer = io.StringIO()

    def __call__(self, message: str = "", nl: bool = True) -> None:
        self.buffer.write(message)
        if nl:
            self.buffer.write("\n")

    @property
    def text(self) -> str:
        return self.buffer.getvalue()


@pytest.fixture
def echo() -> EchoRecorder:
    return EchoRecorder()
