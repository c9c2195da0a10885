"""Shared pytest fixtures for bigsum tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bigsum.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_telemetry_state() -> Generator[None]:
    """``-v`` enables telemetry for the whole thread; switch it off after each test."""
    yield
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """Drop handlers bound to a CliRunner's stderr once the test is over."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    bigsum_level = logging.getLogger("bigsum").level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    logging.getLogger("bigsum").setLevel(bigsum_level)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp dir so no stray bigsum.toml or env var is picked up.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("BIGSUM_CONFIG", "BIGSUM_QUIET", "BIGSUM_JSON_OUTPUT", "BIGSUM_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
