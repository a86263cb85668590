"""Shared pytest fixtures for packdec tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from packdec.config.settings import PackdecSettings
from packdec.services.encode import EncodeService
from packdec.services.telemetry import _current_span, disable_telemetry


@pytest.fixture(autouse=True)
def _clean_process_state(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Keep env vars, telemetry, and logging from leaking between tests."""
    for var in ("PACKDEC_CONFIG", "PACKDEC_ROOT", "PACKDEC_ENCODE__MAX_LENGTH"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pd_level = logging.getLogger("packdec").level
    yield
    disable_telemetry()
    _current_span.set(None)
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("packdec").setLevel(pd_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no stray packdec.toml is found.

    Use via ``@pytest.mark.usefixtures("isolated_root")`` on command tests.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(tmp_path: Path) -> PackdecSettings:
    """Default settings rooted at an empty temp directory."""
    return PackdecSettings.from_cli(root=tmp_path)


@pytest.fixture
def service(settings: PackdecSettings) -> EncodeService:
    """EncodeService with default settings."""
    return EncodeService(settings)
