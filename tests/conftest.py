"""Shared pytest fixtures and configuration for the cx-cli test suite.

Guidelines
----------
* No internet access in any test.
* httpx is stubbed with ``httpx.MockTransport`` at the infra boundary.
* Core tests must be pure — no side effects.
* The configuration file always lives under ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cx_cli.infra.config_store import ConfigStore


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``CX_CLI_CONFIG_FILE`` at a file inside *tmp_path*."""
    path = tmp_path / "cx-cli" / "config.yaml"
    monkeypatch.setenv("CX_CLI_CONFIG_FILE", str(path))
    monkeypatch.setenv("CX_CLI_API_BASE_URL", "https://api.test")
    return path


@pytest.fixture
def store(config_file: Path) -> ConfigStore:
    return ConfigStore(config_file)
