"""Tests for environment-driven settings (settings.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from cx_cli.exceptions import ConfigurationError
from cx_cli.settings import DEFAULT_API_BASE_URL, CxCliSettings, default_config_file


class TestCxCliSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CX_CLI_API_BASE_URL", raising=False)
        monkeypatch.delenv("CX_CLI_CONFIG_FILE", raising=False)

        settings = CxCliSettings()

        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.config_file == default_config_file()

    def test_default_file_under_home(self) -> None:
        assert default_config_file() == Path.home() / ".cx-cli" / "config.yaml"

    def test_environment_overrides(self, config_file: Path) -> None:
        settings = CxCliSettings()
        assert settings.api_base_url == "https://api.test"
        assert settings.config_file == config_file

    def test_invalid_value_is_configuration_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from cx_cli.cli.app import main

        monkeypatch.setenv("CX_CLI_API_BASE_URL", "x")
        with pytest.raises(ConfigurationError, match="CX_CLI_"):
            main(["display"])
