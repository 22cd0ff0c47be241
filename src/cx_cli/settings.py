"""Runtime settings for cx-cli.

Values come from ``CX_CLI_*`` environment variables, validated by
pydantic-settings so that the CLI layer never parses env vars by hand.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_API_BASE_URL: str = "https://api.cloudonix.io"


def default_config_file() -> Path:
    """Return the per-user configuration file location."""
    return Path.home() / ".cx-cli" / "config.yaml"


class CxCliSettings(BaseSettings):
    """Central settings contract shared by the CLI and infra layers."""

    model_config = SettingsConfigDict(
        env_prefix="CX_CLI_",
        extra="ignore",
        case_sensitive=False,
    )

    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        min_length=8,
        description="Base URL of the Cloudonix REST API.",
    )
    config_file: Path = Field(
        default_factory=default_config_file,
        description="YAML file holding the configured domains and API keys.",
    )
