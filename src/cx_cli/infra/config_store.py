"""Infrastructure: YAML-backed store of domain credentials.

The whole file is read into a :class:`~cx_cli.core.models.ConfigurationFile`,
mutated in memory and written back whole.  There is no locking; the
last writer wins.

Persisted form::

    domains:
      example.com:
        apiKey: XI0123456789abcdef

Rules
-----
* A missing, empty or malformed file loads as an empty store and is
  logged, never fatal.
* Top-level keys, extra domain fields and entries that could not be
  read are written back unchanged.
* Writes go to a temporary sibling file that then replaces the target.
* OS errors while writing are re-raised as
  :class:`~cx_cli.exceptions.ConfigurationError`.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import yaml

from cx_cli.core.models import ConfigurationFile, DomainRecord, MaskedDomain
from cx_cli.exceptions import ConfigurationError, DomainNotFoundError

logger = logging.getLogger(__name__)

MASK_PLACEHOLDER: str = "********"
_VISIBLE_CHARS = 4


def mask_api_key(api_key: str) -> str:
    """Return a display-safe form of *api_key*.

    Keys longer than 8 characters keep their first and last four
    characters around an ellipsis; shorter keys are fully masked.
    """
    if len(api_key) > 2 * _VISIBLE_CHARS:
        return f"{api_key[:_VISIBLE_CHARS]}...{api_key[-_VISIBLE_CHARS:]}"
    return MASK_PLACEHOLDER


def _read_api_key(entry: Any) -> str | None:
    """Return the entry's ``apiKey`` as text; all-digit keys load as numbers."""
    api_key = entry.get("apiKey") if isinstance(entry, dict) else None
    if isinstance(api_key, bool) or not isinstance(api_key, (str, int, float)):
        return None
    return str(api_key)


def _merge_entry(entry: Any, record: DomainRecord) -> dict[str, Any]:
    fields: dict[str, Any] = dict(entry) if isinstance(entry, dict) else {}
    if _read_api_key(fields) != record.api_key:
        fields["apiKey"] = record.api_key
    return fields


class ConfigStore:
    """Durable mapping from domain name to :class:`DomainRecord`.

    Parameters
    ----------
    path:
        Location of the YAML configuration file.  Its parent directory
        is created on first use.
    """

    def __init__(self, path: Path) -> None:
        self._path: Path = path

    @property
    def path(self) -> Path:
        return self._path

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _ensure_directory(self) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigurationError(
                f"Cannot create configuration directory {self._path.parent}: {exc}",
            ) from exc

    def load(self) -> ConfigurationFile:
        """Read the configuration file, degrading to an empty store."""
        self._ensure_directory()
        if not self._path.exists():
            return ConfigurationFile()

        try:
            raw: Any = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            logger.warning("Error loading configuration from %s: %s", self._path, exc)
            return ConfigurationFile()

        return self._parse(raw)

    def _parse(self, raw: Any) -> ConfigurationFile:
        if raw is None:
            return ConfigurationFile()
        if not isinstance(raw, dict):
            logger.warning("Ignoring configuration %s: top level is not a mapping", self._path)
            return ConfigurationFile()

        domains: Any = raw.get("domains") or {}
        if not isinstance(domains, dict):
            logger.warning("Ignoring configuration %s: 'domains' is not a mapping", self._path)
            return ConfigurationFile(source=raw)

        config = ConfigurationFile(source=raw)
        unreadable: set[str] = set()
        for name, entry in domains.items():
            api_key = _read_api_key(entry)
            if api_key is None:
                logger.warning("Skipping domain %r: no apiKey in configuration", name)
                unreadable.add(str(name))
                continue
            config.domains[str(name)] = DomainRecord(domain_name=str(name), api_key=api_key)
        config.unreadable = frozenset(unreadable)
        return config

    @staticmethod
    def _serialize(config: ConfigurationFile) -> dict[str, Any]:
        """Rebuild the loaded document with only the domain keys changed."""
        document = dict(config.source)
        stored: Any = document.get("domains")
        if not isinstance(stored, dict):
            stored = {}

        domains: dict[str, Any] = {}
        for name, entry in stored.items():
            key = str(name)
            if key in config.domains:
                domains[key] = _merge_entry(entry, config.domains[key])
            elif key in config.unreadable:
                domains[key] = entry
        for name, record in config.domains.items():
            if name not in domains:
                domains[name] = {"apiKey": record.api_key}

        document["domains"] = domains
        return document

    def save(self, config: ConfigurationFile) -> None:
        """Replace the configuration file with *config*."""
        self._ensure_directory()
        text = yaml.safe_dump(
            self._serialize(config),
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=self._path.parent,
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise ConfigurationError(
                f"Error saving configuration to {self._path}: {exc}",
            ) from exc

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get(self, domain_name: str) -> DomainRecord:
        """Return the stored record for *domain_name*.

        Raises
        ------
        DomainNotFoundError
            If the domain has not been configured.
        """
        record = self.load().domains.get(domain_name)
        if record is None:
            raise DomainNotFoundError(
                domain_name,
                hint="Use 'cx-cli configure' to add it.",
            )
        return record

    def add_or_update(self, domain_name: str, api_key: str) -> DomainRecord:
        """Store *api_key* for *domain_name*, overwriting any previous key."""
        config = self.load()
        record = DomainRecord(domain_name=domain_name, api_key=api_key)
        config.domains[domain_name] = record
        self.save(config)
        logger.debug("Stored credentials for domain %r in %s", domain_name, self._path)
        return record

    def remove(self, domain_name: str) -> None:
        """Delete *domain_name*, keeping every other entry.

        Raises
        ------
        DomainNotFoundError
            If the domain is absent; the file is left untouched.
        """
        config = self.load()
        if domain_name not in config:
            raise DomainNotFoundError(domain_name)
        del config.domains[domain_name]
        self.save(config)
        logger.debug("Removed domain %r from %s", domain_name, self._path)

    def list_masked(self) -> tuple[MaskedDomain, ...]:
        """Return every configured domain with its key masked for display."""
        return tuple(
            MaskedDomain(domain_name=name, masked_key=mask_api_key(record.api_key))
            for name, record in self.load().domains.items()
        )
