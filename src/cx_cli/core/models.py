"""Domain models for cx-cli.

Value objects are **frozen** dataclasses with no behaviour beyond data
access.  The only mutable model is :class:`ConfigurationFile`, which the
configuration store reads, mutates in memory and writes back whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

# ---------------------------------------------------------------------------
# API documents
# ---------------------------------------------------------------------------

Scalar = Union[str, int, float, bool, None]
"""Leaf value of a JSON-shaped document."""

Document = Union[Scalar, list["Document"], dict[str, "Document"]]
"""Schema-less API response: a scalar, a sequence, or a mapping."""


# ---------------------------------------------------------------------------
# Invocation context
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InvocationContext:
    """Per-command options threaded explicitly through the call chain."""

    debug: bool = False
    """Log API traffic and intermediate documents when ``True``."""


# ---------------------------------------------------------------------------
# Stored credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DomainRecord:
    """Credentials for one Cloudonix domain."""

    domain_name: str
    """Tenant identifier, unique within the configuration."""

    api_key: str
    """Bearer token used for every request against this domain."""


@dataclass(slots=True)
class ConfigurationFile:
    """In-memory image of the persisted configuration file.

    Mapping keys guarantee domain-name uniqueness.  An absent file is
    represented by an empty mapping.
    """

    domains: dict[str, DomainRecord] = field(default_factory=dict)

    source: dict[str, Any] = field(default_factory=dict)
    """Document as read from disk.  Keys and fields this model does not
    know about, and domain entries that could not be read, are written
    back from here unchanged."""

    unreadable: frozenset[str] = frozenset()
    """Names of domain entries kept in :attr:`source` but not loaded."""

    def __len__(self) -> int:
        return len(self.domains)

    def __contains__(self, domain_name: object) -> bool:
        return domain_name in self.domains


@dataclass(frozen=True, slots=True)
class MaskedDomain:
    """Display-only projection of a :class:`DomainRecord`."""

    domain_name: str
    masked_key: str


# ---------------------------------------------------------------------------
# Remote resources
# ---------------------------------------------------------------------------

class ResourceType(str, Enum):
    """Sub-resources of a domain exposed by the API."""

    SUBSCRIBERS = "subscribers"
    APPLICATIONS = "applications"
    TRUNKS = "trunks"
    DNIDS = "dnids"

    @property
    def noun(self) -> str:
        """Singular display noun, e.g. ``"Subscriber"`` or ``"DNID"``."""
        if self is ResourceType.DNIDS:
            return "DNID"
        return self.value[:-1].capitalize()

    @property
    def plural(self) -> str:
        """Plural display noun, e.g. ``"Subscribers"`` or ``"DNIDs"``."""
        return f"{self.noun}s"
