"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from cx_cli.core.models import (
    ConfigurationFile,
    Document,
    DomainRecord,
    InvocationContext,
    MaskedDomain,
    ResourceType,
)
from cx_cli.core.protocols import ResourceFetcher
from cx_cli.core.renderer import prepare_document, present, render_document
from cx_cli.core.resource_service import ResourceService

__all__: list[str] = [
    "ConfigurationFile",
    "Document",
    "DomainRecord",
    "InvocationContext",
    "MaskedDomain",
    "ResourceFetcher",
    "ResourceService",
    "ResourceType",
    "prepare_document",
    "present",
    "render_document",
]
