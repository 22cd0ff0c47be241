"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from cx_cli.core.models import Document, ResourceType


class ResourceFetcher(Protocol):
    """Contract for Cloudonix API backends.

    Any object implementing these methods with the correct signatures
    satisfies this protocol structurally (no explicit inheritance
    required).  Implementations must map all backend-specific exceptions
    to :class:`~cx_cli.exceptions.ApiError` subclasses.
    """

    def fetch(
        self,
        domain: str,
        resource_type: ResourceType | None = None,
        resource_id: str | None = None,
    ) -> Document:
        """Fetch a domain, a resource collection, or a single resource.

        Raises
        ------
        ApiStatusError
            When the API answers with an error status.
        ApiUnreachableError
            When the API cannot be reached.
        ApiRequestError
            When the request cannot be built or the body is not JSON.
        """
        ...  # pragma: no cover

    def fetch_session(self, domain: str, session_id: str) -> Document:
        """Fetch a single call session of *domain*."""
        ...  # pragma: no cover
