"""Core resource service — validated access to Cloudonix documents.

The CLI layer consumes this service.  It depends on a
:class:`~cx_cli.core.protocols.ResourceFetcher` injected at construction
time (dependency inversion), keeping the core free of any HTTP imports.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* Only :class:`~cx_cli.exceptions.CxCliError` subclasses escape.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from cx_cli.core.models import Document, ResourceType
from cx_cli.core.protocols import ResourceFetcher
from cx_cli.exceptions import ApiRequestError, CxCliError, UsageError

_T = TypeVar("_T")


class ResourceService:
    """Stateless service fronting a :class:`ResourceFetcher`.

    Parameters
    ----------
    fetcher:
        Any object satisfying the :class:`ResourceFetcher` protocol.
    """

    def __init__(self, fetcher: ResourceFetcher) -> None:
        self._fetcher: ResourceFetcher = fetcher

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_domain(self, domain: str) -> Document:
        """Return the domain document for *domain*.

        Raises
        ------
        UsageError
            If *domain* is empty.
        ApiError
            If the backend request fails.
        """
        domain = self._require("domain", domain)
        return self._call(lambda: self._fetcher.fetch(domain))

    def get_resource(
        self,
        domain: str,
        resource_type: ResourceType,
        resource_id: str | None = None,
    ) -> Document:
        """Return one resource, or the whole collection when *resource_id* is ``None``."""
        domain = self._require("domain", domain)
        if resource_id is not None:
            resource_id = resource_id.strip() or None
        return self._call(
            lambda: self._fetcher.fetch(domain, resource_type, resource_id),
        )

    def get_session(self, domain: str, session_id: str) -> Document:
        """Return the call-session document *session_id* of *domain*."""
        domain = self._require("domain", domain)
        session_id = self._require("session", session_id)
        return self._call(lambda: self._fetcher.fetch_session(domain, session_id))

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _require(option: str, value: str | None) -> str:
        """Return *value* stripped, or raise :class:`UsageError` when blank."""
        stripped = (value or "").strip()
        if not stripped:
            raise UsageError(f"The --{option} option is required")
        return stripped

    # ------------------------------------------------------------------
    # Fetcher delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(operation: Callable[[], _T]) -> _T:
        """Run *operation* and ensure only our exceptions escape."""
        try:
            return operation()
        except CxCliError:
            raise
        except Exception as exc:
            raise ApiRequestError(f"Unexpected API client error: {exc}") from exc
