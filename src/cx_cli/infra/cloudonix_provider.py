"""httpx-backed implementation of :class:`~cx_cli.core.protocols.ResourceFetcher`.

This module is the **only** place in the codebase that talks HTTP.  All
httpx exceptions are caught here and re-raised as typed
:class:`~cx_cli.exceptions.ApiError` subclasses — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from cx_cli.core.models import Document, InvocationContext, ResourceType
from cx_cli.exceptions import (
    ApiRequestError,
    ApiStatusError,
    ApiUnreachableError,
)
from cx_cli.infra.config_store import mask_api_key
from cx_cli.settings import DEFAULT_API_BASE_URL

logger = logging.getLogger(__name__)

DOMAINS_PATH: str = "/customers/self/domains"


def _segment(value: str) -> str:
    return quote(value, safe="")


class CloudonixProvider:
    """Concrete :class:`ResourceFetcher` for the Cloudonix REST API.

    Usage::

        with CloudonixProvider(api_key, context=ctx) as provider:
            document = provider.fetch("example.com", ResourceType.TRUNKS)

    Parameters
    ----------
    api_key:
        Bearer token of the target domain.
    base_url:
        API root, normally taken from settings.
    context:
        Invocation options; request/response traffic is logged when
        ``context.debug`` is set.
    transport:
        Optional httpx transport, used by tests to stub the network.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_API_BASE_URL,
        context: InvocationContext | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key: str = api_key
        self._base_url: str = base_url.rstrip("/")
        self._context: InvocationContext = context or InvocationContext()
        self._transport: httpx.BaseTransport | None = transport
        self._client: httpx.Client | None = None

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> CloudonixProvider:
        return self

    def __exit__(self, *_args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client (idempotent)."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def _http(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                transport=self._transport,
            )
        return self._client

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def fetch(
        self,
        domain: str,
        resource_type: ResourceType | None = None,
        resource_id: str | None = None,
    ) -> Document:
        """GET a domain, one of its collections, or a single resource."""
        path = f"{DOMAINS_PATH}/{_segment(domain)}"
        if resource_type is not None:
            path += f"/{resource_type.value}"
            if resource_id:
                path += f"/{_segment(resource_id)}"
        return self._decode(self._get(path))

    def fetch_session(self, domain: str, session_id: str) -> Document:
        """GET a single call session."""
        path = f"{DOMAINS_PATH}/{_segment(domain)}/sessions/{_segment(session_id)}"
        return self._decode(self._get(path))

    def validate_domain(self, domain: str) -> bool:
        """Return ``True`` when the API key grants access to *domain*.

        Raises
        ------
        ApiError
            When the API rejects the request or cannot be reached.
        """
        response = self._get(f"{DOMAINS_PATH}/{_segment(domain)}")
        return response.status_code == 200

    # ------------------------------------------------------------------
    # Transport and exception mapping
    # ------------------------------------------------------------------

    def _get(self, path: str) -> httpx.Response:
        if self._context.debug:
            logger.debug(
                "REQUEST: GET %s%s (Authorization: Bearer %s)",
                self._base_url,
                path,
                mask_api_key(self._api_key),
            )
        try:
            response = self._http().get(path)
            self._log_response(response)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ApiStatusError(
                exc.response.status_code,
                self._error_detail(exc.response),
            ) from exc
        except (httpx.NetworkError, httpx.TimeoutException) as exc:
            logger.debug("No response received: %s", exc)
            raise ApiUnreachableError(
                "Network Error: Unable to reach Cloudonix API",
                hint="Check your network connection and the API base URL.",
            ) from exc
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.debug("Request setup failed: %s", exc)
            raise ApiRequestError(f"Error: {exc}") from exc
        return response

    def _log_response(self, response: httpx.Response) -> None:
        if not self._context.debug:
            return
        logger.debug(
            "RESPONSE: %s %s\n%s",
            response.status_code,
            response.reason_phrase,
            response.text,
        )

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Prefer the server-provided message, else the reason phrase."""
        try:
            body: Any = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return response.reason_phrase or "Unknown error"

    @staticmethod
    def _decode(response: httpx.Response) -> Document:
        if not response.content:
            return None
        try:
            document: Document = response.json()
        except ValueError as exc:
            raise ApiRequestError(
                "Error: API returned a response that is not valid JSON",
            ) from exc
        return document
