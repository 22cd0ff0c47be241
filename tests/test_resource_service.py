"""Tests for ResourceService (core/resource_service.py).

The fetcher is a ``MagicMock``; no HTTP is involved.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cx_cli.core.models import ResourceType
from cx_cli.core.resource_service import ResourceService
from cx_cli.exceptions import ApiRequestError, ApiStatusError, UsageError


def _make_service(return_value: object = None) -> tuple[ResourceService, MagicMock]:
    fetcher = MagicMock()
    fetcher.fetch.return_value = return_value
    fetcher.fetch_session.return_value = return_value
    return ResourceService(fetcher), fetcher


class TestGetDomain:
    def test_delegates_to_fetcher(self) -> None:
        service, fetcher = _make_service({"name": "example.com"})
        assert service.get_domain("example.com") == {"name": "example.com"}
        fetcher.fetch.assert_called_once_with("example.com")

    def test_domain_is_stripped(self) -> None:
        service, fetcher = _make_service({})
        service.get_domain("  example.com ")
        fetcher.fetch.assert_called_once_with("example.com")

    @pytest.mark.parametrize("domain", ["", "   "])
    def test_blank_domain_rejected(self, domain: str) -> None:
        service, fetcher = _make_service()
        with pytest.raises(UsageError, match="--domain option is required"):
            service.get_domain(domain)
        fetcher.fetch.assert_not_called()


class TestGetResource:
    def test_collection(self) -> None:
        service, fetcher = _make_service([])
        service.get_resource("example.com", ResourceType.TRUNKS)
        fetcher.fetch.assert_called_once_with("example.com", ResourceType.TRUNKS, None)

    def test_single_item(self) -> None:
        service, fetcher = _make_service({"id": 7})
        service.get_resource("example.com", ResourceType.APPLICATIONS, "7")
        fetcher.fetch.assert_called_once_with("example.com", ResourceType.APPLICATIONS, "7")

    def test_blank_id_means_collection(self) -> None:
        service, fetcher = _make_service([])
        service.get_resource("example.com", ResourceType.DNIDS, "  ")
        fetcher.fetch.assert_called_once_with("example.com", ResourceType.DNIDS, None)


class TestGetSession:
    def test_delegates_to_fetcher(self) -> None:
        service, fetcher = _make_service({"id": "s1"})
        assert service.get_session("example.com", "s1") == {"id": "s1"}
        fetcher.fetch_session.assert_called_once_with("example.com", "s1")

    def test_blank_session_rejected(self) -> None:
        service, fetcher = _make_service()
        with pytest.raises(UsageError, match="--session option is required"):
            service.get_session("example.com", "")
        fetcher.fetch_session.assert_not_called()


class TestErrorBoundary:
    def test_our_errors_propagate_unchanged(self) -> None:
        service, fetcher = _make_service()
        error = ApiStatusError(404, "Not Found")
        fetcher.fetch.side_effect = error
        with pytest.raises(ApiStatusError) as exc_info:
            service.get_domain("example.com")
        assert exc_info.value is error

    def test_foreign_errors_are_wrapped(self) -> None:
        service, fetcher = _make_service()
        fetcher.fetch_session.side_effect = RuntimeError("socket exploded")
        with pytest.raises(ApiRequestError, match="Unexpected API client error: socket exploded"):
            service.get_session("example.com", "s1")
