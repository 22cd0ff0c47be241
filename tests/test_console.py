"""Tests for CLI presentation helpers (console, domain table, logging)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from cx_cli.cli.console import CX_STYLES
from cx_cli.cli.domain_table import build_domain_table
from cx_cli.cli.logging_setup import LOGGER_NAME, configure_logging
from cx_cli.core.models import InvocationContext, MaskedDomain
from cx_cli.core.renderer import (
    BOOLEAN_STYLE,
    KEY_STYLE,
    MARKER_STYLE,
    NUMBER_STYLE,
    STRING_STYLE,
    TIMESTAMP_STYLE,
    TITLE_STYLE,
)


class TestTheme:
    def test_every_renderer_style_is_themed(self) -> None:
        for style in (
            TITLE_STYLE,
            KEY_STYLE,
            MARKER_STYLE,
            NUMBER_STYLE,
            BOOLEAN_STYLE,
            TIMESTAMP_STYLE,
            STRING_STYLE,
        ):
            assert style in CX_STYLES


class TestDomainTable:
    def test_rows_and_caption(self) -> None:
        table = build_domain_table(
            [
                MaskedDomain("a.com", "abcd...wxyz"),
                MaskedDomain("b.com", "********"),
            ],
        )
        assert table.row_count == 2
        assert table.caption == "Total domains: 2"
        assert [c.header for c in table.columns] == ["Domain", "API Key"]

        console = Console(width=100, record=True, color_system=None)
        console.print(table)
        text = console.export_text()
        assert "a.com" in text
        assert "abcd...wxyz" in text


class TestConfigureLogging:
    def test_level_follows_debug(self) -> None:
        assert configure_logging(InvocationContext(debug=True)).level == logging.DEBUG
        assert configure_logging(InvocationContext()).level == logging.WARNING

    def test_single_rich_handler_after_repeated_calls(self) -> None:
        configure_logging(InvocationContext())
        configure_logging(InvocationContext(debug=True))
        logger = logging.getLogger(LOGGER_NAME)
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
