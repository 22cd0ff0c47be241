"""Logging configuration for the ``cx_cli`` logger hierarchy.

Modules log through ``logging.getLogger(__name__)``; this module attaches
a single Rich handler on stderr whose level follows the invocation's
debug option.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from cx_cli.cli.console import get_rich_console
from cx_cli.core.models import InvocationContext

LOGGER_NAME: str = "cx_cli"


def configure_logging(context: InvocationContext) -> logging.Logger:
    """Install the Rich handler and set the level from *context*.

    Safe to call more than once; earlier Rich handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=context.debug,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if context.debug else logging.WARNING)
    return logger
