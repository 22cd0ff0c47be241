"""Rich consoles shared by the CLI layer.

Two consoles are exposed: :data:`console` writes status and error
messages to stderr, :data:`output` writes rendered documents to stdout
so that command output can be piped.  Both use :data:`CX_STYLES`, which
maps the style names emitted by :mod:`cx_cli.core.renderer` to colours.

Rich is imported lazily so that the error boundary can still report a
failure when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any

from cx_cli.exceptions import EnvironmentError

CX_STYLES: dict[str, str] = {
    "cx.title": "bold blue",
    "cx.key": "cyan",
    "cx.marker": "yellow",
    "cx.number": "yellow",
    "cx.boolean": "magenta",
    "cx.timestamp": "green",
    "cx.string": "bright_green",
}


def _load_rich() -> tuple[type[Any], type[Any]]:
    """Return ``(Console, Theme)`` from rich or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
        from rich.theme import Theme
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console, Theme


def get_rich_console(*, stderr: bool = True) -> Any:
    """Create a themed Rich console targeting stderr or stdout."""
    console_class, theme_class = _load_rich()
    return console_class(stderr=stderr, theme=theme_class(CX_STYLES), highlight=False)


class _ConsoleProxy:
    """``print``-compatible proxy that builds its console on each call.

    Deferring construction keeps output bound to the current
    ``sys.stdout``/``sys.stderr``, which pytest's capture replaces.
    Without rich the objects are printed as plain text.
    """

    def __init__(self, *, stderr: bool) -> None:
        self._stderr: bool = stderr

    def print(self, *objects: object, **kwargs: Any) -> None:
        try:
            rich_console = get_rich_console(stderr=self._stderr)
        except EnvironmentError:
            print(
                *objects,
                sep=kwargs.get("sep", " "),
                end=kwargs.get("end", "\n"),
                file=sys.stderr if self._stderr else sys.stdout,
            )
            return
        rich_console.print(*objects, **kwargs)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
