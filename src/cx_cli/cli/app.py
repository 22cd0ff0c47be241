"""CLI application entry point and command routing for cx-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cx_cli.exceptions.CxCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the command
  handlers, which drive the core and infrastructure layers.
* The ``--debug`` option becomes an
  :class:`~cx_cli.core.models.InvocationContext` passed down explicitly.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from pydantic import ValidationError

from cx_cli.cli import exit_codes
from cx_cli.cli.console import console
from cx_cli.core.models import InvocationContext
from cx_cli.exceptions import ConfigurationError, CxCliError
from cx_cli.settings import CxCliSettings
from cx_cli.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_resource_option(
    parser: argparse.ArgumentParser,
    name: str,
    label: str,
) -> None:
    parser.add_argument(
        f"--{name}",
        nargs="?",
        const="",
        default=None,
        metavar=f"{name.upper()}_ID",
        help=(
            f"Get {label} information. If no {label} ID is provided, "
            f"get all {label}s."
        ),
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser and its sub-commands."""
    parser = argparse.ArgumentParser(
        prog="cx-cli",
        description="Cloudonix CLI tool for managing accounts and resources.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode to show API requests and responses.",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    configure = subparsers.add_parser(
        "configure",
        help="Configure a Cloudonix domain with API key.",
    )
    configure.add_argument("--domain", help="Domain name.")
    configure.add_argument("--apikey", help="API key for the domain.")
    configure.set_defaults(handler="handle_configure")

    delete = subparsers.add_parser(
        "delete",
        help="Delete a domain from the configuration.",
    )
    delete.add_argument("--domain", help="Domain name to delete.")
    delete.set_defaults(handler="handle_delete")

    display = subparsers.add_parser(
        "display",
        help="Display all configured domains.",
    )
    display.set_defaults(handler="handle_display")

    get = subparsers.add_parser(
        "get",
        help=(
            "Get detailed information about a domain, its subscribers, "
            "applications, trunks, or DNIDs."
        ),
    )
    get.add_argument("--domain", help="Domain name.")
    _add_resource_option(get, "subscriber", "subscriber")
    _add_resource_option(get, "application", "application")
    _add_resource_option(get, "trunk", "trunk")
    _add_resource_option(get, "dnid", "DNID")
    get.set_defaults(handler="handle_get")

    call = subparsers.add_parser(
        "call",
        help="Get detailed information about a call session.",
    )
    call.add_argument("--domain", help="Domain name.")
    call.add_argument("--session", metavar="SESSION_ID", help="ID of the call session to retrieve.")
    call.add_argument(
        "--log",
        action="store_true",
        help="Show only the log object from the response.",
    )
    call.set_defaults(handler="handle_call")

    return parser


def _load_settings() -> CxCliSettings:
    """Read ``CX_CLI_*`` settings, mapping validation failures to our errors."""
    try:
        return CxCliSettings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid CX_CLI_* environment settings: {exc.error_count()} error(s)",
            hint=str(exc),
        ) from exc


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cx-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    context = InvocationContext(debug=args.debug)

    # Lazy imports keep --help and --version usable without rich installed.
    from cx_cli.cli import commands
    from cx_cli.cli.logging_setup import configure_logging

    configure_logging(context)
    settings = _load_settings()

    return getattr(commands, args.handler)(args, context, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.  Messages are
    printed with markup disabled so that they appear verbatim.
    """
    try:
        code = main()
        sys.exit(code)
    except CxCliError as exc:
        console.print("[bold red]Error:[/bold red]", end=" ")
        console.print(str(exc), markup=False)
        if exc.hint:
            console.print("[yellow]Hint:[/yellow]", end=" ")
            console.print(exc.hint, markup=False)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] Please report this issue."
        )
        console.print(f"  {type(exc).__name__}: {exc}", markup=False)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
