"""Command handlers for the cx-cli sub-commands.

Each handler receives the parsed arguments, the invocation context and
the runtime settings, performs one flow to completion and returns an
exit code.  Failures are raised as :class:`~cx_cli.exceptions.CxCliError`
subclasses and rendered by the error boundary in :mod:`cx_cli.cli.app`.

Usage errors are raised before the configuration file or the network is
touched.
"""

from __future__ import annotations

import argparse
import logging
import sys

from cx_cli.cli import exit_codes
from cx_cli.cli.console import console, output
from cx_cli.cli.domain_table import display_domains
from cx_cli.cli.prompts import prompt_api_key
from cx_cli.core.models import Document, InvocationContext, ResourceType
from cx_cli.core.renderer import present, resource_title, session_title
from cx_cli.core.reorganizer import log_only_view
from cx_cli.core.resource_service import ResourceService
from cx_cli.exceptions import ApiError, ConfigurationError, UsageError
from cx_cli.infra.cloudonix_provider import CloudonixProvider
from cx_cli.infra.config_store import ConfigStore
from cx_cli.settings import CxCliSettings

logger = logging.getLogger(__name__)

RESOURCE_OPTIONS: tuple[tuple[str, ResourceType], ...] = (
    ("subscriber", ResourceType.SUBSCRIBERS),
    ("application", ResourceType.APPLICATIONS),
    ("trunk", ResourceType.TRUNKS),
    ("dnid", ResourceType.DNIDS),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _require(option: str, value: str | None) -> str:
    stripped = (value or "").strip()
    if not stripped:
        raise UsageError(f"The --{option} option is required")
    return stripped


def _store(settings: CxCliSettings) -> ConfigStore:
    return ConfigStore(settings.config_file)


def _provider(
    api_key: str,
    context: InvocationContext,
    settings: CxCliSettings,
) -> CloudonixProvider:
    return CloudonixProvider(
        api_key,
        base_url=settings.api_base_url,
        context=context,
    )


def _selected_resource(args: argparse.Namespace) -> tuple[ResourceType, str | None] | None:
    """Return the single requested resource flag, if any.

    A flag given without a value selects the whole collection.
    """
    selected = [
        (resource_type, getattr(args, option))
        for option, resource_type in RESOURCE_OPTIONS
        if getattr(args, option, None) is not None
    ]
    if len(selected) > 1:
        raise UsageError(
            "Cannot specify multiple resource options "
            "(--subscriber, --application, --trunk, --dnid) simultaneously",
        )
    if not selected:
        return None
    resource_type, resource_id = selected[0]
    return resource_type, (resource_id or None)


def _print_document(document: Document, title: str, context: InvocationContext) -> None:
    output.print()
    output.print(present(document, title, context), soft_wrap=True)


# ---------------------------------------------------------------------------
# configure
# ---------------------------------------------------------------------------

def handle_configure(
    args: argparse.Namespace,
    context: InvocationContext,
    settings: CxCliSettings,
) -> int:
    """Validate an API key against the API, then store it."""
    domain = _require("domain", args.domain)
    api_key = (args.apikey or "").strip()
    if not api_key:
        if not sys.stdin.isatty():
            raise UsageError("Both --domain and --apikey options are required")
        api_key = prompt_api_key(domain)

    console.print(f"Validating domain '{domain}'...")
    try:
        with _provider(api_key, context, settings) as provider:
            valid = provider.validate_domain(domain)
    except ApiError as exc:
        raise ConfigurationError(
            f"Failed to validate domain '{domain}'. {exc}",
            hint=exc.hint or "Please check the domain name and API key.",
        ) from exc
    if not valid:
        raise ConfigurationError(
            f"Failed to validate domain '{domain}'.",
            hint="Please check the domain name and API key.",
        )
    console.print(f"[green]Domain '{domain}' validated successfully.[/green]")

    _store(settings).add_or_update(domain, api_key)
    console.print(f"[bold green]Domain '{domain}' configured successfully.[/bold green]")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# delete
# ---------------------------------------------------------------------------

def handle_delete(
    args: argparse.Namespace,
    context: InvocationContext,
    settings: CxCliSettings,
) -> int:
    """Remove a domain from the configuration."""
    domain = _require("domain", args.domain)
    logger.debug("Attempting to delete domain %r from configuration", domain)

    _store(settings).remove(domain)
    console.print(f"Domain '{domain}' has been removed from configuration")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# display
# ---------------------------------------------------------------------------

def handle_display(
    args: argparse.Namespace,
    context: InvocationContext,
    settings: CxCliSettings,
) -> int:
    """List the configured domains with masked API keys."""
    store = _store(settings)
    logger.debug("Loading configuration for display from %s", store.path)

    domains = store.list_masked()
    if not domains:
        console.print("No domains are currently configured")
        return exit_codes.SUCCESS

    display_domains(domains)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# get
# ---------------------------------------------------------------------------

def handle_get(
    args: argparse.Namespace,
    context: InvocationContext,
    settings: CxCliSettings,
) -> int:
    """Show a domain or one of its resource collections/items."""
    domain = _require("domain", args.domain)
    selected = _selected_resource(args)

    record = _store(settings).get(domain)
    with _provider(record.api_key, context, settings) as provider:
        service = ResourceService(provider)
        if selected is None:
            document = service.get_domain(domain)
            title = resource_title(domain)
        else:
            resource_type, resource_id = selected
            logger.debug(
                "Retrieving %s for domain %r%s",
                resource_type.value,
                domain,
                f" (id {resource_id!r})" if resource_id else " (all)",
            )
            document = service.get_resource(domain, resource_type, resource_id)
            title = resource_title(domain, resource_type, resource_id)

    _print_document(document, title, context)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# call
# ---------------------------------------------------------------------------

def handle_call(
    args: argparse.Namespace,
    context: InvocationContext,
    settings: CxCliSettings,
) -> int:
    """Show a call session, or only its log with ``--log``."""
    domain = _require("domain", args.domain)
    session_id = _require("session", args.session)
    logger.debug("Log only mode: %s", "enabled" if args.log else "disabled")

    record = _store(settings).get(domain)
    with _provider(record.api_key, context, settings) as provider:
        document = ResourceService(provider).get_session(domain, session_id)

    if args.log:
        log_view = log_only_view(document)
        if log_view is None:
            console.print("[yellow]Warning: No log object found in the session data[/yellow]")
        else:
            document = log_view

    _print_document(document, session_title(document), context)
    return exit_codes.SUCCESS
