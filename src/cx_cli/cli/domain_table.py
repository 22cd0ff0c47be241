"""Rich table listing the configured domains.

Pure presentation: receives already-masked entries and never sees a
full API key.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.table import Table

from cx_cli.cli.console import output
from cx_cli.core.models import MaskedDomain


def build_domain_table(domains: Sequence[MaskedDomain]) -> Table:
    """Build the ``display`` table for *domains*."""
    table = Table(
        title="Configured Domains",
        caption=f"Total domains: {len(domains)}",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Domain", style="cyan", min_width=30)
    table.add_column("API Key", min_width=12)

    for entry in domains:
        table.add_row(entry.domain_name, entry.masked_key)
    return table


def display_domains(domains: Sequence[MaskedDomain]) -> None:
    """Print the domain table to stdout."""
    output.print()
    output.print(build_domain_table(domains))
    output.print()
