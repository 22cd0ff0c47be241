"""Interactive prompts for the CLI layer.

Only used when a required secret is missing and stdin is a terminal;
scripted invocations never block on input.
"""

from __future__ import annotations

from typing import Any

from cx_cli.exceptions import EnvironmentError, UsageError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive input."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


def prompt_api_key(domain: str) -> str:
    """Ask for the API key of *domain* without echoing it.

    Raises
    ------
    UsageError
        If the prompt is cancelled or left empty.
    """
    questionary = _import_questionary()

    answer: str | None = questionary.password(
        f"API key for domain '{domain}':",
    ).ask()  # Returns None on Ctrl+C / Esc

    if not answer or not answer.strip():
        raise UsageError(
            "No API key entered.",
            hint="Pass the key with --apikey to skip the prompt.",
        )
    return answer.strip()
