"""Process exit codes returned by the cx-cli commands.

Every exit path goes through one of these names so that scripts
wrapping ``cx-cli`` can rely on stable values.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command completed."""

GENERAL_ERROR: int = 1
"""A CxCliError (usage, configuration or API failure) was reported."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the CxCliError hierarchy reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
