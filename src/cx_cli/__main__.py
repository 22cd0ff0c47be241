"""Allow ``python -m cx_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cx_cli`` behaves identically to the ``cx-cli`` console
script.
"""

from __future__ import annotations

from cx_cli.cli.app import cli

if __name__ == "__main__":
    cli()
