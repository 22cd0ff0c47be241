"""cx-cli — command-line client for the Cloudonix telephony API.

Stores per-domain API keys locally and renders API resources as
colorized YAML, with a strict layered architecture.
"""

from cx_cli.version import __version__

__all__: list[str] = ["__version__"]
