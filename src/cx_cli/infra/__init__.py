"""Infrastructure layer — external system integration.

This layer wraps all interaction with the Cloudonix HTTP API and the
local configuration file.  Every raw third-party exception must be
caught here and re-raised as a :class:`~cx_cli.exceptions.CxCliError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from cx_cli.infra.cloudonix_provider import CloudonixProvider
from cx_cli.infra.config_store import ConfigStore, mask_api_key

__all__: list[str] = [
    "CloudonixProvider",
    "ConfigStore",
    "mask_api_key",
]
