"""Custom exception hierarchy for cx-cli.

All exceptions that cross layer boundaries must inherit from
:class:`CxCliError`.  Raw third-party exceptions (httpx, PyYAML, OS
errors) must NEVER propagate beyond the infrastructure layer — they must
be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CxCliError
├── UsageError
├── ConfigurationError
│   └── DomainNotFoundError
├── ApiError
│   ├── ApiStatusError
│   ├── ApiUnreachableError
│   └── ApiRequestError
└── EnvironmentError
"""

from __future__ import annotations


class CxCliError(Exception):
    """Base exception for all cx-cli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Usage -----------------------------------------------------------------

class UsageError(CxCliError):
    """Raised when required options are missing or conflict."""


# --- Local configuration ---------------------------------------------------

class ConfigurationError(CxCliError):
    """Raised when the configuration file cannot be written or used."""


class DomainNotFoundError(ConfigurationError):
    """Raised when a domain is not present in the configuration."""

    def __init__(self, domain_name: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"Domain '{domain_name}' not found in configuration",
            hint=hint,
        )
        self.domain_name: str = domain_name


# --- Remote API ------------------------------------------------------------

class ApiError(CxCliError):
    """Base class for failures talking to the Cloudonix API."""


class ApiStatusError(ApiError):
    """Raised when the API responds with an error status code."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(f"API Error: {status_code} - {detail}", hint=hint)
        self.status_code: int = status_code


class ApiUnreachableError(ApiError):
    """Raised when no response could be obtained from the API."""


class ApiRequestError(ApiError):
    """Raised when a request cannot be built or its response is unusable."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CxCliError):
    """Raised when a required runtime dependency is not available."""
