"""Error handling utilities for appveyor-evu."""

from __future__ import annotations

from typing import Any

from appveyor_evu.models.common import ErrorInfo


class EvuError(Exception):
    """Base exception for appveyor-evu."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_error_info(self) -> ErrorInfo:
        """Convert to ErrorInfo model."""
        return ErrorInfo(code=self.code, message=self.message, details=self.details)


class ConfigurationError(EvuError):
    """A required input or configuration value is missing or invalid."""

    def __init__(self, message: str, config_key: str | None = None):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class OutputWriteError(EvuError):
    """The comparison output could not be created or written."""

    def __init__(self, message: str, path: str | None = None):
        details = {"path": path} if path else {}
        super().__init__(message, code="IO_ERROR", details=details)


def validate_environment_names(names: list[str] | None) -> list[str]:
    """Validate the list of requested environment names.

    Names are returned as given: order and duplicates are preserved, and
    blank names are kept so they surface as unmatched.

    Args:
        names: Requested environment names

    Returns:
        The names

    Raises:
        ConfigurationError: If no names were given
    """
    if not names:
        raise ConfigurationError(
            "At least one environment name is required", config_key="environments"
        )

    return list(names)


def validate_api_token(token: str | None) -> str:
    """Validate an AppVeyor API token.

    Raises:
        ConfigurationError: If the token is missing or blank
    """
    if token is None or not token.strip():
        raise ConfigurationError(
            "An AppVeyor API token is required (--api-token or APPVEYOR_API_TOKEN)",
            config_key="api.token",
        )
    return token.strip()
