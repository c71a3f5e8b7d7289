"""Utility functions for appveyor-evu."""

from appveyor_evu.utils.logging import configure_logging, get_logger, get_logger_with_context
from appveyor_evu.utils.errors import (
    EvuError,
    ConfigurationError,
    OutputWriteError,
    validate_api_token,
    validate_environment_names,
)
from appveyor_evu.utils.config import (
    EvuConfig,
    ApiConfig,
    OutputConfig,
    LoggingConfig,
    load_config,
    save_config,
    get_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "EvuError",
    "ConfigurationError",
    "OutputWriteError",
    "validate_api_token",
    "validate_environment_names",
    # Config
    "EvuConfig",
    "ApiConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "save_config",
    "get_config",
    "set_config",
]
