"""Structured logging utilities."""

import logging
import sys
from typing import Any

# Verbosity names accepted on the command line, mapped to logging levels
VERBOSITY_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log messages."""

    def format(self, record: logging.LogRecord) -> str:
        # Add extra fields if present
        extra = ""
        if hasattr(record, "extra_fields"):
            fields = getattr(record, "extra_fields")
            if fields:
                extra = " " + " ".join(f"{k}={v}" for k, v in fields.items())

        message = super().format(record)
        return f"{message}{extra}"


def resolve_level(level: str | int) -> int:
    """Resolve a verbosity name or logging level to a numeric level.

    Raises:
        ValueError: If the name is not a known verbosity
    """
    if isinstance(level, int):
        return level
    try:
        return VERBOSITY_LEVELS[level.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown verbosity {level!r}; expected one of: "
            + ", ".join(sorted(VERBOSITY_LEVELS))
        ) from None


def configure_logging(
    level: str | int = "WARN",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Configure logging for appveyor-evu.

    Args:
        level: Verbosity (debug, info, warn, error, fatal, off) or logging level
        format_string: Custom format string
        structured: Use structured logging format
    """
    if format_string is None:
        if structured:
            format_string = "%(asctime)s %(levelname)s %(name)s %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(sys.stderr)

    if structured:
        handler.setFormatter(StructuredFormatter(format_string))
    else:
        handler.setFormatter(logging.Formatter(format_string))

    logger = logging.getLogger("appveyor_evu")
    logger.setLevel(resolve_level(level))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an appveyor-evu module.

    Args:
        name: Module name (will be prefixed with appveyor_evu)

    Returns:
        Configured logger
    """
    if not name.startswith("appveyor_evu"):
        name = f"appveyor_evu.{name}"
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds extra fields to log messages."""

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra["extra_fields"] = self.extra
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> LoggerAdapter:
    """Get a logger with additional context fields.

    Args:
        name: Module name
        **context: Context fields to include in all log messages

    Returns:
        LoggerAdapter with context
    """
    logger = get_logger(name)
    return LoggerAdapter(logger, context)
