"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import typer
from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape

from appveyor_evu.utils.errors import EvuError, OutputWriteError
from appveyor_evu.utils.logging import get_logger_with_context

if TYPE_CHECKING:
    from appveyor_evu.api.appveyor import AppVeyorClient
    from appveyor_evu.utils.config import EvuConfig

# Exit codes
EXIT_API_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_OUTPUT_ERROR = 3

# Shared console instance
console = Console()


def create_client(config: "EvuConfig") -> "AppVeyorClient":
    """Create an AppVeyor client from configuration."""
    from appveyor_evu.api.appveyor import AppVeyorClient

    return AppVeyorClient(base_url=config.api.base_url, timeout=config.api.timeout)


def warn(message: str) -> None:
    """Print a warning. The message is printed literally, never as markup."""
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def fail(error: EvuError | str, exit_code: int, hint: str | None = None) -> None:
    """Print an error and exit.

    Errors carrying a code are also logged at DEBUG with their details.

    Args:
        error: Error or message to display
        exit_code: Process exit code
        hint: Optional extra line explaining the failure
    """
    if isinstance(error, EvuError):
        info = error.to_error_info()
        get_logger_with_context("cli", code=info.code, **info.details).debug(
            "Command failed: %s", info.message
        )
        message = info.message
    else:
        message = error

    console.print(f"[red]Error:[/red] {escape(message)}")
    if hint:
        console.print(f"  [dim]{escape(hint)}[/dim]")
    raise typer.Exit(exit_code)


def output_json(data: dict[str, Any] | list[Any] | BaseModel, output: Path | None = None) -> None:
    """Output data as JSON to console or file.

    Args:
        data: Data to output (dict, list or Pydantic model)
        output: Optional output file path

    Raises:
        OutputWriteError: If the output file cannot be written
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(mode="json")
    elif isinstance(data, list):
        data = [d.model_dump(mode="json") if isinstance(d, BaseModel) else d for d in data]

    json_str = json.dumps(data, indent=2, default=str)

    if output:
        try:
            output.write_text(json_str, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(
                f"Could not write {output}: {e.strerror or e}", path=str(output)
            ) from e
        console.print(f"Written to {escape(str(output))}")
    else:
        console.print_json(json_str)
