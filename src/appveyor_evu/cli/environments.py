"""CLI command for listing AppVeyor environments."""

from pathlib import Path
from typing import Optional

import typer

from appveyor_evu.cli.utils import (
    EXIT_API_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OUTPUT_ERROR,
    console,
    fail,
    output_json,
)


def environments_cmd(
    api_token: Optional[str] = typer.Option(
        None,
        "--api-token",
        envvar="APPVEYOR_API_TOKEN",
        help="An AppVeyor API token.",
        show_envvar=True,
    ),
    format: str = typer.Option(
        "terminal",
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (json only)",
    ),
) -> None:
    """
    List the environments visible to an API token.

    Example:
        appveyor-evu environments --api-token $TOKEN
    """
    from appveyor_evu.api.base import ApiError
    from appveyor_evu.cli.utils import create_client
    from appveyor_evu.renderers import TerminalRenderer
    from appveyor_evu.utils.config import get_config
    from appveyor_evu.utils.errors import (
        ConfigurationError,
        OutputWriteError,
        validate_api_token,
    )

    config = get_config()

    try:
        token = validate_api_token(config.resolve_token(api_token))
    except ConfigurationError as e:
        fail(e, EXIT_CONFIG_ERROR)

    if format not in ("terminal", "json"):
        fail(f"Invalid format: {format}", EXIT_CONFIG_ERROR)

    client = create_client(config)
    try:
        with console.status("Loading environments..."):
            environments = client.list_environments(token)
    except ApiError as e:
        fail(e, EXIT_API_ERROR, hint="Could not retrieve environments from AppVeyor.")

    if format == "json":
        try:
            output_json(environments, output)
        except OutputWriteError as e:
            fail(e, EXIT_OUTPUT_ERROR)
    else:
        TerminalRenderer(console).print_environments(environments)
