"""Main CLI entry point for appveyor-evu."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from appveyor_evu.cli import compare, environments

app = typer.Typer(
    name="appveyor-evu",
    help="Compare environment variables across AppVeyor environments.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

# Register subcommands
app.command(name="compare")(compare.compare_cmd)
app.command(name="environments")(environments.environments_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only report errors"),
    verbosity: Optional[str] = typer.Option(
        None,
        "--verbosity",
        help="Logging verbosity: debug, info, warn, error, fatal or off. Default: warn.",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to a YAML configuration file",
    ),
) -> None:
    """
    appveyor-evu: compare environment variables across AppVeyor environments.

    - [bold]compare[/bold]: Build a variable-by-environment matrix
    - [bold]environments[/bold]: List the environments visible to a token
    """
    from appveyor_evu.cli.utils import EXIT_CONFIG_ERROR, fail
    from appveyor_evu.utils.config import load_config, set_config
    from appveyor_evu.utils.errors import ConfigurationError
    from appveyor_evu.utils.logging import configure_logging

    try:
        config = load_config(config_path)
    except ConfigurationError as e:
        fail(e, EXIT_CONFIG_ERROR)
    set_config(config)

    if verbose:
        level = "debug"
    elif quiet:
        level = "error"
    else:
        level = verbosity or config.logging.verbosity

    try:
        configure_logging(level=level, structured=config.logging.structured)
    except ValueError as e:
        fail(str(e), EXIT_CONFIG_ERROR)


@app.command()
def version() -> None:
    """Show the appveyor-evu version."""
    from appveyor_evu import __version__

    console.print(f"appveyor-evu version {__version__}")


if __name__ == "__main__":
    app()
