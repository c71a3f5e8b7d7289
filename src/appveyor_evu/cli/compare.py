"""CLI command for comparing environment variables across environments."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.markup import escape
from rich.panel import Panel

from appveyor_evu.cli.utils import (
    EXIT_API_ERROR,
    EXIT_CONFIG_ERROR,
    EXIT_OUTPUT_ERROR,
    console,
    fail,
    warn,
)


def compare_cmd(
    api_token: Optional[str] = typer.Option(
        None,
        "--api-token",
        envvar="APPVEYOR_API_TOKEN",
        help="An AppVeyor API token.",
        show_envvar=True,
    ),
    environments: Optional[List[str]] = typer.Option(
        None,
        "--environment",
        "-e",
        help="An AppVeyor environment name. Repeat for each environment.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        "--output-csv-location",
        help="The location in which to output environment variables.",
    ),
    format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (csv, tsv, markdown). Defaults to csv.",
    ),
    show: bool = typer.Option(
        False,
        "--show",
        help="Also print the matrix to the terminal",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Build the matrix but do not write the output file",
    ),
) -> None:
    """
    Compare environment variables across AppVeyor environments.

    Produces a matrix with one row per variable and one column per
    environment. Columns follow the order AppVeyor lists the environments.

    Example:
        appveyor-evu compare --api-token $TOKEN -e Dev -e QA -o compare.csv
    """
    from appveyor_evu.api.base import ApiError
    from appveyor_evu.cli.utils import create_client
    from appveyor_evu.core.selector import describe_names
    from appveyor_evu.core.session import ComparisonSession
    from appveyor_evu.renderers import TerminalRenderer, get_writer
    from appveyor_evu.utils.config import get_config
    from appveyor_evu.utils.errors import (
        EvuError,
        OutputWriteError,
        validate_api_token,
        validate_environment_names,
    )

    config = get_config()

    # Validate required inputs before touching the API
    try:
        token = validate_api_token(config.resolve_token(api_token))
        names = config.resolve_names(validate_environment_names(environments))
        if output is None and not dry_run:
            fail("An output location is required (--output)", EXIT_CONFIG_ERROR)
        writer = get_writer(format or config.output.default_format)
    except ValueError as e:
        fail(str(e), EXIT_CONFIG_ERROR)
    except EvuError as e:
        fail(e, EXIT_CONFIG_ERROR)

    client = create_client(config)
    session = ComparisonSession(client, client, writer)

    try:
        with console.status("Comparing environments..."):
            if dry_run:
                report = session.build_report(token, names)
            else:
                report = session.compare(token, names, output)
    except ApiError as e:
        fail(e, EXIT_API_ERROR, hint="Could not retrieve environments from AppVeyor.")
    except OutputWriteError as e:
        fail(
            e,
            EXIT_OUTPUT_ERROR,
            hint="The matrix was computed but could not be written.",
        )

    selection = report.selection
    if selection.has_mismatch:
        warn(
            f"Environments not found: {describe_names(selection.unmatched)}. "
            "Continuing with found environments."
        )

    for warning in report.matrix.warnings:
        warn(warning)

    if show:
        TerminalRenderer(console).print_matrix(report.matrix)

    summary = (
        f"[bold]Environments:[/bold] {len(report.matrix.column_headers)}\n"
        f"[bold]Variables:[/bold] {len(report.matrix.rows)}\n"
        f"[bold]Differing:[/bold] {len(report.matrix.differing_rows())}"
    )
    console.print(Panel(summary, title="Comparison"))

    if report.written:
        console.print(f"Matrix written to {escape(str(report.output_path))}")
