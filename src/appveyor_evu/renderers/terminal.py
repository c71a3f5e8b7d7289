"""Rich terminal renderer for matrices and environment listings."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from appveyor_evu.models.environment import EnvironmentSummary
from appveyor_evu.models.matrix import VariableMatrix

ABSENT_MARKER = "[dim](absent)[/dim]"
EMPTY_MARKER = '[dim]""[/dim]'


class TerminalRenderer:
    """Renders comparison output as Rich tables.

    Unlike the file writers, the terminal view keeps absent and empty cells
    apart: absent cells show a dim "(absent)", empty values show ``""``.

    Example:
        renderer = TerminalRenderer()
        renderer.print_matrix(matrix)
    """

    def __init__(self, console: Console | None = None, highlight_differences: bool = True) -> None:
        self.console = console or Console()
        self.highlight_differences = highlight_differences

    def matrix_table(self, matrix: VariableMatrix, title: str = "Environment Variables") -> Table:
        """Build a Rich table for a matrix."""
        table = Table(title=title)
        table.add_column("Variable", style="bold")
        for header in matrix.column_headers:
            table.add_column(escape(header), max_width=40)

        differing = {row.variable_name for row in matrix.differing_rows()}
        for row in matrix.rows:
            cells = [self._cell(value) for value in row.values]
            name = escape(row.variable_name)
            if self.highlight_differences and row.variable_name in differing:
                name = f"[yellow]{name}[/yellow]"
            table.add_row(name, *cells)

        return table

    def environments_table(self, environments: Sequence[EnvironmentSummary]) -> Table:
        """Build a Rich table listing environments."""
        table = Table(title="Environments")
        table.add_column("Id", style="dim")
        table.add_column("Name", style="bold")
        for env in environments:
            table.add_row(env.id, escape(env.name))
        return table

    def print_matrix(self, matrix: VariableMatrix) -> None:
        if not matrix.column_headers:
            self.console.print("[yellow]No environments to compare.[/yellow]")
            return
        self.console.print(self.matrix_table(matrix))

    def print_environments(self, environments: Sequence[EnvironmentSummary]) -> None:
        self.console.print(self.environments_table(environments))

    @staticmethod
    def _cell(value: str | None) -> str:
        if value is None:
            return ABSENT_MARKER
        if value == "":
            return EMPTY_MARKER
        return escape(value)
