"""Selection and comparison matrix data models."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field, model_validator

from appveyor_evu.models.environment import EnvironmentSummary

# Corner cell of the header row in tabular output
CORNER_CELL = " "


class SelectionResult(BaseModel):
    """Outcome of matching requested names against the environment directory."""

    model_config = {"frozen": True}

    requested: list[str] = Field(
        default_factory=list, description="Environment names as requested"
    )
    matched: list[EnvironmentSummary] = Field(
        default_factory=list,
        description="Matching environments, in directory order",
    )
    unmatched: list[str] = Field(
        default_factory=list,
        description="Requested names with no matching environment, in request order",
    )

    @property
    def has_mismatch(self) -> bool:
        """Check if any requested name was not found."""
        return len(self.unmatched) > 0

    @property
    def matched_names(self) -> list[str]:
        """Names of the matched environments."""
        return [e.name for e in self.matched]


class MatrixRow(BaseModel):
    """One variable and its value in every compared environment.

    A ``None`` cell means the variable does not exist in that environment;
    an empty string means it exists with an empty value.
    """

    model_config = {"frozen": True}

    variable_name: str = Field(description="Variable name (row header)")
    values: list[str | None] = Field(
        default_factory=list,
        description="Per-environment values, aligned with the column headers",
    )

    def to_cells(self) -> list[str]:
        """Render the row as string cells, absent values becoming blank."""
        return [self.variable_name] + ["" if v is None else v for v in self.values]


class VariableMatrix(BaseModel):
    """Variables (rows) by environments (columns)."""

    model_config = {"frozen": True}

    column_headers: list[str] = Field(
        default_factory=list, description="Environment names, in selection order"
    )
    rows: list[MatrixRow] = Field(
        default_factory=list, description="Rows in ascending variable name order"
    )
    warnings: list[str] = Field(
        default_factory=list, description="Data quality warnings raised while building"
    )

    @model_validator(mode="after")
    def _check_shape(self) -> "VariableMatrix":
        width = len(self.column_headers)
        previous: str | None = None
        for row in self.rows:
            if len(row.values) != width:
                raise ValueError(
                    f"Row {row.variable_name!r} has {len(row.values)} values, "
                    f"expected {width}"
                )
            if previous is not None and row.variable_name <= previous:
                raise ValueError(
                    f"Rows must be strictly ascending: {row.variable_name!r} "
                    f"follows {previous!r}"
                )
            previous = row.variable_name
        return self

    @property
    def variable_names(self) -> list[str]:
        """Row headers."""
        return [row.variable_name for row in self.rows]

    def row(self, variable_name: str) -> MatrixRow | None:
        """Find the row for a variable."""
        for row in self.rows:
            if row.variable_name == variable_name:
                return row
        return None

    def cell(self, variable_name: str, column: str | int) -> str | None:
        """Look up a single cell by variable name and column name or index.

        Raises:
            KeyError: If the variable or column does not exist
        """
        row = self.row(variable_name)
        if row is None:
            raise KeyError(variable_name)
        if isinstance(column, str):
            if column not in self.column_headers:
                raise KeyError(column)
            column = self.column_headers.index(column)
        return row.values[column]

    def is_absent(self, variable_name: str, column: str | int) -> bool:
        """Check if a variable is missing (not merely empty) in a column."""
        return self.cell(variable_name, column) is None

    def differing_rows(self) -> list[MatrixRow]:
        """Rows whose values are not identical across every environment."""
        return [row for row in self.rows if len(set(row.values)) > 1]

    def to_rows(self) -> list[list[str]]:
        """Materialise the rectangular grid handed to a tabular writer."""
        grid = [[CORNER_CELL] + list(self.column_headers)]
        grid.extend(row.to_cells() for row in self.rows)
        return grid


class ComparisonReport(BaseModel):
    """Result of one comparison run."""

    model_config = {"frozen": True}

    selection: SelectionResult = Field(description="Environment selection outcome")
    matrix: VariableMatrix = Field(description="The comparison matrix")
    output_path: Path | None = Field(
        default=None, description="Where the matrix was written, if it was"
    )
    generated_at: datetime = Field(
        default_factory=datetime.now,
        description="Report generation timestamp",
    )

    @property
    def written(self) -> bool:
        return self.output_path is not None
