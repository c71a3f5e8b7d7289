"""Builder for the variable-by-environment comparison matrix."""

from __future__ import annotations

from collections.abc import Sequence

from appveyor_evu.models.environment import EnvironmentDetail
from appveyor_evu.models.matrix import MatrixRow, VariableMatrix
from appveyor_evu.utils.logging import get_logger

logger = get_logger(__name__)


class MatrixBuilder:
    """Pivots environment details into a comparison matrix.

    Columns are the environments in the order given; rows are the union of
    every variable name, sorted ordinally. A cell holds the variable's value
    in that environment, ``""`` when it is defined without a value, and
    ``None`` when the environment does not define it at all.

    If an environment defines the same variable more than once, the first
    definition wins and a warning is recorded on the matrix.

    Example:
        builder = MatrixBuilder()
        matrix = builder.build([dev_detail, qa_detail])

        for row in matrix.rows:
            print(row.variable_name, row.values)
    """

    def build(self, selected_details: Sequence[EnvironmentDetail]) -> VariableMatrix:
        """Build the matrix for the selected environments.

        Args:
            selected_details: Environment details, in column order

        Returns:
            The comparison matrix
        """
        warnings: list[str] = []
        lookups = [self._index(detail, warnings) for detail in selected_details]

        names: set[str] = set()
        for lookup in lookups:
            names.update(lookup)

        rows = [
            MatrixRow(
                variable_name=name,
                values=[lookup.get(name) for lookup in lookups],
            )
            for name in sorted(names)
        ]

        return VariableMatrix(
            column_headers=[detail.name for detail in selected_details],
            rows=rows,
            warnings=warnings,
        )

    @staticmethod
    def _index(detail: EnvironmentDetail, warnings: list[str]) -> dict[str, str]:
        """Map variable names to values for one environment, first one wins."""
        lookup: dict[str, str] = {}
        for setting in detail.variables:
            if setting.name in lookup:
                message = (
                    f"Environment \"{detail.name}\" defines {setting.name} more "
                    f"than once; using the first value."
                )
                logger.warning(message)
                warnings.append(message)
                continue
            # Defined without a value is blank, not absent
            lookup[setting.name] = "" if setting.value is None else setting.value
        return lookup


def build_matrix(selected_details: Sequence[EnvironmentDetail]) -> VariableMatrix:
    """Build a comparison matrix with a default MatrixBuilder."""
    return MatrixBuilder().build(selected_details)
