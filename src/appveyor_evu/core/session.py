"""Comparison session tying the API clients, matrix builder and writer together."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from appveyor_evu.core.matrix import MatrixBuilder
from appveyor_evu.core.selector import describe_names, select_environments
from appveyor_evu.models.environment import EnvironmentDetail
from appveyor_evu.models.matrix import ComparisonReport, SelectionResult
from appveyor_evu.utils.logging import get_logger

if TYPE_CHECKING:
    from appveyor_evu.api.base import EnvironmentDetailSource, EnvironmentDirectory
    from appveyor_evu.renderers.base import TabularWriter

logger = get_logger(__name__)


class ComparisonSession:
    """Compares environment variables across AppVeyor environments.

    The session pulls back every environment, keeps the requested ones,
    fetches their variables one environment at a time and hands the pivoted
    matrix to a writer. Errors from the API clients and the writer are not
    caught here.

    Example:
        client = AppVeyorClient()
        session = ComparisonSession(client, client, CSVWriter())
        report = session.compare(token, ["Dev", "QA"], Path("compare.csv"))

        if report.selection.has_mismatch:
            print("Missing:", report.selection.unmatched)
    """

    def __init__(
        self,
        directory: EnvironmentDirectory,
        details: EnvironmentDetailSource,
        writer: TabularWriter | None = None,
        builder: MatrixBuilder | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            directory: Client listing all environments
            details: Client fetching one environment's variables
            writer: Sink for the finished matrix (required by ``compare``)
            builder: Matrix builder (a default one if not given)
        """
        self._directory = directory
        self._details = details
        self._writer = writer
        self._builder = builder or MatrixBuilder()

    def select(self, api_token: str, environment_names: Sequence[str]) -> SelectionResult:
        """Pull back all environments and select the requested ones."""
        logger.debug("Attempting to pull back all environments...")
        all_environments = self._directory.list_environments(api_token)
        logger.info("%d environment(s) returned.", len(all_environments))

        logger.debug("Environments returned:")
        for environment in all_environments:
            logger.debug("-> %s", environment)

        logger.debug(
            "Selecting environment names passed in (%s) from the ones pulled "
            "back from the API...",
            describe_names(environment_names),
        )
        selection = select_environments(all_environments, environment_names)

        if selection.has_mismatch:
            logger.warning(
                "Could not find %d of the environment(s) passed in: %s. "
                "Execution will continue with found environments.",
                len(selection.unmatched),
                describe_names(selection.unmatched),
            )

        return selection

    def fetch_details(
        self, api_token: str, selection: SelectionResult
    ) -> list[EnvironmentDetail]:
        """Fetch variables for each matched environment, in matched order."""
        details = []
        for environment in selection.matched:
            logger.debug("Pulling back settings for %s...", environment)
            details.append(self._details.get_environment_detail(api_token, environment.id))
        return details

    def build_report(
        self, api_token: str, environment_names: Sequence[str]
    ) -> ComparisonReport:
        """Select environments and build the matrix without writing it."""
        selection = self.select(api_token, environment_names)
        details = self.fetch_details(api_token, selection)
        matrix = self._builder.build(details)
        logger.info(
            "Built matrix of %d variable(s) across %d environment(s).",
            len(matrix.rows),
            len(matrix.column_headers),
        )
        return ComparisonReport(selection=selection, matrix=matrix)

    def compare(
        self,
        api_token: str,
        environment_names: Sequence[str],
        output_path: Path,
    ) -> ComparisonReport:
        """Compare environments and write the matrix.

        Args:
            api_token: AppVeyor API token
            environment_names: Environment names, as they appear in AppVeyor
            output_path: Destination for the matrix

        Returns:
            ComparisonReport describing the run

        Raises:
            ApiError: If the environments could not be retrieved
            OutputWriteError: If the matrix could not be written
        """
        if self._writer is None:
            raise ValueError("A writer is required to compare and write a matrix")

        report = self.build_report(api_token, environment_names)

        logger.debug("Writing matrix to %s...", output_path)
        self._writer.write(output_path, report.matrix.to_rows())

        return report.model_copy(update={"output_path": Path(output_path)})
