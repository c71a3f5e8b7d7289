"""Base writer protocol and types."""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Protocol, runtime_checkable

from appveyor_evu.utils.errors import OutputWriteError


class OutputFormat(str, Enum):
    """Supported matrix output formats."""

    CSV = "csv"
    TSV = "tsv"
    MARKDOWN = "markdown"


@runtime_checkable
class TabularWriter(Protocol):
    """Protocol for matrix output sinks.

    Writers receive a fully materialised, rectangular grid of string cells
    and persist it. They do no interpretation of their own.

    Example:
        class PrintWriter:
            def write(self, destination, rows):
                for row in rows:
                    print(" | ".join(row))
    """

    def write(self, destination: Path, rows: Sequence[Sequence[str]]) -> None:
        """Persist rows to a destination.

        Args:
            destination: Output file path
            rows: Rows of string cells, header row first

        Raises:
            OutputWriteError: If the destination cannot be created or written
        """
        ...


class BaseWriter:
    """Base implementation with common functionality.

    Subclasses implement ``render``; ``write`` handles the file.
    """

    def render(self, rows: Sequence[Sequence[str]]) -> str:
        """Render rows to a string. Must be implemented by subclasses."""
        raise NotImplementedError

    def write(self, destination: Path, rows: Sequence[Sequence[str]]) -> None:
        """Render rows and write them to a UTF-8 file.

        Raises:
            OutputWriteError: If the destination cannot be created or written
        """
        content = self.render(rows)
        destination = Path(destination)
        try:
            with destination.open("w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except OSError as e:
            raise OutputWriteError(
                f"Could not write {destination}: {e.strerror or e}",
                path=str(destination),
            ) from e
