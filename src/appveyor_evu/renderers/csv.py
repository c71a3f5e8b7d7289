"""Delimited text writer for comparison matrices."""

from __future__ import annotations

import csv
import io
from collections.abc import Sequence

from appveyor_evu.renderers.base import BaseWriter


class CSVWriter(BaseWriter):
    """Writer for comma (or otherwise) separated output.

    Fields containing the delimiter, quotes or line breaks are quoted;
    everything else is written as-is. Records end with ``\\n``.

    Example:
        writer = CSVWriter()
        writer.write(Path("compare.csv"), matrix.to_rows())
    """

    def __init__(self, delimiter: str = ",") -> None:
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")
        self.delimiter = delimiter

    def render(self, rows: Sequence[Sequence[str]]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=self.delimiter,
            lineterminator="\n",
            quoting=csv.QUOTE_MINIMAL,
        )
        writer.writerows(rows)
        return buffer.getvalue()


class TSVWriter(CSVWriter):
    """Tab separated output."""

    def __init__(self) -> None:
        super().__init__(delimiter="\t")
