"""Output writers and renderers."""

from appveyor_evu.renderers.base import BaseWriter, OutputFormat, TabularWriter
from appveyor_evu.renderers.csv import CSVWriter, TSVWriter
from appveyor_evu.renderers.markdown import MarkdownWriter
from appveyor_evu.renderers.terminal import TerminalRenderer

__all__ = [
    "BaseWriter",
    "OutputFormat",
    "TabularWriter",
    "CSVWriter",
    "TSVWriter",
    "MarkdownWriter",
    "TerminalRenderer",
    "get_writer",
]


def get_writer(format: OutputFormat | str) -> BaseWriter:
    """Get a writer for the specified format.

    Args:
        format: Output format (OutputFormat enum or string)

    Returns:
        Appropriate writer instance

    Raises:
        ValueError: If format is not supported
    """
    if isinstance(format, str):
        format = OutputFormat(format.lower())

    writers = {
        OutputFormat.CSV: CSVWriter,
        OutputFormat.TSV: TSVWriter,
        OutputFormat.MARKDOWN: MarkdownWriter,
    }

    writer_class = writers.get(format)
    if writer_class is None:
        raise ValueError(f"Unsupported format: {format}")

    return writer_class()
