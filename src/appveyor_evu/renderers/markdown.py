"""Markdown table writer for comparison matrices."""

from __future__ import annotations

from collections.abc import Sequence

from appveyor_evu.renderers.base import BaseWriter


class MarkdownWriter(BaseWriter):
    """Writer producing a GitHub-flavoured Markdown table.

    The first row becomes the table header. Pipe characters and line breaks
    inside cells are escaped so the table stays intact.
    """

    def render(self, rows: Sequence[Sequence[str]]) -> str:
        if not rows:
            return ""

        header, *body = rows
        lines = [
            self._line(header),
            "|" + "|".join("---" for _ in header) + "|",
        ]
        lines.extend(self._line(row) for row in body)
        return "\n".join(lines) + "\n"

    @staticmethod
    def _escape(cell: str) -> str:
        # Escape pipe characters and flatten line breaks
        return cell.replace("|", "\\|").replace("\r\n", "<br>").replace("\n", "<br>")

    def _line(self, row: Sequence[str]) -> str:
        return "| " + " | ".join(self._escape(cell) for cell in row) + " |"
