"""
Column Width Analyzer - First pass of the alignment.

Every line is walked field by field and the widest display width seen
for each column is recorded. Lines are retained in order because the
widths are only final once the whole input has been read.
"""

from typing import Dict, Iterable, Iterator, List

from wcwidth import wcswidth, wcwidth

from column_align.core.tokenizer import TextQualifier, iter_field_spans
from column_align.logging_config import get_logger

logger = get_logger("widths")

# Returned by ColumnWidthTable.get() for a column that was never seen
NOT_PRESENT = -1


def display_width(text: str) -> int:
    """
    Return the number of terminal cells needed to display text.

    Wide (East Asian) glyphs take two cells, combining and zero-width
    characters take none. Non-printable characters such as tabs have no
    defined width; each of them is counted as a single cell.

    Args:
        text: The string to measure

    Returns:
        Display width in cells
    """
    if text.isascii() and text.isprintable():
        return len(text)

    width = wcswidth(text)
    if width >= 0:
        return width

    width = 0
    for char in text:
        char_width = wcwidth(char)
        width += char_width if char_width >= 0 else 1
    return width


def strip_terminator(line: str) -> str:
    """Remove one trailing "\n" or "\r\n" from line."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class ColumnWidthTable:
    """
    Maximum display width per column.

    Columns are 0-based. Looking up a column that never appeared in any
    line returns NOT_PRESENT rather than zero, so an empty column can be
    told apart from a missing one.
    """

    def __init__(self):
        self._widths: Dict[int, int] = {}

    def update(self, column: int, width: int) -> None:
        """Record width for column, keeping the maximum."""
        if width > self._widths.get(column, NOT_PRESENT):
            self._widths[column] = width

    def get(self, column: int) -> int:
        """Get the width of column, or NOT_PRESENT."""
        return self._widths.get(column, NOT_PRESENT)

    def as_dict(self) -> Dict[int, int]:
        """Return a copy of the table as a plain dict."""
        return dict(self._widths)

    def __contains__(self, column: int) -> bool:
        return column in self._widths

    def __len__(self) -> int:
        return len(self._widths)

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._widths))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ColumnWidthTable):
            return NotImplemented
        return self._widths == other._widths

    def __repr__(self) -> str:
        return f"ColumnWidthTable({self.as_dict()!r})"


class ColumnWidthAnalyzer:
    """
    Measures column widths across all input lines.

    Usage:
        analyzer = ColumnWidthAnalyzer(",", TextQualifier(True, '"'))
        table = analyzer.analyze(lines)
        analyzer.lines  # the retained input
    """

    def __init__(self, separator: str, qualifier: TextQualifier = TextQualifier()):
        self.separator = separator
        self.qualifier = qualifier
        self.table = ColumnWidthTable()
        self.lines: List[str] = []

    def measure_line(self, line: str) -> int:
        """
        Update the width table from a single line.

        Args:
            line: The line to measure (without line terminator)

        Returns:
            Number of fields found in the line
        """
        column = 0
        for start, end in iter_field_spans(line, self.separator, self.qualifier.active):
            self.table.update(column, display_width(line[start:end]))
            column += 1
        return column

    def analyze(self, lines: Iterable[str]) -> ColumnWidthTable:
        """
        Measure every line and retain it for rendering.

        Args:
            lines: Input lines; trailing line terminators are stripped

        Returns:
            The populated ColumnWidthTable
        """
        for raw in lines:
            line = strip_terminator(raw)
            self.measure_line(line)
            self.lines.append(line)

        logger.debug(
            "Measured %d lines, %d columns", len(self.lines), len(self.table)
        )
        return self.table
