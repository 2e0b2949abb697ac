"""
Aligner - Two-pass column alignment of delimited text.

The aligner reads the whole input once to learn the width of every
column, then renders each retained line with its fields padded to those
widths.

Usage:
    aligner = Aligner(sys.stdin, sys.stdout, ",", TextQualifier(True, '"'))
    aligner.update_padding(PaddingOptions(justification=Justification.RIGHT))
    aligner.filter_columns([1, 3])
    aligner.align()
"""

from enum import Enum
from typing import Iterable, List, Optional, Sequence, TextIO

from column_align.core.padding import (
    PadBuffer,
    PaddingOptions,
    apply_padding,
    count_padding,
)
from column_align.core.tokenizer import TextQualifier, split_fields
from column_align.core.widths import ColumnWidthAnalyzer, ColumnWidthTable
from column_align.logging_config import get_logger

logger = get_logger("aligner")


class AlignState(Enum):
    """Progress of an alignment run."""

    IDLE = "idle"
    MEASURING = "measuring"
    RENDERING = "rendering"
    DONE = "done"


class Aligner:
    """
    Aligns delimited lines read from source and writes them to sink.

    Attributes:
        source: Iterable of input lines
        sink: Text stream receiving the aligned output
        separator: Input field separator
        sep_out: Output field separator (defaults to separator)
        qualifier: Text qualifier settings
        padding: Padding options
        column_filter: 1-based column numbers to output (empty = all)
        lines: Input lines retained by the measuring pass
        widths: Column widths found by the measuring pass
        state: Current AlignState
    """

    def __init__(
        self,
        source: Iterable[str],
        sink: TextIO,
        separator: str,
        qualifier: TextQualifier = TextQualifier(),
    ):
        self.source = source
        self.sink = sink
        self.separator = separator
        self.sep_out = separator
        self.qualifier = qualifier
        self.padding = PaddingOptions()
        self.padder = PadBuffer()
        self.column_filter: List[int] = []
        self.lines: List[str] = []
        self.widths = ColumnWidthTable()
        self.state = AlignState.IDLE
        self.lines_written = 0

    def output_separator(self, sep_out: str) -> None:
        """Use sep_out between output fields instead of the input separator."""
        self.sep_out = sep_out

    def update_padding(self, options: PaddingOptions) -> None:
        """Replace the padding options."""
        self.padding = options

    def update_padder(self, padder: PadBuffer) -> None:
        """Replace the buffer fields are rendered into."""
        self.padder = padder

    def filter_columns(self, columns: Optional[Sequence[int]]) -> None:
        """
        Output only the given 1-based column numbers.

        Columns are always written in their input order, whatever the
        order of columns. An empty or None value disables filtering.
        """
        self.column_filter = sorted(set(columns or []))

    def column_size(self, column: int) -> int:
        """Get the width of a 0-based column, or -1 if it was never seen."""
        return self.widths.get(column)

    def align(self) -> None:
        """Measure the whole input, then write it aligned."""
        self.measure()
        self.render()

    def measure(self) -> ColumnWidthTable:
        """
        Read every input line and record the column widths.

        Returns:
            The column width table
        """
        self.state = AlignState.MEASURING
        analyzer = ColumnWidthAnalyzer(self.separator, self.qualifier)
        self.widths = analyzer.analyze(self.source)
        self.lines = analyzer.lines
        self.state = AlignState.RENDERING
        return self.widths

    def render(self) -> None:
        """Write every retained line with padded fields, then flush."""
        if self.state is AlignState.IDLE:
            self.measure()
        self.state = AlignState.RENDERING

        for line in self.lines:
            self.sink.write(self.render_line(line))
            self.lines_written += 1

        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

        self.state = AlignState.DONE
        logger.debug("Rendered %d lines", self.lines_written)

    def render_line(self, line: str) -> str:
        """
        Render one line, including its line terminator.

        Fields of columns outside the filter are dropped. A line whose
        fields are all dropped is rendered as an empty line so that rows
        stay in step with the input.

        Args:
            line: A line seen by measure()

        Returns:
            The aligned line ending in a newline
        """
        fields = split_fields(line, self.separator, self.qualifier.active)
        surrounding_pad = self.padding.surrounding_pad
        last_column = self.column_filter[-1] if self.column_filter else None

        parts = []
        for index, text in enumerate(fields):
            column_num = index + 1
            if last_column is not None:
                if column_num > last_column:
                    break
                if column_num not in self.column_filter:
                    continue

            justification = self.padding.justification_for(column_num)
            pad_length = count_padding(text, self.widths.get(index))
            parts.append(
                apply_padding(
                    self.padder,
                    text,
                    surrounding_pad,
                    len(parts),
                    pad_length,
                    justification,
                )
            )
            self.padder.reset()

        return self.sep_out.join(parts) + "\n"
