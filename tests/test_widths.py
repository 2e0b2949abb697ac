"""
Tests for the column width analyzer.

Tests for display width measurement and the first alignment pass.
"""

import time

from column_align.core.tokenizer import TextQualifier
from column_align.core.widths import (
    NOT_PRESENT,
    ColumnWidthAnalyzer,
    ColumnWidthTable,
    display_width,
    strip_terminator,
)


class TestDisplayWidth:
    """Tests for display_width."""

    def test_ascii(self):
        """ASCII text is one cell per character."""
        assert display_width("hello") == 5

    def test_empty(self):
        """Empty text has no width."""
        assert display_width("") == 0

    def test_wide_glyphs(self):
        """CJK characters take two cells each."""
        assert display_width("日本") == 4
        assert display_width("a日b") == 4

    def test_combining_character(self):
        """Combining marks add no width."""
        assert display_width("e\u0301") == 1

    def test_latin_accents(self):
        """Precomposed accented letters are narrow."""
        assert display_width("caf\u00e9") == 4

    def test_control_character_counts_as_one(self):
        """Non-printable characters fall back to one cell."""
        assert display_width("a\tb") == 3


class TestStripTerminator:
    """Tests for strip_terminator."""

    def test_strips_newline(self):
        assert strip_terminator("a,b\n") == "a,b"

    def test_strips_crlf(self):
        assert strip_terminator("a,b\r\n") == "a,b"

    def test_keeps_unterminated_line(self):
        assert strip_terminator("a,b") == "a,b"

    def test_strips_only_one_terminator(self):
        """Only the final terminator is removed."""
        assert strip_terminator("a\n\n") == "a\n"


class TestColumnWidthTable:
    """Tests for ColumnWidthTable."""

    def test_missing_column_is_not_present(self):
        """A column never seen returns the sentinel, not zero."""
        table = ColumnWidthTable()
        assert table.get(0) == NOT_PRESENT
        assert 0 not in table

    def test_update_keeps_maximum(self):
        """Updates keep the widest value."""
        table = ColumnWidthTable()
        table.update(0, 3)
        table.update(0, 1)
        table.update(0, 5)
        assert table.get(0) == 5

    def test_zero_width_column_is_present(self):
        """An empty column is recorded with width zero."""
        table = ColumnWidthTable()
        table.update(2, 0)
        assert table.get(2) == 0
        assert 2 in table
        assert len(table) == 1

    def test_iterates_in_column_order(self):
        """Iteration yields column indexes in order."""
        table = ColumnWidthTable()
        table.update(2, 1)
        table.update(0, 1)
        assert list(table) == [0, 2]

    def test_as_dict_is_a_copy(self):
        """as_dict does not expose the internal mapping."""
        table = ColumnWidthTable()
        table.update(0, 1)
        table.as_dict()[0] = 99
        assert table.get(0) == 1


class TestColumnWidthAnalyzer:
    """Tests for the measuring pass."""

    def test_example_widths(self, sample_lines):
        """Maximum width per column."""
        table = ColumnWidthAnalyzer(",").analyze(sample_lines)
        assert table.as_dict() == {0: 4, 1: 2, 2: 3}

    def test_lines_are_retained_in_order(self, sample_lines):
        """All lines are kept for rendering."""
        analyzer = ColumnWidthAnalyzer(",")
        analyzer.analyze(sample_lines)
        assert analyzer.lines == sample_lines

    def test_terminators_are_stripped(self):
        """Line terminators are not measured or retained."""
        analyzer = ColumnWidthAnalyzer(",")
        table = analyzer.analyze(["a,bb\r\n", "ccc,d\n"])
        assert analyzer.lines == ["a,bb", "ccc,d"]
        assert table.as_dict() == {0: 3, 1: 2}

    def test_ragged_lines(self, ragged_lines):
        """Columns missing from short lines do not shrink the table."""
        table = ColumnWidthAnalyzer(",").analyze(ragged_lines)
        assert table.as_dict() == {0: 2, 1: 2, 2: 1}

    def test_wide_glyphs_use_display_width(self):
        """Wide glyphs are measured by display width."""
        table = ColumnWidthAnalyzer(",").analyze(["日本語,x", "abc,y"])
        assert table.get(0) == 6

    def test_qualified_field_width_includes_qualifiers(self):
        """Qualifiers count towards the width of a field."""
        analyzer = ColumnWidthAnalyzer(",", TextQualifier(True, '"'))
        table = analyzer.analyze(['"a,b",c', "x,yy"])
        assert table.as_dict() == {0: 5, 1: 2}

    def test_measure_line_returns_field_count(self):
        """measure_line reports the number of fields."""
        analyzer = ColumnWidthAnalyzer(",")
        assert analyzer.measure_line("a,b,") == 3
        assert analyzer.table.get(2) == 0

    def test_empty_line_records_empty_first_column(self):
        """An empty line is one empty field."""
        analyzer = ColumnWidthAnalyzer(",")
        analyzer.analyze([""])
        assert analyzer.table.as_dict() == {0: 0}

    def test_repeated_analysis_is_stable(self, ragged_lines):
        """Measuring the same lines twice gives the same table."""
        first = ColumnWidthAnalyzer(",").analyze(ragged_lines)
        second = ColumnWidthAnalyzer(",").analyze(ragged_lines)
        assert first == second

    def test_empty_input(self):
        """No input gives an empty table."""
        analyzer = ColumnWidthAnalyzer(",")
        assert len(analyzer.analyze([])) == 0
        assert analyzer.lines == []

    def test_measure_time_grows_linearly(self):
        """Doubling the fields of a line roughly doubles the measuring time."""

        def best_time(fields):
            line = ",".join(["abcdefgh"] * fields)
            best = None
            for _ in range(3):
                started = time.perf_counter()
                ColumnWidthAnalyzer(",").analyze([line])
                elapsed = time.perf_counter() - started
                best = elapsed if best is None else min(best, elapsed)
            return best

        assert best_time(100_000) < 3 * best_time(50_000)
