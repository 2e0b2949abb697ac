"""
Pytest configuration and fixtures for column-align tests.
"""

import io

import pytest

from column_align.core.aligner import Aligner
from column_align.core.padding import PaddingOptions


@pytest.fixture
def sample_lines():
    """Two comma separated lines with differing field widths."""
    return ["a,bb,ccc", "dddd,e,f"]


@pytest.fixture
def ragged_lines():
    """Lines with differing numbers of fields."""
    return ["a,b,c", "dd", "e,ff"]


@pytest.fixture
def sample_csv(tmp_path):
    """Create a sample CSV file."""
    path = tmp_path / "data.csv"
    path.write_text("name,qty,price\napple,3,1.25\nkiwi,12,0.5\n", encoding="utf-8")
    return path


@pytest.fixture
def make_aligner():
    """Build an aligner over lines writing into a StringIO.

    Padding defaults to no surrounding pad and '|' as output separator,
    which keeps expected strings readable.
    """

    def _make(lines, separator=",", qualifier=None, pad=0, sep_out="|", **padding):
        kwargs = {"qualifier": qualifier} if qualifier is not None else {}
        aligner = Aligner(list(lines), io.StringIO(), separator, **kwargs)
        if sep_out is not None:
            aligner.output_separator(sep_out)
        aligner.update_padding(PaddingOptions(pad=pad, **padding))
        return aligner

    return _make


@pytest.fixture
def align_output(make_aligner):
    """Align lines and return everything written to the sink."""

    def _run(lines, **kwargs):
        aligner = make_aligner(lines, **kwargs)
        aligner.align()
        return aligner.sink.getvalue()

    return _run
