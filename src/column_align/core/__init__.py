"""
Core modules for column-align.

This package contains the alignment engine:
- tokenizer: Qualifier-aware field splitting
- widths: Display width and column width measurement
- padding: Field padding and justification
- aligner: Two-pass alignment orchestration
"""

from column_align.core.aligner import Aligner, AlignState
from column_align.core.padding import Justification, PadBuffer, PaddingOptions
from column_align.core.tokenizer import TextQualifier, split_fields
from column_align.core.widths import ColumnWidthTable, display_width

__all__ = [
    "Aligner",
    "AlignState",
    "ColumnWidthTable",
    "Justification",
    "PadBuffer",
    "PaddingOptions",
    "TextQualifier",
    "display_width",
    "split_fields",
]
