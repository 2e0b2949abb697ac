"""
column-align - Align the columns of delimited text.

Lines are split on a separator (optionally honoring a text qualifier such
as '"'), the widest display width of every column is measured across the
whole input, and every field is then padded so the columns line up.
Wide glyphs (CJK, emoji) are measured by their display width, not by
their character count.

Basic Usage:
    from column_align import align_text

    print(align_text("a,bb,ccc\\ndddd,e,f\\n"), end="")

    # With configuration
    config = Config(separator="|", qualifier='"', columns=[1, 3])
    result = AlignmentPipeline(config).run(source=lines, sink=sys.stdout)

Command-Line Usage:
    column-align data.csv
    column-align data.csv --justify right --pad 2
    column-align -s '\\t' --columns 1,3 < data.tsv
"""

__version__ = "1.0.0"

from column_align.exceptions import (
    AlignError,
    ConfigError,
    InvalidColumnError,
    InvalidJustificationError,
    InvalidSeparatorError,
)

from column_align.config import Config, create_default_config
from column_align.core.aligner import Aligner, AlignState
from column_align.core.padding import Justification, PadBuffer, PaddingOptions
from column_align.core.tokenizer import TextQualifier
from column_align.core.widths import ColumnWidthTable, display_width
from column_align.main import (
    AlignmentPipeline,
    AlignmentResult,
    align_file,
    align_lines,
    align_text,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "align_text",
    "align_lines",
    "align_file",
    "AlignmentPipeline",
    "AlignmentResult",
    "Aligner",
    "AlignState",
    # Configuration
    "Config",
    "create_default_config",
    "Justification",
    "PaddingOptions",
    "TextQualifier",
    # Data Types
    "ColumnWidthTable",
    "PadBuffer",
    "display_width",
    # Exceptions
    "AlignError",
    "ConfigError",
    "InvalidColumnError",
    "InvalidJustificationError",
    "InvalidSeparatorError",
]
