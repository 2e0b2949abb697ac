"""
Padding Renderer - Pads a single field to its column width.

Rendering a field writes, in order:
- the surrounding pad (skipped for the first emitted column)
- the field text and its fill, placed according to the justification
- the surrounding pad again

Fill is always ASCII spaces. The amount of fill is computed from display
width, so a field holding wide glyphs receives less fill than its
character count would suggest.
"""

from dataclasses import dataclass, field
from enum import Enum
from io import StringIO
from typing import Dict

from column_align.core.widths import display_width
from column_align.exceptions import InvalidJustificationError

PAD_CHAR = " "


class Justification(Enum):
    """Placement of the field text inside its column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def parse(cls, value: str) -> "Justification":
        """
        Parse a justification name (case-insensitive).

        Accepts the full names and their first letters (l, r, c).

        Raises:
            InvalidJustificationError: If the name is unknown
        """
        name = value.strip().lower()
        for member in cls:
            if name in (member.value, member.value[0]):
                return member
        raise InvalidJustificationError(value)


@dataclass
class PaddingOptions:
    """
    Padding configuration.

    Attributes:
        justification: Default justification for every column
        column_override: Justification per 1-based column number,
            taking precedence over the default
        pad: Width of the surrounding pad placed around each separator
    """
    justification: Justification = Justification.LEFT
    column_override: Dict[int, Justification] = field(default_factory=dict)
    pad: int = 1

    def __post_init__(self):
        if self.pad < 0:
            self.pad = 0

    def justification_for(self, column_num: int) -> Justification:
        """Get the effective justification of a 1-based column number."""
        return self.column_override.get(column_num, self.justification)

    @property
    def surrounding_pad(self) -> str:
        """The surrounding pad string."""
        return PAD_CHAR * max(self.pad, 0)


class PadBuffer:
    """
    Reusable text buffer for building one padded field.

    The buffer is reset between fields instead of being reallocated.
    Custom buffers passed to Aligner.update_padder() must provide the
    same methods.
    """

    def __init__(self):
        self._buffer = StringIO()

    def write(self, text: str) -> int:
        return self._buffer.write(text)

    def write_fill(self, count: int) -> None:
        """Append count fill characters; nothing for count <= 0."""
        if count > 0:
            self._buffer.write(PAD_CHAR * count)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def reset(self) -> None:
        """Empty the buffer, keeping it for the next field."""
        self._buffer.seek(0)
        self._buffer.truncate(0)

    def __len__(self) -> int:
        return self._buffer.tell()


def count_padding(text: str, width: int) -> int:
    """
    Get the number of fill characters needed to bring text to width.

    Args:
        text: The field text
        width: Target display width of the column

    Returns:
        Fill length; negative if text is wider than width
    """
    return width - display_width(text)


def apply_padding(
    buffer: PadBuffer,
    original: str,
    surrounding_pad: str,
    column_num: int,
    pad_length: int,
    justification: Justification,
) -> str:
    """
    Render one field into buffer and return the result.

    The buffer is not reset here; the caller resets it once the result
    has been written out.

    Args:
        buffer: Empty buffer to render into
        original: The field text
        surrounding_pad: Pad string placed around the separator
        column_num: Position of the field among the emitted fields (0 = first)
        pad_length: Fill length from count_padding()
        justification: Placement of the text

    Returns:
        The padded field
    """
    if surrounding_pad and column_num > 0:
        buffer.write(surrounding_pad)

    if justification is Justification.RIGHT:
        buffer.write_fill(pad_length)
        buffer.write(original)
    elif justification is Justification.CENTER and pad_length > 2:
        buffer.write_fill(pad_length - pad_length // 2)
        buffer.write(original)
        buffer.write_fill(pad_length // 2)
    else:
        # Left, and center with too little fill to be worth splitting
        buffer.write(original)
        buffer.write_fill(pad_length)

    if surrounding_pad:
        buffer.write(surrounding_pad)

    return buffer.getvalue()
