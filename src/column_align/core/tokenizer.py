"""
Field Tokenizer - Splits delimited lines into fields.

A field ends at the next separator. When a text qualifier is active and a
field starts with the qualifier, separators inside the qualified text do
not split it: the field runs until the qualifier is directly followed by
the separator. A qualifier that never closes absorbs the rest of the line.

The qualifier is part of the field text; it is measured and rendered
like any other character.

Two modes are provided:
- field_length: length of one field (used while measuring)
- split_fields: every field of a line (used while rendering)
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple


@dataclass(frozen=True)
class TextQualifier:
    """
    Text qualifier settings.

    Attributes:
        enabled: Whether qualified fields are recognised
        qualifier: The qualifier string, e.g. '"'
    """
    enabled: bool = False
    qualifier: str = ""

    @property
    def active(self) -> str:
        """The qualifier string when qualifiers apply, otherwise ''."""
        if self.enabled and self.qualifier:
            return self.qualifier
        return ""


def field_length(text: str, separator: str, qualifier: str = "", start: int = 0) -> int:
    """
    Get the length of the field of text that begins at start.

    Works like str.find() except that the length of the remaining text is
    returned when there is no separator, and qualified fields are kept
    together. The text is searched in place, so walking a line field by
    field stays linear in its length.

    Args:
        text: The line holding the field
        separator: Field separator (non-empty)
        qualifier: Text qualifier, '' to disable
        start: Offset of the field in text

    Returns:
        Number of characters in the field
    """
    if qualifier and text.startswith(qualifier, start):
        index = text.find(qualifier + separator, start)
        if index == -1:
            return len(text) - start
        return index + len(qualifier) - start

    index = text.find(separator, start)
    if index == -1:
        return len(text) - start
    return index - start


def iter_field_spans(
    line: str,
    separator: str,
    qualifier: str = "",
) -> Iterator[Tuple[int, int]]:
    """
    Yield (start, end) offsets of every field in a line.

    A line without separators yields one span covering the whole line
    (an empty line yields one empty span). A trailing separator yields a
    trailing empty field.

    Args:
        line: The line to split
        separator: Field separator (non-empty)
        qualifier: Text qualifier, '' to disable

    Yields:
        Tuples of (start, end) offsets into line
    """
    start = 0
    sep_len = len(separator)
    line_len = len(line)

    while True:
        end = start + field_length(line, separator, qualifier, start)
        yield start, end
        if end >= line_len:
            return
        start = end + sep_len


def split_fields(line: str, separator: str, qualifier: str = "") -> List[str]:
    """
    Split a line into fields, honoring the text qualifier.

    Args:
        line: The line to split
        separator: Field separator (non-empty)
        qualifier: Text qualifier, '' to disable

    Returns:
        List of field strings
    """
    if not qualifier:
        return line.split(separator)
    return [line[start:end] for start, end in iter_field_spans(line, separator, qualifier)]
