"""Width measurement for text containing escape codes.

Two modes are supported:
- byte mode counts codepoints (text_length, length)
- display mode counts terminal columns (text_width, display_width)

Escape codes always count as zero in both modes.
"""

import re
import unicodedata
from typing import Callable, NamedTuple

from .codes import strip

# Measures an escape-laden fragment
WidthFunc = Callable[[str], int]

# Cuts a plain fragment to a width, returning (piece, width used)
CutFunc = Callable[[str, int], tuple[str, int]]

_LINE_BREAK_RE = re.compile(r"\r?\n")


class WidthMeasurement(NamedTuple):
    """Widest row and number of rows of a text."""

    columns: int
    lines: int


def char_width(char: str) -> int:
    """Get display width of a single character.

    Accounts for:
    - Wide characters (CJK, emoji) = 2 columns
    - Control, combining and format characters = 0 columns
    - Normal characters = 1 column
    """
    # Control characters
    if ord(char) < 32 or 0x7F <= ord(char) < 0xA0:
        return 0

    # Zero-width characters
    if unicodedata.combining(char):
        return 0
    category = unicodedata.category(char)
    if category in ("Mn", "Me", "Cf"):  # Mark, Enclosing, Format
        return 0

    # Wide characters (CJK, etc.)
    if unicodedata.east_asian_width(char) in ("F", "W"):
        return 2

    return 1


def plain_width(text: str) -> int:
    """Display width of text that holds no escape codes."""
    return sum(char_width(c) for c in text)


def text_length(text: str) -> int:
    """Codepoint count of text, ignoring escape codes."""
    return len(strip(text))


def text_width(text: str) -> int:
    """Display width of a single line of text, ignoring escape codes."""
    return plain_width(strip(text))


def length(text: str) -> int:
    """Count the characters in text, ignoring escape codes.

    Example:
        >>> length("\\x1b[31mred")
        3
    """
    return text_length(text)


def display_width(text: str) -> int:
    """Calculate the width of text in terminal columns.

    Text is treated as one line. Use measure() for multi-line text.

    Example:
        >>> display_width("\\x1b[31m红色")
        4
    """
    return text_width(text)


def measure(text: str) -> WidthMeasurement:
    """Measure the widest row and the number of rows of text.

    Rows are separated by ``\\n`` or ``\\r\\n``. A trailing line break starts
    a new (empty) row, so ``"foobar\\nb\\n"`` has 3 rows.

    Args:
        text: Text to measure, may contain escape codes

    Returns:
        WidthMeasurement(columns, lines); the empty string is (0, 1)
    """
    rows = _LINE_BREAK_RE.split(strip(text))
    return WidthMeasurement(
        columns=max(plain_width(row) for row in rows),
        lines=len(rows),
    )


def cut_chars(text: str, width: int) -> tuple[str, int]:
    """Cut plain text to width codepoints."""
    return text[:width], min(width, len(text))


def cut_columns(text: str, width: int) -> tuple[str, int]:
    """Cut plain text to width columns.

    A wide character that would straddle the boundary is dropped whole.
    Zero-width characters right after the last kept one are kept.
    """
    result = []
    current_width = 0

    for char in text:
        w = char_width(char)
        if current_width + w > width:
            break
        result.append(char)
        current_width += w

    return "".join(result), current_width


class WidthMode(NamedTuple):
    """How a layout operation measures and cuts text."""

    name: str
    measure: WidthFunc  # Escape-laden text
    plain: WidthFunc  # Text without escape codes
    cut: CutFunc  # Text without escape codes


CHARS = WidthMode("chars", text_length, len, cut_chars)
COLUMNS = WidthMode("columns", text_width, plain_width, cut_columns)
