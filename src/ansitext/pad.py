"""Padding of single lines to an exact width."""

import re

from .config import DEFAULT_PAD_CHAR, PadSide, check_width
from .errors import InvalidArgument
from .truncate import truncate_text
from .width import CHARS, COLUMNS, WidthMode

_LINE_SPLIT_RE = re.compile(r"(\r?\n)")


def pad_text(
    text: str,
    width: int,
    mode: WidthMode,
    which: str | PadSide | None = PadSide.RIGHT,
    pad_char: str = DEFAULT_PAD_CHAR,
    truncate: bool = False,
) -> str:
    """Pad text to width, measuring with mode.

    Text already wider than width is returned as is unless truncate is
    set, in which case it is cut and the shortfall padded on the right.
    """
    check_width(width)
    side = PadSide.parse(which)
    if not pad_char:
        raise InvalidArgument("pad_char must not be empty")

    current = mode.measure(text)
    if truncate and current > width:
        cut, used = truncate_text(text, width, mode)
        return cut + pad_char * (width - used)

    missing = max(0, width - current)
    if side is PadSide.LEFT:
        return pad_char * missing + text
    if side is PadSide.CENTER:
        left = missing // 2
        return pad_char * left + text + pad_char * (missing - left)
    return text + pad_char * missing


def pad(
    text: str,
    width: int,
    which: str | PadSide | None = PadSide.RIGHT,
    pad_char: str = DEFAULT_PAD_CHAR,
    truncate: bool = False,
) -> str:
    """Pad text with pad_char to width characters.

    Args:
        text: Single-line text, may contain escape codes
        width: Target width
        which: Side that receives the padding: "right" (default), "left"
            or "center" (the smaller half goes left)
        pad_char: Fill string, should be one column wide
        truncate: Cut text that is wider than width

    Returns:
        Padded text

    Example:
        >>> pad("foo", 10, "center", ".")
        '...foo....'
    """
    return pad_text(text, width, CHARS, which, pad_char, truncate)


def mbpad(
    text: str,
    width: int,
    which: str | PadSide | None = PadSide.RIGHT,
    pad_char: str = DEFAULT_PAD_CHAR,
    truncate: bool = False,
) -> str:
    """Like pad(), but measures terminal columns."""
    return pad_text(text, width, COLUMNS, which, pad_char, truncate)


def pad_lines(
    text: str,
    width: int,
    which: str | PadSide | None = PadSide.RIGHT,
    pad_char: str = DEFAULT_PAD_CHAR,
    truncate: bool = False,
    wide: bool = True,
) -> str:
    """Pad every line of a multi-line text independently.

    Line breaks are kept as they are. An empty row after a trailing line
    break is not padded.
    """
    mode = COLUMNS if wide else CHARS
    parts = _LINE_SPLIT_RE.split(text)
    for i in range(0, len(parts), 2):
        if i == len(parts) - 1 and i > 0 and parts[i] == "":
            break
        parts[i] = pad_text(parts[i], width, mode, which, pad_char, truncate)
    return "".join(parts)
