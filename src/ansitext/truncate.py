"""Truncation that never splits or drops escape codes."""

from .codes import split_individual
from .config import check_width
from .width import CHARS, COLUMNS, WidthMode


def truncate_text(text: str, width: int, mode: WidthMode) -> tuple[str, int]:
    """Truncate text to width, keeping every escape code.

    Codes after the cut point are still emitted so that trailing resets
    survive. Zero-width characters right after the last kept character
    are kept, even when codes sit between them.

    Args:
        text: Single-line text to truncate
        width: Target width
        mode: CHARS or COLUMNS

    Returns:
        (truncated text, width actually used)
    """
    check_width(width)
    total = mode.measure(text)
    if total <= width:
        return text, total

    result = []
    used = 0
    append = True  # Whether more text may follow
    for i, part in enumerate(split_individual(text)):
        if i % 2:
            result.append(part)
            continue
        if not append:
            continue
        part_width = mode.plain(part)
        if used + part_width <= width:
            result.append(part)
            used += part_width
        else:
            piece, piece_width = mode.cut(part, width - used)
            result.append(piece)
            used += piece_width
            append = False

    return "".join(result), used


def trunc(text: str, width: int, return_width: bool = False) -> str | tuple[str, int]:
    """Truncate text to width characters while keeping all escape codes.

    Args:
        text: Single-line text to truncate
        width: Maximum number of characters
        return_width: Also return the width actually used

    Returns:
        Truncated text, or (text, width) if return_width is set

    Example:
        >>> trunc("\\x1b[31mred text\\x1b[0m", 5)
        '\\x1b[31mred t\\x1b[0m'
    """
    result = truncate_text(text, width, CHARS)
    return result if return_width else result[0]


def mbtrunc(text: str, width: int, return_width: bool = False) -> str | tuple[str, int]:
    """Like trunc(), but measures terminal columns.

    The width used can fall short of width when a wide character sits
    on the boundary.
    """
    result = truncate_text(text, width, COLUMNS)
    return result if return_width else result[0]
