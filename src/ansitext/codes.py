"""Escape sequence recognition and splitting.

Only the two-character CSI form (ESC ``[``) is recognized: optional numeric
parameters separated by ``;`` and a single final byte in ``@``..``~``.
Anything else that looks like an escape is left alone as ordinary text.
"""

import re
from collections.abc import Iterator

# One escape code
ESCAPE_RE = re.compile(r"\x1b\[(?:[0-9]+(?:;[0-9]*)*)?[@-~]")

# A word: ASCII non-whitespace fused with adjacent codes, or a whitespace run
WORD_RE = re.compile(f"(?:{ESCAPE_RE.pattern}|\\S)+|\\s+", re.ASCII)

_SPLIT_GROUPED_RE = re.compile(f"((?:{ESCAPE_RE.pattern})+)")
_SPLIT_INDIVIDUAL_RE = re.compile(f"({ESCAPE_RE.pattern})")


def match_escape(text: str, pos: int = 0) -> str | None:
    """Return the escape code starting exactly at pos, or None."""
    match = ESCAPE_RE.match(text, pos)
    return match.group(0) if match else None


def iter_words(text: str) -> Iterator[str]:
    """Yield the word and whitespace tokens of text, in order.

    Every character of text ends up in exactly one token.
    """
    for match in WORD_RE.finditer(text):
        yield match.group(0)


def detect(text: str) -> bool:
    """Check whether text contains any escape code."""
    return ESCAPE_RE.search(text) is not None


def strip(text: str) -> str:
    """Remove all escape codes from text."""
    return ESCAPE_RE.sub("", text)


def extract_codes(text: str) -> str:
    """Return all escape codes of text concatenated, without the text."""
    return "".join(ESCAPE_RE.findall(text))


def _split(pattern: re.Pattern, text: str) -> list[str]:
    parts = pattern.split(text)
    # Trailing empty text slots are dropped, leading ones are kept
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def split_grouped(text: str) -> list[str]:
    """Split text into alternating text and code slots.

    Consecutive codes share one slot. Text is at even indices and codes
    at odd indices:

        >>> split_grouped("\\x1b[31m\\x1b[1mb")
        ['', '\\x1b[31m\\x1b[1m', 'b']
    """
    return _split(_SPLIT_GROUPED_RE, text)


def split_individual(text: str) -> list[str]:
    """Like split_grouped(), but every code gets its own slot.

    Codes that were adjacent in text are separated by an empty text slot.
    """
    return _split(_SPLIT_INDIVIDUAL_RE, text)


def split_codes(
    text: str,
    grouped: bool = True,
    mark: bool = False,
) -> list[str] | list[tuple[str, bool]]:
    """Split text into alternating text and escape code parts.

    Args:
        text: Text to split
        grouped: Put consecutive codes into one part
        mark: Return (part, is_code) pairs instead of bare strings

    Returns:
        Parts whose concatenation is text. Codes are at odd indices.

    Example:
        >>> split_codes("\\x1b[31ma\\x1b[0m")
        ['', '\\x1b[31m', 'a', '\\x1b[0m']
    """
    parts = split_grouped(text) if grouped else split_individual(text)
    if mark:
        return [(part, i % 2 == 1) for i, part in enumerate(parts)]
    return parts
