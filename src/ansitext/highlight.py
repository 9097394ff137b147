"""Color resets and highlighting that do not bleed into surrounding text."""

import logging
import re

from .codes import split_individual, strip
from .errors import InvalidArgument
from .state import RESET, active_state, active_state_before, is_sgr, replay

logger = logging.getLogger(__name__)


def add_color_resets(texts: list[str]) -> list[str]:
    """Make every text independently colorable.

    Each text but the last gets a trailing reset. Each text but the first
    starts by replaying the codes that were active at the end of the
    previous one, so the pieces can be placed side by side (e.g. columns)
    without one piece's colors leaking into another.

    Example:
        >>> add_color_resets(["\\x1b[31mfoo", "bar"])
        ['\\x1b[31mfoo\\x1b[0m', '\\x1b[31mbar']
    """
    result = []
    saved: list[str] = []
    for i, text in enumerate(texts):
        if i > 0 and saved:
            text = replay(saved) + text
        saved = active_state(text)
        if i < len(texts) - 1:
            text += RESET
        result.append(text)
    return result


def _compile(needle: str | re.Pattern) -> re.Pattern:
    if isinstance(needle, re.Pattern):
        return needle
    if not needle:
        raise InvalidArgument("Needle must not be empty")
    return re.compile(re.escape(needle))


def _raw_offsets(text: str) -> list[int]:
    """Map every position of strip(text) to its position in text."""
    offsets = []
    pos = 0
    for i, part in enumerate(split_individual(text)):
        if i % 2 == 0:
            offsets.extend(range(pos, pos + len(part)))
        pos += len(part)
    return offsets


def _reapply(segment: str, code: str) -> str:
    """Repeat code after every SGR code inside segment so the highlight holds."""
    parts = []
    for i, part in enumerate(split_individual(segment)):
        parts.append(part)
        if i % 2 and is_sgr(part):
            parts.append(code)
    return "".join(parts)


def _highlight(text: str, needle: str | re.Pattern, code: str, count: int) -> str:
    pattern = _compile(needle)
    plain = strip(text)
    spans = []
    for match in pattern.finditer(plain):
        if match.end() == match.start():
            continue
        spans.append(match.span())
        if len(spans) == count:
            break
    if not spans:
        return text

    logger.debug("Highlighting %d match(es) of %r", len(spans), pattern.pattern)
    offsets = _raw_offsets(text)
    result = []
    pos = 0
    for start, end in spans:
        raw_start = offsets[start]
        # Right after the last matched character
        raw_end = offsets[end - 1] + 1
        state = active_state_before(text, raw_end)
        result.append(text[pos:raw_start])
        result.append(RESET + code)
        result.append(_reapply(text[raw_start:raw_end], code))
        result.append(RESET + replay(state))
        pos = raw_end
    result.append(text[pos:])
    return "".join(result)


def highlight(text: str, needle: str | re.Pattern, code: str) -> str:
    """Highlight the first occurrence of needle in text.

    Matching is done on the text with escape codes removed, so a needle
    is found even when codes sit inside it. Such inner codes are kept and
    the highlight code is repeated after each of them.

    Args:
        text: Text to search, may contain escape codes
        needle: Literal substring or compiled pattern
        code: Escape code that starts the highlight (see ansitext.sgr())

    Returns:
        Text with the match wrapped in reset + code ... reset + previous
        colors, or text unchanged when there is no match
    """
    return _highlight(text, needle, code, count=1)


def highlight_all(text: str, needle: str | re.Pattern, code: str) -> str:
    """Like highlight(), but highlights every non-overlapping occurrence."""
    return _highlight(text, needle, code, count=0)
