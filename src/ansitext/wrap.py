"""Word wrapping for text containing escape codes.

Text is reflowed at whitespace only. Escape codes travel with the word
they touch and never count toward the width. Wrapping re-measures every
word, so it is a lot slower than textwrap on plain text.
"""

import logging
import re
from dataclasses import dataclass

from .codes import ESCAPE_RE, iter_words, strip
from .config import DEFAULT_WIDTH, WrapOptions
from .pad import pad_lines
from .state import RESET, replay, update_state
from .width import CHARS, COLUMNS, WidthMode

logger = logging.getLogger(__name__)

_NEWLINE_RE = re.compile(r"\r?\n")
_WHITESPACE = " \t\n\r\f\v"


@dataclass
class WrapStats:
    """Word widths seen while wrapping."""

    min_word_width: int = 0
    max_word_width: int = 0


def wrap_text(text: str, mode: WidthMode, options: WrapOptions) -> str | tuple[str, WrapStats]:
    """Wrap text according to options, measuring words with mode.

    Each whitespace run collapses to one space, except runs holding two
    or more line breaks, which are kept as paragraph breaks. A line is
    broken when a token pushes it past width + 1 columns.
    """
    width = options.width
    text = text.expandtabs(options.tab_width)
    words = list(iter_words(text))
    logger.debug("Wrapping %d tokens to %d %s", len(words), width, mode.name)

    result: list[str] = []
    state: list[str] = []  # Active SGR codes at the end of result
    word_widths: list[int] = []
    col = 0

    if options.initial_indent:
        result.append(options.initial_indent)
        col = mode.measure(options.initial_indent)
    line_start = col  # Column after the indent of the current line
    has_words = False  # Current line holds visible text
    space_at = -1  # Index in result of the collapsed space ending the line

    for i, word in enumerate(words):
        is_last = i == len(words) - 1
        is_ws = word[0] in _WHITESPACE
        is_word = not is_ws and strip(word) != ""
        is_paragraph = False
        num_nl = 0

        if is_ws:
            num_nl = len(_NEWLINE_RE.findall(word))
            if num_nl >= 2:
                is_paragraph = True
                w = 0
            else:
                word = " "
                w = 1
        else:
            w = mode.measure(word)
            if is_word:
                word_widths.append(w)
        col += w

        if is_paragraph:
            result.append("\n" * num_nl)
            col = 0
            if options.initial_indent and not is_last:
                result.append(options.initial_indent)
                col = mode.measure(options.initial_indent)
            line_start = col
            has_words = False
        elif col > width + 1:
            # Drop the space at the end of the line
            if space_at == len(result) - 1:
                result.pop()
                space_at = -1
            if not has_words:
                # Too wide for any line: keep it on this one
                col = line_start
                if not is_ws:
                    result.append(word)
                    col += w
                    has_words = is_word
            else:
                colored = options.reset_colors and bool(state)
                if colored:
                    result.append(RESET)
                result.append("\n")
                col = 0
                if options.subsequent_indent:
                    result.append(options.subsequent_indent)
                    col = mode.measure(options.subsequent_indent)
                line_start = col
                if colored:
                    result.append(replay(state))
                has_words = False
                if not is_ws:
                    result.append(word)
                    col += w
                    has_words = is_word
        elif not is_last or not is_ws:
            if is_ws:
                space_at = len(result)
            elif is_word:
                has_words = True
            result.append(word)
        elif num_nl == 1:
            # Trailing whitespace is dropped, but a single line break stays
            result.append("\n")

        if not is_ws:
            for code in ESCAPE_RE.findall(word):
                update_state(state, code)

    wrapped = "".join(result)
    if options.pad:
        wrapped = pad_lines(wrapped, width, wide=mode is COLUMNS)

    if options.return_stats:
        stats = WrapStats(
            min_word_width=min(word_widths, default=0),
            max_word_width=max(word_widths, default=0),
        )
        return wrapped, stats
    return wrapped


def wrap(text: str, width: int = DEFAULT_WIDTH, **options) -> str | tuple[str, WrapStats]:
    """Wrap text to width characters, keeping escape codes intact.

    Args:
        text: Text to wrap
        width: Target line width
        **options: Any WrapOptions field: initial_indent, subsequent_indent,
            tab_width, pad, return_stats, reset_colors

    Returns:
        Wrapped text, or (text, WrapStats) when return_stats is set

    Raises:
        InvalidArgument: width or an option is out of range
    """
    return wrap_text(text, CHARS, WrapOptions.build(width=width, **options))


def mbwrap(text: str, width: int = DEFAULT_WIDTH, **options) -> str | tuple[str, WrapStats]:
    """Like wrap(), but measures terminal columns so wide characters count double.

    Text without spaces between words (e.g. Chinese) has to be segmented
    by the caller first.
    """
    return wrap_text(text, COLUMNS, WrapOptions.build(width=width, **options))
