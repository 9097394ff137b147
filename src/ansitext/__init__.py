"""
ansitext - Layout routines for text containing ANSI escape codes.

Measures, wraps, pads, truncates and highlights text with embedded color
codes without splitting the codes or letting colors bleed across lines.

Example:
    from ansitext import mbwrap, mbpad, highlight, sgr

    lines = mbwrap(colored_text, 40).split("\\n")
    column = [mbpad(line, 40) for line in lines]
    marked = highlight(colored_text, "error", sgr("reverse"))
"""

__version__ = "0.7.0"

# Escape code recognition
from .codes import (
    detect,
    strip,
    extract_codes,
    split_codes,
    split_grouped,
    split_individual,
)

# Measurement
from .width import (
    WidthMeasurement,
    length,
    display_width,
    measure,
)

# SGR state
from .state import (
    RESET,
    active_state,
    active_state_before,
)

# Layout
from .wrap import WrapStats, wrap, mbwrap
from .truncate import trunc, mbtrunc
from .pad import pad, mbpad, pad_lines

# Color continuity
from .highlight import add_color_resets, highlight, highlight_all

# Styles and options
from .style import sgr
from .config import PadSide, WrapOptions
from .errors import AnsiTextError, InvalidArgument

__all__ = [
    # Version
    "__version__",
    # Codes
    "detect",
    "strip",
    "extract_codes",
    "split_codes",
    "split_grouped",
    "split_individual",
    # Measurement
    "WidthMeasurement",
    "length",
    "display_width",
    "measure",
    # SGR state
    "RESET",
    "active_state",
    "active_state_before",
    # Layout
    "WrapStats",
    "wrap",
    "mbwrap",
    "trunc",
    "mbtrunc",
    "pad",
    "mbpad",
    "pad_lines",
    # Color continuity
    "add_color_resets",
    "highlight",
    "highlight_all",
    # Styles and options
    "sgr",
    "PadSide",
    "WrapOptions",
    "AnsiTextError",
    "InvalidArgument",
]
