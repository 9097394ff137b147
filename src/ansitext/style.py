"""Escape codes for named styles, built with rich.

The layout functions treat escape codes as opaque strings; this module
is a convenience for producing them from style definitions such as
``"bold red"`` or ``"black on yellow"``.
"""

import logging

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from .codes import split_grouped
from .errors import InvalidArgument

logger = logging.getLogger(__name__)

_COLOR_SYSTEMS = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}


def sgr(style: str | Style, color_system: str = "truecolor") -> str:
    """Return the escape code that switches on style.

    Args:
        style: Rich style definition or Style instance
        color_system: "standard", "256", "truecolor" or "windows"

    Returns:
        Opening SGR code, or "" for a style that changes nothing

    Example:
        >>> sgr("bold red", "standard")
        '\\x1b[1;31m'
    """
    system = _COLOR_SYSTEMS.get(color_system)
    if system is None:
        raise InvalidArgument(f"Unknown color system: {color_system!r}")
    if isinstance(style, str):
        try:
            style = Style.parse(style)
        except StyleSyntaxError as e:
            raise InvalidArgument(f"Invalid style {style!r}: {e}") from e

    # Render a placeholder and keep the opening code only
    parts = split_grouped(style.render("x", color_system=system))
    code = parts[1] if len(parts) > 1 else ""
    logger.debug("Style %s -> %r", style, code)
    return code
