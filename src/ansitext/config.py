"""Defaults and validated option models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import InvalidArgument

DEFAULT_WIDTH = 80
DEFAULT_TAB_WIDTH = 8
DEFAULT_PAD_CHAR = " "


class PadSide(str, Enum):
    """Side of the text that receives padding."""

    RIGHT = "right"
    LEFT = "left"
    CENTER = "center"

    @classmethod
    def parse(cls, value: "str | PadSide | None") -> "PadSide":
        """Resolve a side name or abbreviation.

        Accepts ``r``/``right``, ``l``/``left`` and ``c``/``center``/``centre``.
        None means right.
        """
        if value is None:
            return cls.RIGHT
        if isinstance(value, PadSide):
            return value
        side = _SIDE_ALIASES.get(str(value).lower())
        if side is None:
            raise InvalidArgument(f"Unknown pad side: {value!r}")
        return side


_SIDE_ALIASES = {
    "r": PadSide.RIGHT,
    "right": PadSide.RIGHT,
    "l": PadSide.LEFT,
    "left": PadSide.LEFT,
    "c": PadSide.CENTER,
    "center": PadSide.CENTER,
    "centre": PadSide.CENTER,
}


class WrapOptions(BaseModel):
    """Options for wrap() and mbwrap()."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(default=DEFAULT_WIDTH, ge=1)
    initial_indent: str = ""  # First line of each paragraph
    subsequent_indent: str = ""
    tab_width: int = Field(default=DEFAULT_TAB_WIDTH, ge=1)
    pad: bool = False  # Pad every output line to width
    return_stats: bool = False
    reset_colors: bool = True  # Reset before / replay after inserted breaks

    @classmethod
    def build(cls, **values) -> "WrapOptions":
        """Validate values, raising InvalidArgument instead of ValidationError."""
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidArgument(str(e)) from e


def check_width(width: int) -> int:
    """Reject negative widths for pad and truncate."""
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidArgument(f"Width must be an integer, got {width!r}")
    if width < 0:
        raise InvalidArgument(f"Width must not be negative, got {width}")
    return width
