"""Exception types."""


class AnsiTextError(Exception):
    """Base class for ansitext errors."""

    pass


class InvalidArgument(AnsiTextError, ValueError):
    """Raised when a width, side, option or style makes no sense."""

    pass
