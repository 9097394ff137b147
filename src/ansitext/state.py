"""SGR state tracking.

The state at a point of a string is the ordered list of SGR codes seen
since the last full reset. Replaying that list after a reset reproduces
the colors and attributes in effect at that point.
"""

from .codes import ESCAPE_RE, split_individual

RESET = "\x1b[0m"

_RESET_CODES = frozenset({RESET, "\x1b[m"})


def is_sgr(code: str) -> bool:
    """Check if code is a Select Graphic Rendition sequence."""
    return code.endswith("m") and ESCAPE_RE.fullmatch(code) is not None


def is_reset(code: str) -> bool:
    """Check if code is a full SGR reset."""
    return code in _RESET_CODES


def update_state(state: list[str], code: str) -> None:
    """Apply one escape code to state in place.

    A full reset clears the state, any other SGR code is appended and
    non-SGR codes are ignored.
    """
    if is_reset(code):
        state.clear()
    elif is_sgr(code):
        state.append(code)


def active_state(text: str) -> list[str]:
    """SGR codes active at the end of text."""
    state: list[str] = []
    for code in ESCAPE_RE.findall(text):
        update_state(state, code)
    return state


def active_state_before(text: str, offset: int) -> list[str]:
    """SGR codes active just before position offset of text.

    Only codes that end at or before offset are taken into account.
    """
    state: list[str] = []
    pos = 0
    for i, part in enumerate(split_individual(text)):
        end = pos + len(part)
        if end > offset:
            break
        if i % 2:
            update_state(state, part)
        pos = end
    return state


def replay(state: list[str]) -> str:
    """Codes that reproduce state after a reset."""
    return "".join(state)
