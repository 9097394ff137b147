"""Tests for SGR state tracking."""

from ansitext import RESET, active_state, active_state_before
from ansitext.state import is_reset, is_sgr, replay, update_state


class TestCodeKinds:
    def test_sgr(self):
        assert is_sgr("\x1b[1;31m")

    def test_cursor_code_is_not_sgr(self):
        assert not is_sgr("\x1b[2J")

    def test_resets(self):
        assert is_reset(RESET)
        assert is_reset("\x1b[m")
        assert not is_reset("\x1b[0;31m")


class TestUpdateState:
    def test_append_and_reset(self):
        state: list[str] = []
        update_state(state, "\x1b[1m")
        update_state(state, "\x1b[31m")
        assert state == ["\x1b[1m", "\x1b[31m"]
        update_state(state, "\x1b[0m")
        assert state == []

    def test_non_sgr_ignored(self):
        state = ["\x1b[1m"]
        update_state(state, "\x1b[2K")
        assert state == ["\x1b[1m"]


class TestActiveState:
    def test_end_of_text(self):
        assert active_state("\x1b[1mbold \x1b[0m\x1b[32mgreen") == ["\x1b[32m"]

    def test_plain(self):
        assert active_state("plain") == []

    def test_before_offset(self):
        text = "\x1b[31mred\x1b[1mbold\x1b[0m"
        assert active_state_before(text, 0) == []
        assert active_state_before(text, 5) == ["\x1b[31m"]
        assert active_state_before(text, 8) == ["\x1b[31m"]
        assert active_state_before(text, 12) == ["\x1b[31m", "\x1b[1m"]
        assert active_state_before(text, len(text)) == []

    def test_partial_code_not_counted(self):
        assert active_state_before("\x1b[31mred", 3) == []

    def test_replay(self):
        assert replay(["\x1b[1m", "\x1b[31m"]) == "\x1b[1m\x1b[31m"
