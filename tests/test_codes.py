"""Tests for escape code recognition."""

from ansitext import (
    detect,
    strip,
    extract_codes,
    split_codes,
    split_grouped,
    split_individual,
)
from ansitext.codes import iter_words, match_escape


class TestDetect:
    def test_plain(self):
        assert detect("red") is False

    def test_color(self):
        assert detect("\x1b[31mred") is True

    def test_stripped_text_has_no_codes(self):
        assert detect(strip("\x1b[1;31mbold\x1b[0m red")) is False

    def test_lone_escape_is_text(self):
        assert detect("\x1b]0;title\x07") is False

    def test_eight_bit_csi_is_text(self):
        assert detect("\x9b31mred") is False


class TestStrip:
    def test_simple(self):
        assert strip("\x1b[31mred") == "red"

    def test_multiple_params(self):
        assert strip("\x1b[38;5;196mhot\x1b[0m") == "hot"

    def test_empty_params(self):
        assert strip("a\x1b[mb") == "ab"

    def test_non_sgr_csi(self):
        assert strip("\x1b[2Jcleared") == "cleared"

    def test_idempotent(self):
        text = "\x1b[1m\x1b[31mx\x1b[0m y \x1b[4mz"
        assert strip(strip(text)) == strip(text)

    def test_malformed_left_alone(self):
        # Private mode marker is not numeric
        assert strip("\x1b[?25lx") == "\x1b[?25lx"


class TestExtractCodes:
    def test_extract(self):
        assert extract_codes("\x1b[31ma\x1b[1mb\x1b[0m") == "\x1b[31m\x1b[1m\x1b[0m"

    def test_no_codes(self):
        assert extract_codes("abc") == ""


class TestSplitCodes:
    def test_empty(self):
        assert split_codes("") == []

    def test_text_only(self):
        assert split_codes("a") == ["a"]

    def test_trailing_code(self):
        assert split_codes("a\x1b[31m") == ["a", "\x1b[31m"]

    def test_leading_code(self):
        assert split_codes("\x1b[31ma") == ["", "\x1b[31m", "a"]

    def test_wrapped_text(self):
        assert split_codes("\x1b[31ma\x1b[0m") == ["", "\x1b[31m", "a", "\x1b[0m"]

    def test_text_after(self):
        assert split_codes("\x1b[31ma\x1b[0mb") == ["", "\x1b[31m", "a", "\x1b[0m", "b"]

    def test_grouped(self):
        assert split_codes("\x1b[31m\x1b[0mb") == ["", "\x1b[31m\x1b[0m", "b"]

    def test_individual(self):
        assert split_codes("\x1b[31m\x1b[0mb", grouped=False) == [
            "",
            "\x1b[31m",
            "",
            "\x1b[0m",
            "b",
        ]

    def test_mark(self):
        assert split_codes("a\x1b[1mb", mark=True) == [
            ("a", False),
            ("\x1b[1m", True),
            ("b", False),
        ]

    def test_round_trip(self):
        text = "\x1b[1mx\x1b[31m\x1b[4m y\x1b[0m\x1b[z"
        assert "".join(split_grouped(text)) == text
        assert "".join(split_individual(text)) == text


class TestRecognizers:
    def test_match_escape_at_position(self):
        assert match_escape("ab\x1b[31mc", 2) == "\x1b[31m"

    def test_match_escape_not_at_position(self):
        assert match_escape("ab\x1b[31mc", 0) is None

    def test_words_fuse_codes(self):
        words = list(iter_words("\x1b[31mfoo\x1b[0m  bar\n"))
        assert words == ["\x1b[31mfoo\x1b[0m", "  ", "bar", "\n"]

    def test_words_cover_input(self):
        text = "a \x1b[1m b\t\tc\n\nd"
        assert "".join(iter_words(text)) == text

    def test_non_ascii_space_is_not_a_break(self):
        assert list(iter_words("a\u00a0b c")) == ["a\u00a0b", " ", "c"]
