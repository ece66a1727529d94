"""Tests for truncate, wrap and fill."""

import pytest

from cellwidth.layout import fill_left, fill_right, truncate, wrap
from cellwidth.measure import string_width

COOK = "\U0001f469\u200d\U0001f373"


class TestTruncate:
    def test_smaller(self):
        assert truncate("あいうえお", 10, "...") == "あいうえお"

    def test_not_needed(self):
        assert truncate("あいうえおあい", 80, "...") == "あいうえおあい"

    def test_truncate(self):
        s = "あいうえおあいうえおえおおおおおおおおおおおおおおおおおおおおおおおおおおおおおお"
        expected = "あいうえおあいうえおえおおおおおおおおおおおおおおおおおおおおおおおおおおお..."
        out = truncate(s, 80, "...")
        assert out == expected
        assert string_width(out) == 79

    def test_fit(self):
        s = "aあいうえおあいうえおえおおおおおおおおおおおおおおおおおおおおおおおおおおおおおお"
        expected = "aあいうえおあいうえおえおおおおおおおおおおおおおおおおおおおおおおおおおおお..."
        out = truncate(s, 80, "...")
        assert out == expected
        assert string_width(out) == 80

    def test_just_fit(self):
        s = "あいうえおあいうえおえおおおおおおおおおおおおおおおおおおおおおおおおおおおおお"
        out = truncate(s, 80, "...")
        assert out == s
        assert string_width(out) == 80

    def test_cluster_on_boundary_is_kept(self):
        assert truncate("abcdef", 5, "..") == "abc.."

    def test_wide_char_not_split(self):
        assert truncate("aあい", 2) == "a"

    def test_combining_sequence_not_split(self):
        assert truncate("e\u0301e\u0301e", 2) == "e\u0301e\u0301"

    def test_zwj_sequence_not_split(self):
        assert truncate(f"ab{COOK}", 3) == "ab"
        assert truncate(f"ab{COOK}c", 4) == f"ab{COOK}"

    def test_without_zwj(self):
        assert truncate(f"ab{COOK}", 5, zero_width_joiner=False) == f"ab\U0001f469\u200d"

    def test_empty_tail(self):
        assert truncate("hello world", 5) == "hello"

    def test_zero_budget(self):
        assert truncate("あいう", 3, "...") == "..."

    def test_tail_wider_than_width(self):
        assert truncate("abcdef", 2, "...") == ".."

    def test_tail_wider_than_width_zero(self):
        assert truncate("abcdef", 0, "...") == ""
        assert truncate("abcdef", -3, "...") == ""

    def test_east_asian_tail(self):
        # HORIZONTAL ELLIPSIS is ambiguous
        assert truncate("abcdef", 4, "…") == "abc…"
        assert truncate("abcdef", 4, "…", east_asian_width=True) == "ab…"

    @pytest.mark.parametrize("text", ["hello world", "あいうえお", f"a{COOK}bあ\u0301c", ""])
    def test_never_exceeds_width(self, text):
        for w in range(0, 14):
            assert string_width(truncate(text, w)) <= w
            assert string_width(truncate(text, w, "...")) <= max(w, 0)

    @pytest.mark.parametrize("text", ["hello", "あいう", COOK])
    def test_noop_when_fits(self, text):
        w = string_width(text)
        assert truncate(text, w, "...") == text
        assert truncate(text, w + 3, "...") == text


class TestWrap:
    def test_wrap(self):
        s = (
            "東京特許許可局局長はよく柿喰う客だ/東京特許許可局局長はよく柿喰う客だ\n"
            "123456789012345678901234567890\n"
            "\n"
            "END"
        )
        expected = (
            "東京特許許可局局長はよく柿喰う\n"
            "客だ/東京特許許可局局長はよく\n"
            "柿喰う客だ\n"
            "123456789012345678901234567890\n"
            "\n"
            "END"
        )
        assert wrap(s, 30) == expected

    def test_short_lines_unchanged(self):
        s = "123456789012345678901234567890\n\nEND"
        assert wrap(s, 30) == s

    def test_breaks_mid_word(self):
        assert wrap("abcdef", 3) == "abc\ndef"

    def test_explicit_newline_resets_column(self):
        assert wrap("ab\ncd", 1) == "a\nb\nc\nd"

    def test_overwide_cluster_breaks_before(self):
        assert wrap("あいう", 1) == "\nあ\nい\nう"
        assert wrap("あ", 1) == "\nあ"

    def test_zero_width_line(self):
        assert wrap("abc", 0) == "\na\nb\nc"

    def test_overwide_after_newline(self):
        assert wrap("a\nあ", 1) == "a\n\nあ"

    def test_empty(self):
        assert wrap("", 5) == ""

    def test_zero_width_stays_with_base(self):
        assert wrap("abe\u0301", 2) == "ab\ne\u0301"

    def test_zwj_sequence_kept_whole(self):
        assert wrap(COOK + COOK, 2) == f"{COOK}\n{COOK}"

    def test_crlf_preserved(self):
        assert wrap("ab\r\ncd", 5) == "ab\r\ncd"

    def test_east_asian(self):
        assert wrap("☆☆☆", 4) == "☆☆☆"
        assert wrap("☆☆☆", 4, east_asian_width=True) == "☆☆\n☆"


class TestFill:
    def test_fill_left(self):
        assert fill_left("あxいうえお", 15) == "    あxいうえお"

    def test_fill_left_fit(self):
        assert fill_left("あいうえお", 10) == "あいうえお"

    def test_fill_right(self):
        assert fill_right("あxいうえお", 15) == "あxいうえお    "

    def test_fill_right_fit(self):
        assert fill_right("あいうえお", 10) == "あいうえお"

    def test_never_truncates(self):
        assert fill_left("あいうえお", 3) == "あいうえお"
        assert fill_right("あいうえお", 3) == "あいうえお"
        assert fill_right("abc", -1) == "abc"

    def test_east_asian(self):
        assert fill_right("☆", 3) == "☆  "
        assert fill_right("☆", 3, east_asian_width=True) == "☆ "
        assert fill_left("☆", 3, east_asian_width=True) == " ☆"

    def test_zwj(self):
        assert fill_right(COOK, 4) == COOK + "  "
        assert fill_right(COOK, 4, zero_width_joiner=False) == COOK
