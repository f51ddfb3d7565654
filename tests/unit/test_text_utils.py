"""
Tests for the identifier and literal normalization helpers.
"""
import pytest
from tableforge.parsers.utils import trim_quote, trim_bracket, replace_all, strip_control


class TestTrimQuote:

    @pytest.mark.parametrize("text,expected", [
        ("`id`", "id"),
        ("'utf8'", "utf8"),
        ('"name"', "name"),
        ("plain", "plain"),
        ("", ""),
    ])
    def test_strips_outer_quotes(self, text, expected):
        assert trim_quote(text) == expected

    def test_keeps_inner_qualifier_separator(self):
        # `db`.`tbl` keeps its inner backtick-dot-backtick
        assert trim_quote("`db`.`tbl`") == "db`.`tbl"

    def test_inner_quotes_untouched(self):
        assert trim_quote("'it''s'") == "it''s"


class TestTrimBracket:

    def test_length_clause(self):
        assert trim_bracket("(255)") == "255"

    def test_two_part_length(self):
        assert trim_bracket("(10,2)") == "10,2"

    def test_other_brackets(self):
        assert trim_bracket("[{x}]") == "x"

    def test_no_brackets(self):
        assert trim_bracket("255") == "255"


class TestReplaceAll:

    def test_deletes_control_characters(self):
        assert replace_all("a\r\nb", "\r", "", "\n", "") == "ab"

    def test_single_pass(self):
        # output of one pair is not matched by another
        assert replace_all("ab", "a", "b", "b", "c") == "bc"

    def test_longest_match_first(self):
        assert replace_all("\r\n", "\r\n", "NL", "\r", "CR") == "NL"

    def test_no_pairs(self):
        assert replace_all("abc") == "abc"

    def test_odd_arguments(self):
        with pytest.raises(ValueError):
            replace_all("abc", "a")


class TestStripControl:

    def test_tabs_and_newlines(self):
        assert strip_control("\tuser\r\n") == "user"

    def test_spaces_kept(self):
        assert strip_control("a b") == "a b"
