"""Unit tests for delimiter-preserving partitioning."""

import re

import pytest

from scriptmark.core.parser import INLINE_COMMAND_RE
from scriptmark.core.partition import regex_partition


class TestRegexPartition:

    def test_keeps_delimiters_and_tail(self):
        assert regex_partition(re.compile("C+"), "ABCCQBCPCCCS") == [
            "AB", "CC", "QB", "C", "P", "CCC", "S",
        ]

    def test_trailing_delimiter_has_no_empty_tail(self):
        assert regex_partition("C+", "ABCCQBCPCCC") == ["AB", "CC", "QB", "C", "P", "CCC"]

    def test_leading_delimiter_gives_empty_first_piece(self):
        assert regex_partition("C+", "CCA") == ["", "CC", "A"]

    def test_no_match(self):
        assert regex_partition("Z", "ABC") == ["ABC"]

    def test_empty_input(self):
        assert regex_partition("C", "") == []

    def test_inline_commands(self):
        body = r"Hi \direct{softly} there \ul{you}"
        assert regex_partition(INLINE_COMMAND_RE, body) == [
            "Hi ", r"\direct{softly}", " there ", r"\ul{you}",
        ]

    def test_unbalanced_braces(self):
        assert regex_partition(INLINE_COMMAND_RE, r"\a{b\c}d}") == ["", r"\a{b\c}", "d}"]


class TestReconstruction:
    """Joining the pieces always gives back the input."""

    @pytest.mark.parametrize("pattern", ["C+", "C*", "[AB]", r"\\.+?\{.*?\}", "^", "$"])
    @pytest.mark.parametrize("text", [
        "",
        "ABCCQBCPCCCS",
        "CCCC",
        r"\spoken{a \direct{b} c \ul{d}}",
        "ねぇ、大丈夫？",
        r"\a{b\c}d}",
        "\\\\{}",
        r"\direct{a}\ul{b}",
        r"{\ul{x}",
        r"\ul{}}{",
        "\\",
        "\\spoken{line}\n\\sfx{next}",
    ])
    def test_lossless(self, pattern, text):
        assert "".join(regex_partition(pattern, text)) == text
