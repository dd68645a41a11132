"""Unit tests for span classification and line parsing.

WHY: The parser decides what is dialogue and what is a cue. A wrong
kind means wrong bolding in the output and a wrong speech density.

HOW: Tests cover each inline command, each container command, the
lenient fallback for unknown container commands, and the strict
failure for unknown inline commands.
"""

import logging

import pytest

from scriptmark.core.ir import Container, ContainerKind, Span
from scriptmark.core.parser import parse_container, parse_span
from scriptmark.errors import InvalidLineError, UnknownInlineCommandError
from scriptmark.formatters.markdown import render_container


class TestParseSpan:

    def test_normal(self):
        assert parse_span("This is some text") == Span.normal("This is some text")

    def test_normal_is_trimmed_and_unescaped(self):
        assert parse_span(r"  wait\ldots{}  ") == Span.normal("wait...")

    def test_inline_direction(self):
        assert parse_span(r"\direct{an inline!}") == Span.inline("an inline!")

    def test_emphasis(self):
        assert parse_span(r"\ul{EMPHASIS}") == Span.emphasis("EMPHASIS")

    def test_argument_is_normalized(self):
        assert parse_span(r"\direct{  slowly\ldots   }") == Span.inline("slowly...")

    def test_unknown_inline_command(self):
        with pytest.raises(UnknownInlineCommandError) as excinfo:
            parse_span(r"\textbf{loud}")
        assert excinfo.value.command == "textbf"
        assert excinfo.value.fragment == r"\textbf{loud}"


class TestParseContainer:

    def test_one_span(self):
        container = parse_container(r"\spoken{This is some text.}")
        assert container == Container(ContainerKind.SPOKEN, [Span.normal("This is some text.")])

    def test_multiple_spans_keep_order(self):
        container = parse_container(
            r"\spoken{This is some text. \direct{an inline direction} And some more dialogue.}"
        )
        assert container.spans == [
            Span.normal("This is some text."),
            Span.inline("an inline direction"),
            Span.normal("And some more dialogue."),
        ]

    def test_leading_inline_drops_empty_piece(self):
        container = parse_container(r"\listener{\direct{slowly, quietly} some text?}")
        assert container == Container(
            ContainerKind.LISTENER_DIALOGUE,
            [Span.inline("slowly, quietly"), Span.normal("some text?")],
        )

    def test_whitespace_between_commands_is_an_empty_span(self):
        container = parse_container(r"\spoken{\direct{sighs} \ul{fine}}")
        assert container.spans == [
            Span.inline("sighs"), Span.normal(""), Span.emphasis("fine"),
        ]
        assert render_container(container) == "*(sighs)* **** **/fine/**"

    def test_adjacent_commands_have_no_empty_span(self):
        container = parse_container(r"\spoken{\direct{sighs}\ul{fine}}")
        assert container.spans == [Span.inline("sighs"), Span.emphasis("fine")]

    @pytest.mark.parametrize("command,kind", [
        ("spoken", ContainerKind.SPOKEN),
        ("stagedir", ContainerKind.STAGE_DIR),
        ("listener", ContainerKind.LISTENER_DIALOGUE),
        ("sfx", ContainerKind.SFX),
    ])
    def test_container_kinds(self, command, kind):
        assert parse_container("\\" + command + "{text}").kind is kind

    def test_href_inside_line_becomes_link(self):
        container = parse_container(r"\stagedir{See \href{https://example.com}{here}.}")
        assert container.spans == [Span.normal("See [here](https://example.com).")]


class TestLeniencyAndErrors:

    def test_unknown_container_command_is_plain_text(self, caplog):
        with caplog.at_level(logging.WARNING, logger="scriptmark.core.parser"):
            container = parse_container(r"\narrator{Once upon a time.}")
        assert container.kind is ContainerKind.PLAIN_TEXT
        assert container.spans == [Span.normal("Once upon a time.")]
        assert "narrator" in caplog.text

    def test_unknown_inline_command_fails_the_line(self):
        line = r"\spoken{Hello \textbf{there}}"
        with pytest.raises(InvalidLineError) as excinfo:
            parse_container(line)
        assert excinfo.value.line == line
        assert isinstance(excinfo.value.__cause__, UnknownInlineCommandError)

    def test_same_name_lenient_at_line_position(self):
        container = parse_container(r"\textbf{there}")
        assert container.kind is ContainerKind.PLAIN_TEXT

    @pytest.mark.parametrize("line", [
        "just some prose",
        r"\spoken{unterminated",
        r"\spoken text}",
    ])
    def test_invalid_line(self, line):
        with pytest.raises(InvalidLineError):
            parse_container(line)
