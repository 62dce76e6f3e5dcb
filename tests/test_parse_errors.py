"""Tests for parser error kinds, positions, and formatting."""

from __future__ import annotations

import pytest

from doxparse.errors import ParseError, UnexpectedEndOfInput, UnexpectedInput
from doxparse.parser import parse, parse_items
from doxparse.tokens import Position, Span, Token, TokenType


def _token(tt: TokenType, source: str, start: int, end: int) -> Token:
    return Token(tt, Span(Position(1, start + 1, start), Position(1, end + 1, end)), source)


class TestDirectionErrors:
    @pytest.mark.parametrize("body", ["inout]", "x]", "in", "", "in,out,in]"])
    def test_bad_bracket_body(self, body):
        with pytest.raises(UnexpectedInput) as exc_info:
            parse(f"@param[{body} x")
        err = exc_info.value
        assert err.found == body
        assert err.expected == ("in]", "out]")

    def test_trailing_text_after_bracket(self):
        with pytest.raises(UnexpectedInput, match="in\\]x"):
            parse("@param[in]x name")

    def test_error_span_points_at_body(self):
        with pytest.raises(UnexpectedInput) as exc_info:
            parse("text\n  @param[sideways] x")
        span = exc_info.value.span
        assert span.start.line == 2
        assert span.start.column == 10
        assert span.end.column == 19

    def test_no_error_inside_code(self):
        parse("@code\n@param[sideways] x\n@endcode")


class TestGroupErrors:
    def test_unknown_delimiter(self):
        source = "@("
        tokens = [
            _token(TokenType.MARKER, source, 0, 1),
            _token(TokenType.DELIMITER, source, 1, 2),
        ]
        with pytest.raises(UnexpectedInput) as exc_info:
            parse_items(tokens)
        assert exc_info.value.found == "("
        assert exc_info.value.expected == ("{", "}")

    def test_known_delimiters_pass(self):
        parse("@{ @} @} @{")


class TestErrorHierarchy:
    def test_unexpected_input_is_parse_error(self):
        with pytest.raises(ParseError):
            parse("@param[up] x")

    def test_end_of_input_is_parse_error(self):
        span = Span(Position(1, 1, 0), Position(1, 1, 0))
        err = UnexpectedEndOfInput(span, "")
        assert isinstance(err, ParseError)
        assert err.message == "unexpected end of input"


class TestErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse("see @param[up] value")
        formatted = exc_info.value.format()
        assert "see @param[up] value" in formatted

    def test_format_contains_error_prefix(self):
        with pytest.raises(ParseError) as exc_info:
            parse("@param[up] x")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(ParseError) as exc_info:
            parse("@param[up] x")
        assert "1:8" in exc_info.value.format()

    def test_format_with_filename(self):
        with pytest.raises(ParseError) as exc_info:
            parse("@param[up] x")
        assert "widget.h:1:8" in exc_info.value.format("widget.h")

    def test_format_underlines_span(self):
        with pytest.raises(ParseError) as exc_info:
            parse("@param[up] x")
        last_line = exc_info.value.format().splitlines()[-1]
        assert last_line.endswith(" " * 7 + "^^^")

    def test_message_lists_expected(self):
        with pytest.raises(ParseError, match="expected one of 'in\\]', 'out\\]'"):
            parse("@param[up] x")

    def test_format_layout(self):
        with pytest.raises(ParseError) as exc_info:
            parse("brief\n@param[up] x")
        assert exc_info.value.format("a.h").splitlines() == [
            "error: unexpected 'up]', expected one of 'in]', 'out]'",
            "  --> a.h:2:8",
            "  |",
            "2 | @param[up] x",
            "  |        ^^^",
        ]

    def test_source_line(self):
        with pytest.raises(ParseError) as exc_info:
            parse("one\ntwo @param[up] x\nthree")
        assert exc_info.value.source_line() == "two @param[up] x"
