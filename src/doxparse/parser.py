"""doxparse parser — converts a token stream into grammar items."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from doxparse.errors import UnexpectedInput
from doxparse.items import GroupEnd, GroupStart, Item, Notation, Text
from doxparse.lexer import tokenize
from doxparse.notations import (
    CODE_TAG,
    DIRECTION_EXPECTED,
    DIRECTIONS,
    ENDCODE_TAG,
    PARAM_TAG,
    ArgumentStrategy,
    build_strategies,
    strategy_for,
)
from doxparse.tokens import GROUP_CLOSE, GROUP_OPEN, Position, Span, Token, TokenType

logger = logging.getLogger(__name__)


class Parser:
    """Single forward pass over a token list, one token of lookahead.

    Verbatim-code mode is not tracked separately: it is read off the tail of
    the items built so far, so recognising @endcode ends the region.
    """

    def __init__(
        self,
        tokens: list[Token],
        strategies: Mapping[str, ArgumentStrategy] | None = None,
    ) -> None:
        self._tokens = tokens
        self._strategies = build_strategies(strategies)
        self._items: list[Item] = []
        self._skip = 0
        self._parts: list[str] | None = None
        self._run_span: Span | None = None

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _peek(self, index: int) -> Token | None:
        if index < len(self._tokens):
            return self._tokens[index]
        return None

    def _tail(self) -> Item | None:
        return self._items[-1] if self._items else None

    def _ends_code(self, index: int) -> bool:
        tok = self._tokens[index]
        nxt = self._peek(index + 1)
        return (
            tok.type == TokenType.MARKER
            and nxt is not None
            and nxt.type == TokenType.WORD
            and nxt.text == ENDCODE_TAG
        )

    def _in_code_region(self) -> bool:
        items = self._items
        if items and _is_code(items[-1]):
            return True
        return len(items) >= 2 and isinstance(items[-1], Text) and _is_code(items[-2])

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def parse(self) -> list[Item]:
        for index, tok in enumerate(self._tokens):
            if self._skip > 0:
                self._skip -= 1
                continue

            if not self._ends_code(index) and self._in_code_region():
                self._append_verbatim(tok)
                continue

            if tok.type == TokenType.MARKER:
                self._parse_marker(index)
            elif tok.type == TokenType.WORD:
                self._append_word(tok)
            elif tok.type == TokenType.WS:
                self._append_whitespace(tok)
            else:
                # NEWLINE and stray DELIMITER only continue an open text run
                self._append_to_text(tok)

        self._close_run()
        return self._items

    # ------------------------------------------------------------------
    # Text runs
    #
    # The open run (always the tail item) is buffered in ``_parts``; the
    # tail Text is a placeholder until ``_close_run`` joins it.
    # ------------------------------------------------------------------

    def _push(self, item: Item) -> None:
        self._close_run()
        self._items.append(item)

    def _open_run(self, value: str, span: Span) -> None:
        self._push(Text("", span))
        self._parts = [value]
        self._run_span = span

    def _extend_run(self, value: str, span: Span) -> None:
        self._parts.append(value)
        self._run_span = Span(self._run_span.start, span.end)

    def _close_run(self) -> None:
        if self._parts is None:
            return
        self._items[-1] = Text("".join(self._parts), self._run_span)
        self._parts = None

    def _append_verbatim(self, tok: Token) -> None:
        if isinstance(self._tail(), Text):
            self._extend_run(tok.text, tok.span)
        else:
            logger.debug("verbatim region opened at line %d", tok.span.start.line)
            self._open_run(tok.text, tok.span)

    def _append_word(self, tok: Token) -> None:
        if isinstance(self._tail(), Text):
            self._extend_run(tok.text, tok.span)
        else:
            self._open_run(tok.text, tok.span)

    def _append_whitespace(self, tok: Token) -> None:
        # Any run collapses to a single space
        tail = self._tail()
        if isinstance(tail, Text):
            self._extend_run(" ", tok.span)
        elif tail is None or (isinstance(tail, Notation) and tail.has_argument):
            self._open_run(" ", tok.span)
        else:
            end = tok.span.end
            self._open_run("", Span(end, end))

    def _append_to_text(self, tok: Token) -> None:
        if isinstance(self._tail(), Text):
            self._extend_run(tok.text, tok.span)

    # ------------------------------------------------------------------
    # Markers
    # ------------------------------------------------------------------

    def _parse_marker(self, index: int) -> None:
        marker = self._tokens[index]
        nxt = self._peek(index + 1)

        if nxt is not None and nxt.type == TokenType.DELIMITER:
            span = Span(marker.span.start, nxt.span.end)
            if nxt.text == GROUP_OPEN:
                self._push(GroupStart(span))
            elif nxt.text == GROUP_CLOSE:
                self._push(GroupEnd(span))
            else:
                logger.debug("bad group marker %r at line %d", nxt.text, nxt.span.start.line)
                raise UnexpectedInput(nxt.text, (GROUP_OPEN, GROUP_CLOSE), nxt.span, nxt.source)
            self._skip = 1
            return

        if nxt is not None and nxt.type == TokenType.WORD:
            self._parse_notation(index, marker, nxt)
            return

        logger.debug("dropping marker %r at line %d", marker.text, marker.span.start.line)

    def _parse_notation(self, index: int, marker: Token, keyword: Token) -> None:
        word = keyword.text
        meta: tuple[str, ...] = ()

        if word.startswith(PARAM_TAG):
            meta = self._parse_directions(keyword)
            tag = PARAM_TAG
        else:
            tag = word

        argument = self._find_argument(index, strategy_for(tag, self._strategies))
        if argument is not None:
            self._skip, arg_tok = argument
            params = (arg_tok.text,)
        else:
            self._skip = 1
            params = ()

        end = self._tokens[index + self._skip].span.end
        self._push(Notation(tag, meta, params, Span(marker.span.start, end)))

        if tag == ENDCODE_TAG:
            self._open_run("", Span(end, end))

    def _parse_directions(self, keyword: Token) -> tuple[str, ...]:
        word = keyword.text
        bracket = word.find("[")
        if bracket == -1:
            return ()

        body = word[bracket + 1 :]
        if body in DIRECTIONS:
            return DIRECTIONS[body]

        start = keyword.span.start
        body_start = Position(start.line, start.column + bracket + 1, start.offset + bracket + 1)
        logger.debug("bad direction annotation %r at line %d", body, start.line)
        raise UnexpectedInput(
            body, DIRECTION_EXPECTED, Span(body_start, keyword.span.end), keyword.source
        )

    def _find_argument(self, index: int, strategy: ArgumentStrategy) -> tuple[int, Token] | None:
        """Locate a notation's argument; return (tokens to skip, argument token)."""
        if strategy == ArgumentStrategy.WHITESPACE:
            offset = 2
            tok = self._peek(index + offset)
            while tok is not None and tok.type == TokenType.WS:
                offset += 1
                tok = self._peek(index + offset)
            if tok is not None and tok.type == TokenType.WORD:
                return offset, tok
            return None

        if strategy == ArgumentStrategy.PAREN:
            window = self._tokens[index + 2 : index + 5]
            if (
                len(window) == 3
                and _is_delimiter(window[0], GROUP_OPEN)
                and window[1].type == TokenType.WORD
                and _is_delimiter(window[2], GROUP_CLOSE)
            ):
                return 4, window[1]
            return None

        return None


def _is_code(item: Item) -> bool:
    return isinstance(item, Notation) and item.tag == CODE_TAG


def _is_delimiter(tok: Token, ch: str) -> bool:
    return tok.type == TokenType.DELIMITER and tok.text == ch


def parse_items(
    tokens: list[Token],
    strategies: Mapping[str, ArgumentStrategy] | None = None,
) -> list[Item]:
    """Parse a token list into grammar items. Raises ParseError."""
    return Parser(tokens, strategies).parse()


def parse(source: str, strategies: Mapping[str, ArgumentStrategy] | None = None) -> list[Item]:
    """Convenience function: tokenize and parse comment text."""
    return parse_items(tokenize(source), strategies)
