"""doxparse lexer — converts comment text into a flat token stream."""

from __future__ import annotations

from doxparse.tokens import (
    ESCAPE,
    INTRODUCER,
    Position,
    Span,
    Token,
    TokenType,
    is_delimiter,
    is_hspace,
)


class Lexer:
    """Tokenize documentation-comment text into a stream of Token objects.

    Runs of whitespace, word characters and escape characters are merged by
    widening the previous token's span, so no token text is ever copied.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self._source):
            ch = self._source[self._pos]

            if ch == INTRODUCER:
                self._emit(TokenType.MARKER)
            elif ch == ESCAPE:
                self._extend_or_emit(TokenType.MARKER, escape_run=True)
            elif is_delimiter(ch):
                self._emit(TokenType.DELIMITER)
            elif is_hspace(ch):
                self._extend_or_emit(TokenType.WS)
            elif ch == "\n":
                self._emit(TokenType.NEWLINE)
            else:
                self._extend_or_emit(TokenType.WORD)

        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    # ------------------------------------------------------------------
    # Emission
    # ------------------------------------------------------------------

    def _emit(self, tt: TokenType) -> Token:
        start = self._current_pos()
        self._advance()
        tok = Token(tt, Span(start, self._current_pos()), self._source)
        self._tokens.append(tok)
        return tok

    def _extend_or_emit(self, tt: TokenType, *, escape_run: bool = False) -> None:
        prev = self._tokens[-1] if self._tokens else None
        mergeable = prev is not None and prev.type == tt
        if escape_run:
            mergeable = mergeable and prev.is_escape_run

        if not mergeable:
            self._emit(tt)
            return

        self._advance()
        self._tokens[-1] = prev.extended_to(self._current_pos())


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source).tokenize()
