"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

# Annotation syntax characters
INTRODUCER = "@"
ESCAPE = "\\"
GROUP_OPEN = "{"
GROUP_CLOSE = "}"


class TokenType(Enum):
    MARKER = auto()  # @, or a run of backslashes
    DELIMITER = auto()  # { }
    WORD = auto()  # run of anything else
    WS = auto()  # horizontal whitespace (spaces/tabs)
    NEWLINE = auto()  # \n


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A lexer token: a classified view into the source buffer.

    The token never owns its text; ``text`` slices the shared source on demand.
    """

    type: TokenType
    span: Span
    source: str

    @property
    def text(self) -> str:
        return self.source[self.span.start.offset : self.span.end.offset]

    @property
    def is_escape_run(self) -> bool:
        """True for a marker made only of escape characters.

        A marker is either one introducer or a run of escapes, so the first
        character decides.
        """
        return self.type == TokenType.MARKER and self.source[self.span.start.offset] == ESCAPE

    def extended_to(self, end: Position) -> Token:
        """Return this token with its view widened to ``end``."""
        return Token(self.type, Span(self.span.start, end), self.source)


def is_hspace(ch: str) -> bool:
    """Return True if ch is a space or tab."""
    return ch in " \t"


def is_delimiter(ch: str) -> bool:
    """Return True if ch opens or closes a group."""
    return ch == GROUP_OPEN or ch == GROUP_CLOSE


def detokenize(tokens: Iterable[Token]) -> str:
    """Concatenate token texts back into source text."""
    return "".join(tok.text for tok in tokens)
