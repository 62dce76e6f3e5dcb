"""Error types with formatted source context."""

from __future__ import annotations

from doxparse.tokens import Span


class ParseError(Exception):
    """Raised on the first parse error, with span and source context.

    Error spans come from a single token, so they never cross a line.
    """

    def __init__(self, message: str, span: Span, source: str) -> None:
        self.message = message
        self.span = span
        self.source = source
        super().__init__(self.format())

    def source_line(self) -> str:
        """Return the comment line the error starts on."""
        lines = self.source.split("\n")
        idx = self.span.start.line - 1
        return lines[idx] if 0 <= idx < len(lines) else ""

    def format(self, filename: str = "<comment>") -> str:
        start, end = self.span.start, self.span.end
        width = max(1, end.column - start.column) if end.line == start.line else 1
        gutter = " " * len(str(start.line))

        return "\n".join(
            [
                f"error: {self.message}",
                f"{gutter} --> {filename}:{start.line}:{start.column}",
                f"{gutter} |",
                f"{start.line} | {self.source_line()}",
                f"{gutter} | {' ' * (start.column - 1)}{'^' * width}",
            ]
        )


class UnexpectedEndOfInput(ParseError):
    """Input ended where more tokens were required.

    The current grammar never raises this; it is kept for callers that
    match on the full error family.
    """

    def __init__(self, span: Span, source: str) -> None:
        super().__init__("unexpected end of input", span, source)


class UnexpectedInput(ParseError):
    """A literal was found where only ``expected`` literals are accepted."""

    def __init__(self, found: str, expected: tuple[str, ...], span: Span, source: str) -> None:
        self.found = found
        self.expected = expected
        options = ", ".join(f"'{e}'" for e in expected)
        super().__init__(f"unexpected '{found}', expected one of {options}", span, source)
