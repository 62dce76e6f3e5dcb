"""Editor diagnostics for documentation-comment text."""

from __future__ import annotations

from collections.abc import Mapping

from lsprotocol.types import Diagnostic, DiagnosticSeverity, Position, Range

from doxparse.checks import check_structure
from doxparse.errors import ParseError
from doxparse.notations import ArgumentStrategy
from doxparse.parser import parse
from doxparse.tokens import Span

SOURCE = "doxparse"


def _range(span: Span) -> Range:
    # 1-based line/column -> 0-based LSP positions
    return Range(
        start=Position(line=span.start.line - 1, character=span.start.column - 1),
        end=Position(line=span.end.line - 1, character=span.end.column - 1),
    )


def diagnostics(
    source: str,
    strategies: Mapping[str, ArgumentStrategy] | None = None,
) -> list[Diagnostic]:
    """Parse a comment buffer and return its diagnostics.

    A parse error yields a single Error; otherwise each structural issue
    yields a Warning.
    """
    try:
        items = parse(source, strategies)
    except ParseError as exc:
        return [
            Diagnostic(
                range=_range(exc.span),
                message=exc.message,
                severity=DiagnosticSeverity.Error,
                source=SOURCE,
            )
        ]

    result: list[Diagnostic] = []
    for issue in check_structure(items):
        if issue.span is None:
            continue
        result.append(
            Diagnostic(
                range=_range(issue.span),
                message=issue.message,
                severity=DiagnosticSeverity.Warning,
                source=SOURCE,
            )
        )
    return result
