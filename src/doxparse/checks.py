"""Opt-in structural checks over a parsed item sequence.

The parser accepts unbalanced groups and unmatched code markers; callers that
want them reported run ``check_structure`` on the result.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from doxparse.items import GroupEnd, GroupStart, Item, Notation
from doxparse.notations import CODE_TAG, ENDCODE_TAG
from doxparse.tokens import Span


@dataclass(frozen=True, slots=True)
class StructureIssue:
    """A structural problem found in an item sequence."""

    message: str
    span: Span | None


def check_structure(items: Sequence[Item]) -> list[StructureIssue]:
    """Report unbalanced groups and unmatched code regions, in source order."""
    issues: list[StructureIssue] = []
    open_groups: list[GroupStart] = []
    open_code: Notation | None = None

    for item in items:
        if isinstance(item, GroupStart):
            open_groups.append(item)
        elif isinstance(item, GroupEnd):
            if open_groups:
                open_groups.pop()
            else:
                issues.append(StructureIssue("'@}' without matching '@{'", item.span))
        elif isinstance(item, Notation):
            if item.tag == CODE_TAG:
                open_code = item
            elif item.tag == ENDCODE_TAG:
                if open_code is None:
                    issues.append(StructureIssue("'@endcode' without matching '@code'", item.span))
                open_code = None

    if open_code is not None:
        issues.append(StructureIssue("'@code' is never closed by '@endcode'", open_code.span))
    for group in open_groups:
        issues.append(StructureIssue("'@{' is never closed by '@}'", group.span))

    issues.sort(key=lambda issue: issue.span.start.offset if issue.span else -1)
    return issues
