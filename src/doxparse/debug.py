"""Human-readable token and item dumps for debugging."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from doxparse.items import GroupEnd, GroupStart, Item, Notation, Text
from doxparse.tokens import Token


def dump_tokens(tokens: Sequence[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    for tok in tokens:
        pos = tok.span.start
        file.write(f"{pos.line}:{pos.column} {tok.type.name} {tok.text!r}\n")


def dump_items(items: Sequence[Item], *, file: TextIO = sys.stderr) -> None:
    """Print an item sequence to *file*, indenting inside groups."""
    depth = 0
    for item in items:
        if isinstance(item, GroupEnd):
            # Unbalanced closers stay at the left margin
            depth = max(0, depth - 1)
        file.write(f"{_indent(depth)}{_describe(item)}\n")
        if isinstance(item, GroupStart):
            depth += 1


def _indent(depth: int) -> str:
    return "  " * depth


def _describe(item: Item) -> str:
    if isinstance(item, Notation):
        text = f"Notation @{item.tag}"
        if item.meta:
            text += f" [{','.join(item.meta)}]"
        if item.params:
            text += f" {item.params[0]!r}"
        return text
    if isinstance(item, Text):
        return f"Text({item.value!r})"
    if isinstance(item, GroupStart):
        return "GroupStart"
    return "GroupEnd"
