"""Notation keyword table — how each tag finds its argument."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum, auto
from types import MappingProxyType


class ArgumentStrategy(Enum):
    NONE = auto()  # never takes an argument
    WHITESPACE = auto()  # next word after optional whitespace
    PAREN = auto()  # {word} immediately after the keyword


PARAM_TAG = "param"
CODE_TAG = "code"
ENDCODE_TAG = "endcode"

DIRECTION_IN = "in"
DIRECTION_OUT = "out"

# Bracket body after "param[" -> direction flags
DIRECTIONS: dict[str, tuple[str, ...]] = {
    "in]": (DIRECTION_IN,),
    "out]": (DIRECTION_OUT,),
    "in,out]": (DIRECTION_IN, DIRECTION_OUT),
    "out,in]": (DIRECTION_IN, DIRECTION_OUT),
}
DIRECTION_EXPECTED: tuple[str, ...] = ("in]", "out]")


def _make_strategies() -> dict[str, ArgumentStrategy]:
    table: dict[str, ArgumentStrategy] = {}

    def s(strategy: ArgumentStrategy, *tags: str) -> None:
        for tag in tags:
            table[tag] = strategy

    # Single-word argument
    s(ArgumentStrategy.WHITESPACE, PARAM_TAG, "retval", "exception", "throw", "throws")

    # Inline markup
    s(ArgumentStrategy.WHITESPACE, "a", "b", "c", "p", "e", "em", "emoji")

    # Definitions and references
    s(ArgumentStrategy.WHITESPACE, "def", "class", "category", "concept", "enum")
    s(ArgumentStrategy.WHITESPACE, "example", "extends", "file", "sa", "see")

    # Verbatim
    s(ArgumentStrategy.PAREN, CODE_TAG)

    return table


NOTATION_STRATEGIES: Mapping[str, ArgumentStrategy] = MappingProxyType(_make_strategies())


def build_strategies(
    extra: Mapping[str, ArgumentStrategy] | None = None,
) -> dict[str, ArgumentStrategy]:
    """Return the builtin table overlaid with caller-supplied entries."""
    table = dict(NOTATION_STRATEGIES)
    if extra:
        table.update(extra)
    return table


def strategy_for(tag: str, table: Mapping[str, ArgumentStrategy] | None = None) -> ArgumentStrategy:
    """Resolve the argument strategy for a notation tag."""
    if tag == PARAM_TAG:
        return ArgumentStrategy.WHITESPACE
    if table is None:
        table = NOTATION_STRATEGIES
    return table.get(tag, ArgumentStrategy.NONE)
