"""Doxygen-style documentation comment lexer and parser."""

from __future__ import annotations

from doxparse.errors import ParseError, UnexpectedEndOfInput, UnexpectedInput
from doxparse.items import GroupEnd, GroupStart, Item, Notation, Text
from doxparse.lexer import tokenize
from doxparse.notations import NOTATION_STRATEGIES, ArgumentStrategy
from doxparse.parser import parse, parse_items

__version__ = "0.1.0"

__all__ = [
    "NOTATION_STRATEGIES",
    "ArgumentStrategy",
    "GroupEnd",
    "GroupStart",
    "Item",
    "Notation",
    "ParseError",
    "Text",
    "UnexpectedEndOfInput",
    "UnexpectedInput",
    "parse",
    "parse_items",
    "tokenize",
]
