"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from doxparse.items import Item
from doxparse.lexer import tokenize
from doxparse.parser import parse
from doxparse.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that parses source and returns the item list."""

    def _parse(source: str, **kwargs) -> list[Item]:
        return parse(source, **kwargs)

    return _parse


@pytest.fixture
def types_of():
    """Return a helper mapping tokens to (type, text) pairs."""

    def _types(tokens: list[Token]) -> list[tuple[str, str]]:
        return [(t.type.name, t.text) for t in tokens]

    return _types
