"""Grammar item types produced by the doxparse parser."""

from __future__ import annotations

from dataclasses import dataclass, field

from doxparse.tokens import Span


@dataclass(frozen=True, slots=True)
class Notation:
    """A recognized annotation: @tag, with optional direction and argument."""

    tag: str
    meta: tuple[str, ...] = ()
    params: tuple[str, ...] = ()
    span: Span | None = field(default=None, compare=False, repr=False)

    @property
    def has_argument(self) -> bool:
        return bool(self.params)


@dataclass(frozen=True, slots=True)
class Text:
    """Coalesced literal content."""

    value: str
    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class GroupStart:
    """Explicit group opening, @{."""

    span: Span | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True, slots=True)
class GroupEnd:
    """Explicit group closing, @}."""

    span: Span | None = field(default=None, compare=False, repr=False)


Item = Notation | Text | GroupStart | GroupEnd
