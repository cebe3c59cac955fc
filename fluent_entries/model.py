"""Canonical model — the resource shape both codec directions operate over.

The adapter builds these objects from a parsed FTL tree and the decoder
builds them from an entries JSON document. Every node is a frozen dataclass
holding tuples, so a Resource is immutable once built and two resources
compare structurally with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Identifier:
    """Name of a referenced message or term (terms keep their leading ``-``)."""

    name: str


# --- Expressions ---


@dataclass(frozen=True)
class EntityReference:
    """Reference to another message or term."""

    id: Identifier


# Extension point: further expression kinds join this union.
Expression = EntityReference


# --- Pattern elements ---


@dataclass(frozen=True)
class Text:
    """A literal run of text."""

    value: str


@dataclass(frozen=True)
class Placeable:
    """An embedded expression sequence, evaluated to text at runtime."""

    expressions: tuple[Expression, ...] = ()


PatternElement = Union[Text, Placeable]


@dataclass(frozen=True)
class Pattern:
    """The value template of a message."""

    elements: tuple[PatternElement, ...] = ()

    @classmethod
    def from_text(cls, value: str) -> Pattern:
        return cls(elements=(Text(value),))

    @property
    def is_simple_text(self) -> bool:
        """True when the pattern is exactly one Text element."""
        return len(self.elements) == 1 and isinstance(self.elements[0], Text)

    @property
    def text(self) -> str:
        if not self.is_simple_text:
            raise ValueError("pattern is not a single text run")
        return self.elements[0].value

    @property
    def placeables(self) -> list[Placeable]:
        return [e for e in self.elements if isinstance(e, Placeable)]


@dataclass(frozen=True)
class Member:
    """A labeled alternative pattern, e.g. a grammatical variant."""

    key: str
    value: Pattern
    default: bool = False


# --- Entries ---


@dataclass(frozen=True)
class Message:
    """A localizable message.

    Ids are expected to be unique within a resource, but nothing here
    enforces it.
    """

    id: str
    value: Optional[Pattern] = None
    traits: Optional[tuple[Member, ...]] = None


# Extension point: further entry kinds join this union.
Entry = Message


@dataclass(frozen=True)
class Resource:
    """An ordered sequence of entries in declaration order."""

    entries: tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    @property
    def messages(self) -> list[Message]:
        return [e for e in self.entries if isinstance(e, Message)]

    @property
    def ids(self) -> list[str]:
        return [m.id for m in self.messages]

    def get(self, message_id: str) -> Optional[Message]:
        """First message with the given id, or None."""
        for message in self.messages:
            if message.id == message_id:
                return message
        return None
