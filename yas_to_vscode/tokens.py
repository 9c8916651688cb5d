"""Syntax tree produced by the snippet body parser."""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Lines:
    """Children rendered one below the other."""

    children: Tuple["Token", ...]


@dataclass(frozen=True)
class Inline:
    """Children rendered side by side on a single line.

    A child spanning several lines keeps its newlines inside that one line.
    """

    children: Tuple["Token", ...]


@dataclass(frozen=True)
class Tabstop:
    """A numbered field.

    `contents` is the default text; `None` marks a mirror of another field
    with the same number.
    """

    number: int
    contents: Optional["Token"] = None


@dataclass(frozen=True)
class Choice:
    """A numbered field restricted to a fixed list of alternatives."""

    number: int
    alternatives: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Raw:
    text: str


Token = Union[Lines, Inline, Tabstop, Choice, Raw]


def lines_of(children) -> "Token":
    """Build a `Lines` node, collapsing a single child to itself."""
    children = tuple(children)
    if len(children) == 1:
        return children[0]
    return Lines(children)


def inline_of(children) -> "Token":
    """Build an `Inline` node, collapsing a single child to itself."""
    children = tuple(children)
    if len(children) == 1:
        return children[0]
    return Inline(children)
