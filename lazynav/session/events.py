"""Discrete input events delivered to the navigation state machine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TextChanged:
    query: str


@dataclass(frozen=True)
class Move:
    offset: int


@dataclass(frozen=True)
class JumpFirst:
    pass


@dataclass(frozen=True)
class JumpLast:
    pass


@dataclass(frozen=True)
class Commit:
    pass


@dataclass(frozen=True)
class Ascend:
    pass


@dataclass(frozen=True)
class DescendHistory:
    pass


@dataclass(frozen=True)
class Cancel:
    pass


@dataclass(frozen=True)
class Refresh:
    """Drop the cached listing and fetch the current directory again."""


@dataclass(frozen=True)
class ToggleHidden:
    """Flip hidden-entry visibility; handled by the runtime, which owns the lister."""


NavigationEvent = (
    TextChanged
    | Move
    | JumpFirst
    | JumpLast
    | Commit
    | Ascend
    | DescendHistory
    | Cancel
    | Refresh
    | ToggleHidden
)


__all__ = [
    "Ascend",
    "Cancel",
    "Commit",
    "DescendHistory",
    "JumpFirst",
    "JumpLast",
    "Move",
    "NavigationEvent",
    "Refresh",
    "TextChanged",
    "ToggleHidden",
]
