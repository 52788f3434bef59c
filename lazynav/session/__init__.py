"""Navigation session state, events, errors, and the state machine."""

from __future__ import annotations

from .errors import AtRoot, ListingUnavailable, NavigationError, NoSelection
from .events import (
    Ascend,
    Cancel,
    Commit,
    DescendHistory,
    JumpFirst,
    JumpLast,
    Move,
    NavigationEvent,
    Refresh,
    TextChanged,
    ToggleHidden,
)
from .navigator import Navigator
from .state import Session, join_path, split_path, wrap_selection_index

__all__ = [
    "AtRoot",
    "ListingUnavailable",
    "NavigationError",
    "NoSelection",
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
    "Navigator",
    "Session",
    "join_path",
    "split_path",
    "wrap_selection_index",
]
