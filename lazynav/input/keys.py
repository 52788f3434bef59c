"""Key-token to navigation-event mapping.

Backspace on an empty query means "go to the parent directory"; that policy
lives here, not in the state machine.
"""

from __future__ import annotations

from ..session import (
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

KEY_EVENTS: dict[str, NavigationEvent] = {
    "UP": Move(-1),
    "CTRL_P": Move(-1),
    "DOWN": Move(1),
    "CTRL_N": Move(1),
    "HOME": JumpFirst(),
    "ALT_LESS": JumpFirst(),
    "END": JumpLast(),
    "ALT_GREATER": JumpLast(),
    "ENTER": Commit(),
    "LEFT": Ascend(),
    "RIGHT": DescendHistory(),
    "CTRL_F": DescendHistory(),
    "ESC": Cancel(),
    "CTRL_G": Cancel(),
    "CTRL_C": Cancel(),
    "CTRL_R": Refresh(),
    "CTRL_T": ToggleHidden(),
}


def key_to_event(key: str, query: str) -> NavigationEvent | None:
    """Translate one key token into an event given the current query.

    Returns ``None`` for keys with no binding.
    """
    if key == "BACKSPACE":
        if not query:
            return Ascend()
        return TextChanged(query[:-1])
    if key == "CTRL_U":
        return TextChanged("") if query else None
    event = KEY_EVENTS.get(key)
    if event is not None:
        return event
    if len(key) == 1 and key.isprintable():
        return TextChanged(query + key)
    return None


__all__ = ["KEY_EVENTS", "key_to_event"]
