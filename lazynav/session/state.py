from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..listing import Entry
from ..search import filter_and_sort_indices

PATH_SEPARATOR = "/"


def split_path(path: str) -> tuple[str, ...]:
    """Split an absolute path into its non-empty segments."""
    normalized = os.path.normpath(os.path.abspath(path))
    return tuple(part for part in normalized.split(os.sep) if part)


def join_path(segments: tuple[str, ...]) -> str:
    """Join segments into an absolute path; the root itself is ``/``."""
    return PATH_SEPARATOR + PATH_SEPARATOR.join(segments)


def wrap_selection_index(requested: int, count: int) -> int:
    """Map a requested 1-based index onto ``1..max(1, count)`` circularly.

    Below the first row wraps to the last, past the last row wraps to the first.
    """
    last = max(1, count)
    if requested < 1:
        return last
    if requested > last:
        return 1
    return requested


@dataclass
class Session:
    """Mutable state of one navigation run.

    ``raw_entries`` is ``None`` while the listing for ``segments`` has not
    been fetched. Visible entries are always derived from the cache and the
    query, never stored.
    """

    segments: tuple[str, ...]
    raw_entries: list[Entry] | None = None
    query: str = ""
    selection_index: int = 1
    history_stack: list[str] = field(default_factory=list)
    pending_target: str | None = None
    message: str = ""
    finished: bool = False

    @property
    def current_path(self) -> str:
        return join_path(self.segments)

    @property
    def visible_entries(self) -> list[Entry]:
        entries = self.raw_entries or []
        order = filter_and_sort_indices([entry.name for entry in entries], self.query)
        return [entries[idx] for idx in order]

    def last_valid_index(self) -> int:
        return max(1, len(self.visible_entries))

    def selected_entry(self) -> Entry | None:
        visible = self.visible_entries
        if 1 <= self.selection_index <= len(visible):
            return visible[self.selection_index - 1]
        return None


__all__ = [
    "PATH_SEPARATOR",
    "Session",
    "join_path",
    "split_path",
    "wrap_selection_index",
]
