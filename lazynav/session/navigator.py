"""Directory navigation state machine.

``Navigator`` owns the listing collaborator and applies transitions to an
explicitly passed ``Session``. Every transition that changes directory fetches
the new listing before touching the session, so a failed fetch leaves the
session exactly as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..listing import Entry, ListingProvider, parse_listing_line
from .errors import AtRoot, ListingUnavailable, NoSelection
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
)
from .state import Session, join_path, split_path, wrap_selection_index

logger = logging.getLogger(__name__)


class Navigator:
    def __init__(self, list_directory: ListingProvider) -> None:
        self.list_directory = list_directory

    def fetch_entries(self, segments: tuple[str, ...]) -> list[Entry]:
        """Ask the listing provider for ``segments`` and parse its lines."""
        path = join_path(segments)
        try:
            lines: Sequence[str] = self.list_directory(path)
        except OSError as exc:
            raise ListingUnavailable(path, exc) from exc
        return [parse_listing_line(line) for line in lines if line]

    def start(self, path: str | Path) -> Session:
        """Create a session seeded at ``path`` with its listing loaded."""
        segments = split_path(str(path))
        entries = self.fetch_entries(segments)
        logger.debug("session started at %s", join_path(segments))
        return Session(segments=segments, raw_entries=entries)

    def _enter(self, session: Session, segments: tuple[str, ...], history_stack: list[str]) -> None:
        entries = self.fetch_entries(segments)
        session.segments = segments
        session.raw_entries = entries
        session.query = ""
        session.selection_index = 1
        session.history_stack = history_stack
        session.message = ""
        logger.debug("entered %s (history=%s)", session.current_path, history_stack)

    def on_query_changed(self, session: Session, new_query: str) -> None:
        session.query = new_query
        session.selection_index = wrap_selection_index(
            session.selection_index,
            len(session.visible_entries),
        )
        session.message = ""

    def move_selection(self, session: Session, offset: int) -> None:
        session.selection_index = wrap_selection_index(
            session.selection_index + offset,
            len(session.visible_entries),
        )

    def jump_first(self, session: Session) -> None:
        session.selection_index = 1

    def jump_last(self, session: Session) -> None:
        session.selection_index = session.last_valid_index()

    def commit(self, session: Session) -> None:
        """Descend into the selected directory or finish on the selected file."""
        entry = session.selected_entry()
        if entry is None:
            raise NoSelection()
        if entry.is_dir:
            self._enter(session, session.segments + (entry.name,), [])
            return
        session.pending_target = entry.name
        session.finished = True
        logger.debug("committed %s in %s", entry.name, session.current_path)

    def ascend(self, session: Session) -> None:
        if not session.segments:
            raise AtRoot(session.current_path)
        popped = session.segments[-1]
        self._enter(session, session.segments[:-1], [*session.history_stack, popped])

    def descend_history(self, session: Session) -> None:
        if not session.history_stack:
            raise NoSelection("No directory to return to")
        top = session.history_stack[-1]
        self._enter(session, session.segments + (top,), session.history_stack[:-1])

    def refresh(self, session: Session) -> None:
        """Refetch the current directory, keeping the query."""
        entries = self.fetch_entries(session.segments)
        session.raw_entries = entries
        session.selection_index = wrap_selection_index(
            session.selection_index,
            len(session.visible_entries),
        )
        session.message = ""

    def cancel(self, session: Session) -> None:
        session.pending_target = None
        session.finished = True

    def take_pending_target(self, session: Session) -> Path | None:
        """Resolve the committed entry to an absolute path and clear it."""
        name = session.pending_target
        if name is None:
            return None
        session.pending_target = None
        return Path(session.current_path) / name

    def dispatch(self, session: Session, event: NavigationEvent) -> None:
        """Apply one input event; raises ``NavigationError`` on a no-op."""
        if isinstance(event, TextChanged):
            self.on_query_changed(session, event.query)
        elif isinstance(event, Move):
            self.move_selection(session, event.offset)
        elif isinstance(event, JumpFirst):
            self.jump_first(session)
        elif isinstance(event, JumpLast):
            self.jump_last(session)
        elif isinstance(event, Commit):
            self.commit(session)
        elif isinstance(event, Ascend):
            self.ascend(session)
        elif isinstance(event, DescendHistory):
            self.descend_history(session)
        elif isinstance(event, Refresh):
            self.refresh(session)
        elif isinstance(event, Cancel):
            self.cancel(session)
        else:
            raise TypeError(f"unsupported navigation event: {event!r}")


__all__ = ["Navigator"]
