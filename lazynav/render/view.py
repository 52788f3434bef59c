"""Renderer-agnostic presentation model for a navigation session.

``build_view`` is a pure function of the session: it performs no I/O and
keeps no state, so hosts rebuild it after every event.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..listing import KIND_DIRECTORY
from ..search import subsequence_positions
from ..session import Session
from ..session.state import PATH_SEPARATOR

STYLE_DIRECTORY = "directory"
STYLE_SELECTED_DIRECTORY = "selected-directory"
STYLE_FILE = "file"
STYLE_SELECTED_FILE = "selected-file"


@dataclass(frozen=True)
class EntryRow:
    """One visible entry tagged with its kind and selection."""

    label: str
    name: str
    kind: str
    selected: bool
    match_positions: tuple[int, ...] = ()

    @property
    def style(self) -> str:
        if self.kind == KIND_DIRECTORY:
            return STYLE_SELECTED_DIRECTORY if self.selected else STYLE_DIRECTORY
        return STYLE_SELECTED_FILE if self.selected else STYLE_FILE


@dataclass(frozen=True)
class NavigatorView:
    status_line: str
    path_prefix: str
    query: str
    rows: tuple[EntryRow, ...]
    total_count: int
    selection_index: int
    message: str = ""

    @property
    def match_count(self) -> int:
        return len(self.rows)


def status_line_for(current_path: str, query: str) -> str:
    """Return ``current_path + "/" + query`` without doubling the root slash."""
    return current_path.rstrip(PATH_SEPARATOR) + PATH_SEPARATOR + query


def build_view(session: Session) -> NavigatorView:
    visible = session.visible_entries
    rows = tuple(
        EntryRow(
            label=entry.label,
            name=entry.name,
            kind=entry.kind,
            selected=position == session.selection_index,
            match_positions=subsequence_positions(session.query, entry.name) or (),
        )
        for position, entry in enumerate(visible, start=1)
    )
    status_line = status_line_for(session.current_path, session.query)
    return NavigatorView(
        status_line=status_line,
        path_prefix=status_line[: len(status_line) - len(session.query)],
        query=session.query,
        rows=rows,
        total_count=len(session.raw_entries or ()),
        selection_index=session.selection_index,
        message=session.message,
    )


__all__ = [
    "EntryRow",
    "NavigatorView",
    "STYLE_DIRECTORY",
    "STYLE_FILE",
    "STYLE_SELECTED_DIRECTORY",
    "STYLE_SELECTED_FILE",
    "build_view",
    "status_line_for",
]
