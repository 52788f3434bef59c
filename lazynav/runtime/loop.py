"""Main interactive event loop for the navigator.

Reads one key at a time, maps it to an event, applies it to the session, and
repaints. Navigation errors ring the bell and show on the status row.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..input import key_to_event, read_key
from ..listing import DirectoryLister
from ..render import build_view, render_frame
from ..session import NavigationError, Navigator, Session, ToggleHidden
from ..ui_theme import DEFAULT_THEME, UITheme
from .config import save_show_hidden
from .terminal import TerminalController

logger = logging.getLogger(__name__)

RESIZE_POLL_MS = 200


@dataclass(frozen=True)
class RuntimeLoopIO:
    """Injected terminal I/O used by ``run_main_loop``."""

    read_key: Callable[[int, int | None], str] = read_key
    terminal_size: Callable[[], os.terminal_size] = shutil.get_terminal_size


def toggle_hidden_entries(navigator: Navigator, session: Session, lister: DirectoryLister) -> None:
    """Flip hidden-entry visibility and refetch, restoring the flag on failure."""
    previous = lister.show_hidden
    lister.show_hidden = not previous
    try:
        navigator.refresh(session)
    except NavigationError:
        lister.show_hidden = previous
        raise
    save_show_hidden(lister.show_hidden)


def run_main_loop(
    session: Session,
    navigator: Navigator,
    lister: DirectoryLister,
    terminal: TerminalController,
    stdin_fd: int,
    theme: UITheme = DEFAULT_THEME,
    io: RuntimeLoopIO | None = None,
) -> Path | None:
    """Run until the session finishes; return the committed file path, if any."""
    io = io or RuntimeLoopIO()
    dirty = True
    last_size: tuple[int, int] | None = None

    while not session.finished:
        size = io.terminal_size()
        if (size.columns, size.lines) != last_size:
            last_size = (size.columns, size.lines)
            dirty = True
        if dirty:
            terminal.paint(render_frame(build_view(session), size.columns, size.lines, theme))
            dirty = False

        key = io.read_key(stdin_fd, RESIZE_POLL_MS)
        if not key:
            continue
        event = key_to_event(key, session.query)
        if event is None:
            continue
        try:
            if isinstance(event, ToggleHidden):
                toggle_hidden_entries(navigator, session, lister)
            else:
                navigator.dispatch(session, event)
        except NavigationError as exc:
            logger.debug("navigation no-op: %s", exc)
            session.message = str(exc)
            terminal.bell()
        dirty = True

    return navigator.take_pending_target(session)


__all__ = ["RESIZE_POLL_MS", "RuntimeLoopIO", "run_main_loop", "toggle_hidden_entries"]
