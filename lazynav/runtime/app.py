"""Interactive navigator bootstrap.

Builds the listing provider, navigator, and session for a start directory,
runs the main loop inside raw terminal mode, then hands the committed file to
the opener (or prints it).
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from pathlib import Path

from ..listing import DirectoryLister
from ..session import ListingUnavailable, Navigator
from ..ui_theme import normalize_theme_name, resolve_theme
from .config import load_show_hidden, load_theme_name, save_theme_name
from .loop import run_main_loop
from .opener import launch_editor
from .terminal import TerminalController

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def _screen_fd():
    """Yield a terminal fd to draw on, using ``/dev/tty`` when stdout is captured."""
    if sys.stdout.isatty():
        yield sys.stdout.fileno()
        return
    try:
        fd = os.open("/dev/tty", os.O_WRONLY)
    except OSError as exc:
        raise SystemExit(f"Cannot open terminal for drawing: {exc}") from exc
    try:
        yield fd
    finally:
        os.close(fd)


def run_navigator(
    start_dir: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    show_hidden: bool | None = None,
    print_only: bool = False,
) -> Path | None:
    """Navigate interactively from ``start_dir`` and act on the chosen file.

    Returns the committed path, or ``None`` when the user cancelled.
    """
    if not sys.stdin.isatty():
        raise SystemExit("lazynav needs an interactive terminal (use --query for scripted listing).")

    lister = DirectoryLister(show_hidden=load_show_hidden() if show_hidden is None else show_hidden)
    navigator = Navigator(lister)
    try:
        session = navigator.start(start_dir)
    except ListingUnavailable as exc:
        raise SystemExit(str(exc)) from exc

    if theme_name:
        theme_name = normalize_theme_name(theme_name)
        save_theme_name(theme_name)
    theme = resolve_theme(theme_name or load_theme_name(), no_color=no_color)
    stdin_fd = sys.stdin.fileno()
    with _screen_fd() as screen_fd:
        terminal = TerminalController(stdin_fd, screen_fd)
        with terminal.raw_mode():
            target = run_main_loop(session, navigator, lister, terminal, stdin_fd, theme)

    if target is None:
        logger.debug("navigation cancelled")
        return None
    if print_only:
        sys.stdout.write(f"{target}\n")
        return target

    error = launch_editor(target)
    if error is not None:
        # Still useful for shell pipelines: report the choice with the error.
        sys.stderr.write(f"{error}\n{target}\n")
    return target


__all__ = ["run_navigator"]
