"""Filesystem listing provider producing suffix-marked entry names."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Sequence

from .types import DIRECTORY_MARKER, EXECUTABLE_MARKER

logger = logging.getLogger(__name__)

ListingProvider = Callable[[str], Sequence[str]]


def _listing_name(child: os.DirEntry) -> str:
    """Return ``child.name`` with ``/`` for directories or ``*`` for executables.

    A name that already ends in ``*`` always gets the marker too, so parsing
    strips only the added one and the entry keeps its real name.
    """
    try:
        if child.is_dir():
            return child.name + DIRECTORY_MARKER
        mode = child.stat().st_mode
    except OSError:
        # Broken symlinks and races with deletion list as plain files.
        mode = 0
    if stat.S_ISREG(mode) and mode & (stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH):
        return child.name + EXECUTABLE_MARKER
    if child.name.endswith(EXECUTABLE_MARKER):
        return child.name + EXECUTABLE_MARKER
    return child.name


def list_directory_names(directory: str, show_hidden: bool = False) -> list[str]:
    """List ``directory`` as raw listing lines in scan order.

    Raises ``OSError`` when the directory cannot be scanned.
    """
    names: list[str] = []
    with os.scandir(directory) as entries:
        for child in entries:
            if not show_hidden and child.name.startswith("."):
                continue
            names.append(_listing_name(child))
    return names


class DirectoryLister:
    """Callable listing provider bound to a hidden-entry preference."""

    def __init__(self, show_hidden: bool = False) -> None:
        self.show_hidden = show_hidden

    def __call__(self, directory: str) -> list[str]:
        try:
            names = list_directory_names(directory, show_hidden=self.show_hidden)
        except OSError as exc:
            logger.warning("cannot list %s: %s", directory, exc)
            raise
        logger.debug("listed %d entries in %s", len(names), directory)
        return names


__all__ = [
    "DirectoryLister",
    "ListingProvider",
    "list_directory_names",
]
