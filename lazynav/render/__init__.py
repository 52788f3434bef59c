"""Presentation model and ANSI frame rendering."""

from __future__ import annotations

from .view import (
    STYLE_DIRECTORY,
    STYLE_FILE,
    STYLE_SELECTED_DIRECTORY,
    STYLE_SELECTED_FILE,
    EntryRow,
    NavigatorView,
    build_view,
    status_line_for,
)
from .ansi import render_frame

__all__ = [
    "STYLE_DIRECTORY",
    "STYLE_FILE",
    "STYLE_SELECTED_DIRECTORY",
    "STYLE_SELECTED_FILE",
    "EntryRow",
    "NavigatorView",
    "build_view",
    "render_frame",
    "status_line_for",
]
