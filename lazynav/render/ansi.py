"""ANSI frame rendering for the navigator presentation model.

Text is clipped by display width before styling, so escape sequences never
count toward row width.
"""

from __future__ import annotations

import unicodedata

from ..listing import KIND_DIRECTORY, KIND_EXECUTABLE
from ..ui_theme import DEFAULT_THEME, UITheme
from .view import EntryRow, NavigatorView

HEADER_ROWS = 2
SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
    return "".join(out)


def selected_with_ansi(text: str, theme: UITheme) -> str:
    """Apply selection styling without discarding existing ANSI colors."""
    if not text or not theme.reverse:
        return text
    # Keep reverse video active even when the text contains internal resets.
    return theme.reverse + text.replace(theme.reset, theme.reset + theme.reverse) + theme.reset


def _entry_base_style(row: EntryRow, theme: UITheme) -> str:
    if row.kind == KIND_DIRECTORY:
        return theme.entry_dir
    if row.kind == KIND_EXECUTABLE:
        return theme.entry_executable
    return theme.entry_file


def render_entry_row(row: EntryRow, width: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Render one entry row: marker, label with highlighted matches, selection."""
    marker = SELECTED_MARKER if row.selected else UNSELECTED_MARKER
    label = clip_text(row.label, width - display_width(marker))
    base = _entry_base_style(row, theme)
    hits = set(row.match_positions)

    parts: list[str] = []
    if row.selected and theme.selected_marker:
        parts.append(theme.selected_marker + marker + theme.reset)
    else:
        parts.append(marker)
    parts.append(base)
    for idx, ch in enumerate(label):
        if idx in hits and theme.entry_match:
            parts.append(theme.entry_match + ch + theme.reset + base)
        else:
            parts.append(ch)
    if base:
        parts.append(theme.reset)
    text = "".join(parts)
    return selected_with_ansi(text, theme) if row.selected else text


def render_status_row(view: NavigatorView, width: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Render ``path/query`` on the left and counts or the message on the right."""
    right = view.message or f"{view.match_count}/{view.total_count}"
    right_style = theme.status_message if view.message else theme.status_count
    left_budget = max(0, width - display_width(right) - 1)

    prefix = clip_text(view.path_prefix, left_budget)
    query = clip_text(view.query, left_budget - display_width(prefix))
    used = display_width(prefix) + display_width(query)
    gap = max(1, width - used - display_width(right))
    right = clip_text(right, max(0, width - used - gap))

    out = [theme.status_path, prefix, theme.reset, theme.status_query, query, theme.reset]
    if right:
        out.extend([" " * gap, right_style, right, theme.reset])
    return "".join(out)


def entry_window_start(selection_index: int, row_count: int, visible_rows: int) -> int:
    """Return first entry offset so the selected row stays on screen."""
    if visible_rows <= 0 or row_count <= visible_rows:
        return 0
    selected_offset = max(0, selection_index - 1)
    start = max(0, selected_offset - visible_rows + 1)
    return min(start, row_count - visible_rows)


def render_frame(
    view: NavigatorView,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
) -> list[str]:
    """Render the status row, a blank spacer row, and the entry window."""
    width = max(1, width)
    lines = [render_status_row(view, width, theme)]
    if height > 1:
        lines.append("")
    visible_rows = max(0, height - HEADER_ROWS)
    start = entry_window_start(view.selection_index, len(view.rows), visible_rows)
    for row in view.rows[start : start + visible_rows]:
        lines.append(render_entry_row(row, width, theme))
    return lines


__all__ = [
    "HEADER_ROWS",
    "char_display_width",
    "clip_text",
    "display_width",
    "entry_window_start",
    "render_entry_row",
    "render_frame",
    "render_status_row",
    "selected_with_ansi",
]
