"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the status row and entry rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reverse: str
    reset: str
    status_path: str
    status_query: str
    status_count: str
    status_message: str
    entry_dir: str
    entry_file: str
    entry_executable: str
    entry_match: str
    selected_marker: str


DEFAULT_THEME = UITheme(
    name="default",
    reverse="\033[7m",
    reset="\033[0m",
    status_path="\033[38;5;109m",
    status_query="\033[1;38;5;81m",
    status_count="\033[2;38;5;250m",
    status_message="\033[38;5;214m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    entry_executable="\033[38;5;42m",
    entry_match="\033[1;38;5;229m",
    selected_marker="\033[38;5;44m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reverse="\033[7m",
    reset="\033[0m",
    status_path="\033[38;5;73m",
    status_query="\033[1;38;5;45m",
    status_count="\033[2;38;5;110m",
    status_message="\033[38;5;215m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    entry_executable="\033[38;5;84m",
    entry_match="\033[1;38;5;153m",
    selected_marker="\033[38;5;39m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reverse="",
    reset="",
    status_path="",
    status_query="",
    status_count="",
    status_message="",
    entry_dir="",
    entry_file="",
    entry_executable="",
    entry_match="",
    selected_marker="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
