"""Directory entry datatypes and listing-line suffix conventions."""

from __future__ import annotations

from dataclasses import dataclass

KIND_FILE = "file"
KIND_DIRECTORY = "directory"
KIND_EXECUTABLE = "executable"

DIRECTORY_MARKER = "/"
EXECUTABLE_MARKER = "*"

_MARKER_BY_KIND = {
    KIND_FILE: "",
    KIND_DIRECTORY: DIRECTORY_MARKER,
    KIND_EXECUTABLE: EXECUTABLE_MARKER,
}


@dataclass(frozen=True)
class Entry:
    """One item of a directory listing, stored without its suffix marker."""

    name: str
    kind: str = KIND_FILE

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIRECTORY

    @property
    def label(self) -> str:
        """Return the name with its listing marker re-attached."""
        return self.name + _MARKER_BY_KIND.get(self.kind, "")


def parse_listing_line(line: str) -> Entry:
    """Build an ``Entry`` from one raw listing line.

    A trailing ``/`` marks a directory and a trailing ``*`` an executable;
    anything else is a plain file. Only one marker is stripped.
    """
    if len(line) > 1 and line.endswith(DIRECTORY_MARKER):
        return Entry(name=line[:-1], kind=KIND_DIRECTORY)
    if len(line) > 1 and line.endswith(EXECUTABLE_MARKER):
        return Entry(name=line[:-1], kind=KIND_EXECUTABLE)
    return Entry(name=line, kind=KIND_FILE)


__all__ = [
    "DIRECTORY_MARKER",
    "EXECUTABLE_MARKER",
    "Entry",
    "KIND_DIRECTORY",
    "KIND_EXECUTABLE",
    "KIND_FILE",
    "parse_listing_line",
]
