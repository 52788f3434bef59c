"""Directory listing domain: entry types and the filesystem provider.

This package contains non-UI listing primitives:
- entry datatypes and the ``/`` / ``*`` suffix convention
- an ``os.scandir`` backed listing provider
"""

from __future__ import annotations

from .types import (
    DIRECTORY_MARKER,
    EXECUTABLE_MARKER,
    KIND_DIRECTORY,
    KIND_EXECUTABLE,
    KIND_FILE,
    Entry,
    parse_listing_line,
)
from .fs import DirectoryLister, ListingProvider, list_directory_names

__all__ = [
    "DIRECTORY_MARKER",
    "EXECUTABLE_MARKER",
    "KIND_DIRECTORY",
    "KIND_EXECUTABLE",
    "KIND_FILE",
    "Entry",
    "parse_listing_line",
    "DirectoryLister",
    "ListingProvider",
    "list_directory_names",
]
