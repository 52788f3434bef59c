"""Tests for listing-line parsing and the filesystem listing provider."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path

from lazynav.listing import (
    KIND_DIRECTORY,
    KIND_EXECUTABLE,
    KIND_FILE,
    DirectoryLister,
    Entry,
    list_directory_names,
    parse_listing_line,
)
from lazynav.session import Navigator


class ParseListingLineTests(unittest.TestCase):
    def test_suffix_markers_select_kind_and_are_stripped(self) -> None:
        self.assertEqual(parse_listing_line("banana/"), Entry("banana", KIND_DIRECTORY))
        self.assertEqual(parse_listing_line("app*"), Entry("app", KIND_EXECUTABLE))
        self.assertEqual(parse_listing_line("apple"), Entry("apple", KIND_FILE))

    def test_only_last_marker_is_stripped(self) -> None:
        self.assertEqual(parse_listing_line("weird*/"), Entry("weird*", KIND_DIRECTORY))

    def test_label_reattaches_marker(self) -> None:
        self.assertEqual(Entry("docs", KIND_DIRECTORY).label, "docs/")
        self.assertEqual(Entry("run", KIND_EXECUTABLE).label, "run*")
        self.assertEqual(Entry("notes.txt").label, "notes.txt")


class DirectoryListerTests(unittest.TestCase):
    def test_lists_directories_executables_and_files_with_markers(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "docs").mkdir()
            (root / "notes.txt").write_text("n", encoding="utf-8")
            script = root / "run.sh"
            script.write_text("#!/bin/sh\n", encoding="utf-8")
            os.chmod(script, 0o755)

            names = list_directory_names(str(root))

            self.assertEqual(sorted(names), ["docs/", "notes.txt", "run.sh*"])

    def test_hidden_entries_follow_preference(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / ".secret").write_text("s", encoding="utf-8")
            (root / "visible").write_text("v", encoding="utf-8")

            lister = DirectoryLister()
            self.assertEqual(lister(str(root)), ["visible"])

            lister.show_hidden = True
            self.assertEqual(sorted(lister(str(root))), [".secret", "visible"])

    def test_plain_file_ending_in_star_keeps_its_name(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "notes*").write_text("n", encoding="utf-8")

            names = list_directory_names(str(root))
            entry = parse_listing_line(names[0])

            self.assertEqual(entry.name, "notes*")

            navigator = Navigator(DirectoryLister())
            session = navigator.start(root)
            navigator.commit(session)

            target = navigator.take_pending_target(session)
            self.assertEqual(target, root / "notes*")
            self.assertTrue(target.exists())

    def test_missing_directory_raises_os_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone"

            with self.assertRaises(OSError):
                DirectoryLister()(str(missing))


if __name__ == "__main__":
    unittest.main()
