"""Tests for the presentation model built from a session."""

from __future__ import annotations

import unittest

from lazynav.listing import KIND_DIRECTORY, KIND_EXECUTABLE, KIND_FILE, parse_listing_line
from lazynav.render import (
    STYLE_DIRECTORY,
    STYLE_FILE,
    STYLE_SELECTED_DIRECTORY,
    STYLE_SELECTED_FILE,
    build_view,
    status_line_for,
)
from lazynav.session import Session


def _session(lines: list[str], query: str = "", selection_index: int = 1, segments=("home", "user")) -> Session:
    return Session(
        segments=tuple(segments),
        raw_entries=[parse_listing_line(line) for line in lines],
        query=query,
        selection_index=selection_index,
    )


class BuildViewTests(unittest.TestCase):
    def test_status_line_joins_path_and_query(self) -> None:
        view = build_view(_session(["apple"], query="ap"))

        self.assertEqual(view.status_line, "/home/user/ap")
        self.assertEqual(view.path_prefix, "/home/user/")
        self.assertEqual(view.query, "ap")

    def test_status_line_at_root_has_single_slash(self) -> None:
        self.assertEqual(status_line_for("/", "et"), "/et")
        self.assertEqual(build_view(_session(["etc/"], segments=())).status_line, "/")

    def test_rows_follow_filtered_order_and_tag_selection(self) -> None:
        view = build_view(_session(["apple", "application", "banana/", "app*"], query="ap", selection_index=2))

        self.assertEqual([row.label for row in view.rows], ["app*", "apple", "application"])
        self.assertEqual([row.selected for row in view.rows], [False, True, False])
        self.assertEqual([row.kind for row in view.rows], [KIND_EXECUTABLE, KIND_FILE, KIND_FILE])
        self.assertEqual(view.match_count, 3)
        self.assertEqual(view.total_count, 4)

    def test_row_styles_cover_four_combinations(self) -> None:
        dirs = build_view(_session(["a/", "b/"], selection_index=1)).rows
        files = build_view(_session(["a", "b*"], selection_index=2)).rows

        self.assertEqual([row.style for row in dirs], [STYLE_SELECTED_DIRECTORY, STYLE_DIRECTORY])
        self.assertEqual([row.style for row in files], [STYLE_FILE, STYLE_SELECTED_FILE])
        self.assertEqual(dirs[0].kind, KIND_DIRECTORY)

    def test_rows_carry_match_positions(self) -> None:
        view = build_view(_session(["banana"], query="an"))

        self.assertEqual(view.rows[0].match_positions, (1, 2))

    def test_message_is_passed_through(self) -> None:
        session = _session([])
        session.message = "Already at /"

        view = build_view(session)

        self.assertEqual(view.message, "Already at /")
        self.assertEqual(view.rows, ())

    def test_unfetched_listing_renders_empty(self) -> None:
        view = build_view(Session(segments=("tmp",)))

        self.assertEqual(view.rows, ())
        self.assertEqual(view.total_count, 0)


if __name__ == "__main__":
    unittest.main()
