"""Command-line front door for lazynav.

Parses CLI options, resolves the start directory, and configures logging.
Then either prints a filtered listing or dispatches into the interactive
navigator runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .listing import DirectoryLister
from .runtime import run_navigator
from .runtime.config import load_show_hidden
from .session import ListingUnavailable, Navigator
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(log_file: str | None, verbose: bool) -> None:
    """Send logs to ``log_file``; the terminal is owned by the navigator."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def resolve_start_dir(path: Path) -> Path:
    """Return ``path`` as an absolute directory; files start in their parent."""
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    resolved = path.resolve()
    return resolved if resolved.is_dir() else resolved.parent


def print_listing(start_dir: Path, query: str, show_hidden: bool) -> None:
    """Print the entries of ``start_dir`` matching ``query`` in display order."""
    navigator = Navigator(DirectoryLister(show_hidden=show_hidden))
    try:
        session = navigator.start(start_dir)
    except ListingUnavailable as exc:
        raise SystemExit(str(exc)) from exc
    navigator.on_query_changed(session, query)
    for entry in session.visible_entries:
        sys.stdout.write(f"{entry.label}\n")


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch lazynav on a directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        description="Browse directories by fuzzy-filtering their entries and open the chosen file."
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}); remembered for later runs.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--hidden",
        action="store_true",
        default=None,
        help="Show dot-entries (overrides the saved preference for this run).",
    )
    parser.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Print the chosen file path instead of opening it in $EDITOR.",
    )
    parser.add_argument(
        "--query",
        default=None,
        help="Print entries of PATH matching QUERY, in display order, and exit.",
    )
    parser.add_argument("--log-file", default=None, help="Write diagnostic logs to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details (with --log-file).")
    args = parser.parse_args()

    _configure_logging(args.log_file, args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    start_dir = resolve_start_dir(Path(args.path or default_path))

    if args.query is not None:
        show_hidden = load_show_hidden() if args.hidden is None else args.hidden
        print_listing(start_dir, args.query, show_hidden)
        return

    run_navigator(start_dir, args.theme, args.no_color, args.hidden, args.print_only)


if __name__ == "__main__":
    main()
