"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (`run_navigator`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations


def run_navigator(*args, **kwargs):
    """Lazily import the bootstrap so importing the package stays lightweight."""
    from .app import run_navigator as _run_navigator

    return _run_navigator(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_main_loop",
    "run_navigator",
]
