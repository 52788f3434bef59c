"""Subsequence matching and result ordering for directory entry names.

Matching is case-sensitive and literal: every query character must occur in
the candidate, in order, with anything allowed between them.
"""

from __future__ import annotations

from collections.abc import Sequence


def subsequence_positions(query: str, candidate: str) -> tuple[int, ...] | None:
    """Return leftmost matched positions of ``query`` in ``candidate``.

    ``None`` means no subsequence match exists. An empty query matches with no
    positions.
    """
    positions: list[int] = []
    prev_idx = -1
    for needle in query:
        idx = candidate.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        positions.append(idx)
        prev_idx = idx
    return tuple(positions)


def is_subsequence_match(query: str, candidate: str) -> bool:
    return subsequence_positions(query, candidate) is not None


def filter_and_sort_indices(names: Sequence[str], query: str) -> list[int]:
    """Return indices of kept ``names`` in display order.

    Non-empty queries order by ascending name length, keeping input order for
    ties. An empty query keeps every name and orders them lexicographically.
    """
    if not query:
        return sorted(range(len(names)), key=lambda idx: names[idx])

    kept = [idx for idx, name in enumerate(names) if is_subsequence_match(query, name)]
    kept.sort(key=lambda idx: len(names[idx]))
    return kept


def filter_and_sort(names: Sequence[str], query: str) -> list[str]:
    return [names[idx] for idx in filter_and_sort_indices(names, query)]


__all__ = [
    "filter_and_sort",
    "filter_and_sort_indices",
    "is_subsequence_match",
    "subsequence_positions",
]
