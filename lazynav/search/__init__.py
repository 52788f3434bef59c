"""Fuzzy query engine exports."""

from __future__ import annotations

from .fuzzy import (
    filter_and_sort,
    filter_and_sort_indices,
    is_subsequence_match,
    subsequence_positions,
)

__all__ = [
    "filter_and_sort",
    "filter_and_sort_indices",
    "is_subsequence_match",
    "subsequence_positions",
]
