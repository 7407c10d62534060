"""Matching utilities reused by the classifier and the rule engine."""

from __future__ import annotations

from typing import List, Optional

from testcolor.utils.types import LineView


def search(s: bytes, p: bytes, n: int, start: int = 0) -> Optional[List[int]]:
    """Naive pattern search of ``p`` in ``s``.

    Returns the offsets where ``p`` begins in ``s``, up to ``n`` occurrences
    (all of them when ``n`` is negative). Matches may overlap. Returns None
    when nothing is found so callers can tell "no matches" apart by equality.
    """
    if not p:
        raise ValueError("search pattern must not be empty")

    result: List[int] = []
    seen = 0
    for i in range(start, len(s)):
        if seen == n:
            break
        if i + len(p) > len(s):
            break
        if s[i:i + len(p)] == p:
            result.append(i)
            seen += 1

    return result or None


def has_prefix(view: LineView, pattern: bytes) -> bool:
    return view.buffer.startswith(pattern, view.offset)


def contains(view: LineView, pattern: bytes) -> bool:
    return search(view.buffer, pattern, 1, start=view.offset) is not None


def first_index(view: LineView, pattern: bytes) -> Optional[int]:
    hits = search(view.buffer, pattern, 1, start=view.offset)
    if hits is None:
        return None
    return hits[0]
