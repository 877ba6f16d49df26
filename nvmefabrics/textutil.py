"""Small string helpers."""

from __future__ import annotations


def strcount(haystack: str, needle: str) -> int:
    """Count non-overlapping occurrences of *needle* in *haystack*."""
    if not needle:
        raise ValueError("needle must not be empty")
    return haystack.count(needle)


def strends(s: str, postfix: str) -> bool:
    """Return True if *s* ends with *postfix*."""
    return s.endswith(postfix)


def strstarts(s: str, prefix: str) -> bool:
    """Return True if *s* starts with *prefix*."""
    return s.startswith(prefix)