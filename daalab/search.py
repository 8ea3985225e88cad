"""Horspool string matching."""

from __future__ import annotations


def shift_table(pattern: str) -> dict[str, int]:
    """Return the bad-character shifts for the characters of the pattern.

    Characters absent from the table shift by the full pattern length.
    """
    length = len(pattern)
    return {char: length - 1 - i for i, char in enumerate(pattern[:-1])}


def horspool(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of pattern in text, or -1."""
    m, n = len(pattern), len(text)
    if m == 0:
        return 0
    table = shift_table(pattern)
    i = m - 1
    while i <= n - 1:
        k = 0
        while k < m and text[i - k] == pattern[m - 1 - k]:
            k += 1
        if k == m:
            return i - m + 1
        i += table.get(text[i], m)
    return -1