"""Knuth-Morris-Pratt search over the text of a document."""

from __future__ import annotations

from typing import Union

from .piecetable import PieceTable


def prefix_table(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-suffix table for ``pattern``."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(pattern: str, table: Union[PieceTable, str]) -> list[int]:
    """Return the start offsets of every occurrence of ``pattern``, overlaps included."""
    text = str(table)
    m, n = len(pattern), len(text)
    if m == 0 or n == 0 or m > n:
        return []

    lps = prefix_table(pattern)
    matches: list[int] = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            matches.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return matches