"""Prefix function and Knuth-Morris-Pratt search."""

from collections.abc import Sequence

_SEPARATOR = object()


def prefix_function(s: Sequence) -> list[int]:
    """Length of the longest proper border of each prefix of ``s``."""
    pref = [0] * len(s)
    border = 0
    for i in range(1, len(s)):
        while border and s[border] != s[i]:
            border = pref[border - 1]
        if s[border] == s[i]:
            border += 1
        pref[i] = border
    return pref


def kmp(pattern: Sequence, text: Sequence) -> list[int]:
    """Start positions of every occurrence of ``pattern`` in ``text``."""
    combined = [*pattern, _SEPARATOR, *text]
    pref = prefix_function(combined)
    k = len(pattern)
    return [i - 2 * k for i in range(k + 1, len(combined)) if pref[i] == k]