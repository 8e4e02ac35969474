"""Counting k-fold repetitions (tandems) in a sequence."""

import sys
from collections.abc import Sequence


def _z_function(p: list) -> list[int]:
    n = len(p)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        if i < right:
            z[i] = min(right - i, z[i - left])
        while i + z[i] < n and p[z[i]] == p[i + z[i]]:
            z[i] += 1
        if i + z[i] > right:
            left, right = i, i + z[i]
    return z


def _collect(s: list, lo: int, hi: int, found: list[list[tuple[int, int]]]) -> None:
    if lo + 1 >= hi:
        return
    m = (lo + hi) // 2
    _collect(s, lo, m, found)
    z1 = _z_function(s[m:hi] + s[lo:m])
    z2 = _z_function(s[lo:m][::-1] + s[m:hi][::-1])
    length = hi - lo
    for k in range(1, length // 2 + 1):
        if z1[length - k] > 0:
            a = max(lo, m - k - z2[k])
            b = min(m, m - 2 * k + z1[length - k] + 1)
            if a < b:
                found[k].append((a, b))
        if z1[length - k] == k:
            found[k].append((m - k, m - k + 1))
        if z2[length - k] > 0:
            a = max(m - k + 1, m - z2[length - k])
            b = min(hi - 2 * k + 1, m - k + z1[k] + 1)
            if a < b:
                found[k].append((a, b))
    _collect(s, m, hi, found)


def count_tandems(sequence: Sequence) -> list[int]:
    """Counts of k-fold repetitions for k = 2 .. len(sequence), in that order."""
    s = list(sequence)
    n = len(s)
    found: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    _collect(s, 0, n, found)
    sc1 = [0] * (n + 4)
    sc2 = [0] * (n + 4)

    def add(unit: int, lef: int, rig: int) -> None:
        if lef == rig:
            return
        upper = (rig - lef) // unit + 2
        sc1[2] += rig - lef
        sc1[upper + 1] -= rig - lef
        sc2[2] += unit
        sc2[upper + 1] -= unit

    for unit in range(1, n + 1):
        deduped = [p for i, p in enumerate(found[unit]) if i == 0 or found[unit][i - 1] != p]
        cur = (0, 0)
        for start, end in deduped:
            if cur[1] < start:
                add(unit, *cur)
                cur = (start, end)
            else:
                cur = (cur[0], end)
        add(unit, *cur)

    result = []
    for i in range(1, n + 1):
        sc1[i] += sc1[i - 1]
        sc2[i] += sc2[i - 1]
        if i >= 2:
            result.append(sc1[i] - (i - 2) * sc2[i])
    return result


def main(argv=None) -> int:
    """Read ``n`` and ``n`` integers from stdin; print counts for k = 2 .. n."""
    data = sys.stdin.read().split()
    n = int(data[0])
    values = [int(x) for x in data[1:1 + n]]
    counts = count_tandems(values)
    sys.stdout.write("".join(f"{c} " for c in counts) + "\n")
    return 0