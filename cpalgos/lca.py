"""Lowest common ancestor by binary lifting."""

from __future__ import annotations

from collections.abc import Sequence


class LCA:
    """Ancestor queries on a tree given as adjacency lists (vertices from 0)."""

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0):
        n = len(adjacency)
        if not 0 <= root < n:
            raise IndexError(f"root {root} out of range")
        self._n = n
        self._tin = [-1] * n
        self._tout = [-1] * n
        self._depth = [0] * n
        parent = [-1] * n
        parent[root] = root
        timer = 0

        self._tin[root] = timer = timer + 1
        calls = [(root, 0)]
        while calls:
            v, i = calls[-1]
            if i < len(adjacency[v]):
                calls[-1] = (v, i + 1)
                to = adjacency[v][i]
                if to == parent[v]:
                    continue
                if self._tin[to] != -1:
                    raise ValueError("graph is not a tree")
                parent[to] = v
                self._depth[to] = self._depth[v] + 1
                timer += 1
                self._tin[to] = timer
                calls.append((to, 0))
            else:
                calls.pop()
                timer += 1
                self._tout[v] = timer
        if -1 in self._tin:
            raise ValueError("graph is not connected")

        self._up = [parent]
        for _ in range(1, max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n)])

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def is_ancestor(self, u: int, v: int) -> bool:
        """True if ``u`` lies on the path from the root to ``v`` (inclusive)."""
        self._check(u)
        self._check(v)
        return self._tin[u] <= self._tin[v] <= self._tout[u]

    def lca(self, u: int, v: int) -> int:
        if self.is_ancestor(u, v):
            return u
        if self.is_ancestor(v, u):
            return v
        for level in reversed(self._up):
            if not self.is_ancestor(level[u], v):
                u = level[u]
        return self._up[0][u]

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        return self._depth[u] + self._depth[v] - 2 * self._depth[self.lca(u, v)]