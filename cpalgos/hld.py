"""Heavy-light decomposition with range-add / range-sum on tree paths."""

from __future__ import annotations

from collections.abc import Sequence


class LazySegmentTree:
    """Range addition and range sum over ``size`` zero-initialised cells."""

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._sum = [0] * (4 * size)
        self._lazy = [0] * (4 * size)

    def _check(self, left: int, right: int) -> bool:
        if left > right:
            return False
        if left < 0 or right >= self.size:
            raise IndexError(f"range [{left}, {right}] out of bounds")
        return True

    def _apply(self, node: int, length: int, value) -> None:
        self._sum[node] += value * length
        self._lazy[node] += value

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        pending = self._lazy[node]
        if pending:
            self._apply(2 * node, mid - lo + 1, pending)
            self._apply(2 * node + 1, hi - mid, pending)
            self._lazy[node] = 0

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, hi - lo + 1, value)
            return
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._sum[node] = self._sum[2 * node] + self._sum[2 * node + 1]

    def _query(self, node: int, lo: int, hi: int, left: int, right: int):
        if right < lo or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node]
        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        return self._query(2 * node, lo, mid, left, right) + self._query(
            2 * node + 1, mid + 1, hi, left, right
        )

    def update(self, left: int, right: int, value) -> None:
        """Add ``value`` to every cell in ``[left, right]``; empty if ``left > right``."""
        if self._check(left, right):
            self._update(1, 0, self.size - 1, left, right, value)

    def query(self, left: int, right: int):
        """Sum of cells in ``[left, right]``; 0 if ``left > right``."""
        if not self._check(left, right):
            return 0
        return self._query(1, 0, self.size - 1, left, right)


def _rooted(adjacency: Sequence[Sequence[int]], root: int):
    n = len(adjacency)
    if not 0 <= root < n:
        raise IndexError(f"root {root} out of range")
    parent = [-1] * n
    depth = [0] * n
    children: list[list[int]] = [[] for _ in range(n)]
    parent[root] = root
    seen = [False] * n
    seen[root] = True
    order = [root]
    for v in order:
        for to in adjacency[v]:
            if seen[to]:
                if to == parent[v]:
                    continue
                raise ValueError("graph is not a tree")
            seen[to] = True
            parent[to] = v
            depth[to] = depth[v] + 1
            children[v].append(to)
            order.append(to)
    if len(order) != n:
        raise ValueError("graph is not connected")
    return parent, depth, children, order


class HeavyLightDecomposition:
    """Path and subtree updates/queries on a tree.

    With ``weighted_edges`` the value of an edge is kept at its lower vertex and
    paths and subtrees cover edges; otherwise they cover vertices.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0,
                 weighted_edges: bool = True):
        parent, depth, children, order = _rooted(adjacency, root)
        n = len(adjacency)
        self.weighted_edges = weighted_edges
        self._n = n
        self._parent = parent
        self._depth = depth
        self._size = [1] * n
        for v in reversed(order[1:]):
            self._size[parent[v]] += self._size[v]
        heavy = [max(kids, key=self._size.__getitem__) if kids else -1 for kids in children]

        self._head = [0] * n
        self._pos = [0] * n
        self._head[root] = root
        stack = [root]
        position = 0
        while stack:
            v = stack.pop()
            self._pos[v] = position
            position += 1
            for to in reversed(children[v]):
                if to != heavy[v]:
                    self._head[to] = to
                    stack.append(to)
            if heavy[v] != -1:
                self._head[heavy[v]] = self._head[v]
                stack.append(heavy[v])
        self._tree = LazySegmentTree(n)

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"vertex {v} out of range")

    def is_ancestor(self, u: int, v: int) -> bool:
        self._check(u)
        self._check(v)
        return self._pos[u] <= self._pos[v] < self._pos[u] + self._size[u]

    def lca(self, u: int, v: int) -> int:
        self._check(u)
        self._check(v)
        head, depth = self._head, self._depth
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            u = self._parent[head[u]]
        return u if depth[u] < depth[v] else v

    def _segments(self, u: int, v: int):
        self._check(u)
        self._check(v)
        head, depth, pos = self._head, self._depth, self._pos
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            yield pos[head[u]], pos[u]
            u = self._parent[head[u]]
        if depth[u] > depth[v]:
            u, v = v, u
        yield pos[u] + int(self.weighted_edges), pos[v]

    def _subtree_range(self, v: int) -> tuple[int, int]:
        self._check(v)
        return self._pos[v] + int(self.weighted_edges), self._pos[v] + self._size[v] - 1

    def update_path(self, u: int, v: int, value) -> None:
        for left, right in self._segments(u, v):
            self._tree.update(left, right, value)

    def update_subtree(self, v: int, value) -> None:
        self._tree.update(*self._subtree_range(v), value)

    def query_path(self, u: int, v: int):
        return sum(self._tree.query(left, right) for left, right in self._segments(u, v))

    def query_subtree(self, v: int):
        return self._tree.query(*self._subtree_range(v))


class NaiveTree:
    """The same operations as :class:`HeavyLightDecomposition`, by walking the tree."""

    def __init__(self, adjacency: Sequence[Sequence[int]], root: int = 0,
                 weighted_edges: bool = True):
        self._parent, self._depth, self._children, _ = _rooted(adjacency, root)
        self.weighted_edges = weighted_edges
        self._values = [0] * len(adjacency)

    def _path(self, u: int, v: int):
        """Vertices whose values make up the path between ``u`` and ``v``."""
        depth, parent = self._depth, self._parent
        while depth[u] > depth[v]:
            yield u
            u = parent[u]
        while depth[v] > depth[u]:
            yield v
            v = parent[v]
        while u != v:
            yield u
            yield v
            u, v = parent[u], parent[v]
        if not self.weighted_edges:
            yield v

    def _subtree(self, v: int):
        if not self.weighted_edges:
            yield v
        stack = list(self._children[v])
        while stack:
            u = stack.pop()
            yield u
            stack.extend(self._children[u])

    def update_path(self, u: int, v: int, value) -> None:
        for w in list(self._path(u, v)):
            self._values[w] += value

    def update_subtree(self, v: int, value) -> None:
        for w in list(self._subtree(v)):
            self._values[w] += value

    def query_path(self, u: int, v: int):
        return sum(self._values[w] for w in self._path(u, v))

    def query_subtree(self, v: int):
        return sum(self._values[w] for w in self._subtree(v))